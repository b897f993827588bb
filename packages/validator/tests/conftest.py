"""Pytest configuration for dataknobs_validator tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dataknobs_validator import NotNullable, Validator  # noqa: E402
from sample_entities import Address, Person, not_empty  # noqa: E402


@pytest.fixture
def address_validator():
    """Address validator without a prefix."""
    return (
        Validator.builder(NotNullable(Address))
        .add_constraint(lambda a: not_empty(a.street), "Address street cannot be null or empty")
        .add_constraint(lambda a: not_empty(a.city), "Address city cannot be null or empty")
        .build()
    )


@pytest.fixture
def prefixed_address_validator():
    """Address validator with a constant prefix."""
    return (
        Validator.builder(NotNullable(Address))
        .set_error_message_prefix(lambda a: "Validation failed for address: ")
        .add_constraint(lambda a: not_empty(a.street), "Address street cannot be null or empty")
        .add_constraint(lambda a: not_empty(a.city), "Address city cannot be null or empty")
        .build()
    )


@pytest.fixture
def person_validator():
    """Person validator with age and name constraints."""
    return (
        Validator.builder(NotNullable(Person))
        .add_constraint(lambda p: p.age >= 18, "Person must be at least 18 years old")
        .add_constraint(lambda p: not_empty(p.name), "Person name cannot be null or empty")
        .build()
    )
