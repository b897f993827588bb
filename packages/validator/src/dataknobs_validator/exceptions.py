"""Custom exceptions for the dataknobs_validator package.

This module defines exception types for the validator package,
built on the common exception framework from dataknobs_common.

Example:
    ```python
    from dataknobs_validator.exceptions import ValidationError

    try:
        person_validator.validate(person)
    except ValidationError as e:
        logger.error(f"Rejected: {e}")
    ```
"""

from __future__ import annotations

from typing import Any, Dict

from dataknobs_common import (
    ConfigurationError as BaseConfigurationError,
    DataknobsError,
    ValidationError as BaseValidationError,
)


class ValidatorError(DataknobsError):
    """Base exception for the validator package."""

    pass


class ValidationError(ValidatorError, BaseValidationError):
    """Raised when an entity fails validation.

    The message is the single aggregated string produced by a validator: the
    optional prefix followed by every collected failure message, comma-joined.
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        self.message = message
        super().__init__(message, context=context, details=details)


class ConfigurationError(ValidatorError, BaseConfigurationError):
    """Raised when a validator or predicate is configured incorrectly.

    Common scenarios include:
    - Building a validator without a nullability policy
    - Nesting something that is not a built validator
    - Predicate factories given inconsistent bounds
    """

    pass


__all__ = [
    "ValidatorError",
    "ValidationError",
    "ConfigurationError",
]
