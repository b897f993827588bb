"""Reusable predicate factories for use with ``add_constraint``.

Each factory returns a plain callable taking one value and returning a bool.
Value predicates can be lifted onto an entity attribute with :func:`field`
and combined with :func:`all_of`, :func:`any_of` and :func:`negate`.

Example:
    ```python
    from dataknobs_validator import predicates as p

    builder.add_constraint(
        p.field(lambda person: person.name, p.is_not_blank()),
        "Person name cannot be null or empty",
    )
    builder.add_constraint(
        p.field(lambda person: person.age, p.in_range(min=18)),
        lambda person: f"Person must be at least 18 years old, got {person.age}",
    )
    ```
"""

from __future__ import annotations

import math
import re
from numbers import Real
from re import Pattern as RegexPattern
from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def field(
    accessor: Callable[[Any], Any],
    predicate: Callable[[Any], bool],
) -> Callable[[Any], bool]:
    """Apply ``predicate`` to the value ``accessor`` extracts from the entity."""
    return lambda entity: predicate(accessor(entity))


def is_present() -> Callable[[Any], bool]:
    """Value must not be None."""
    return lambda value: value is not None


def is_not_blank() -> Callable[[Any], bool]:
    """Value must be present and, for strings and collections, non-empty.

    Strings consisting only of whitespace count as blank.
    """

    def check(value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, (list, dict, set, tuple)):
            return len(value) > 0
        return True

    return check


def in_range(
    min: Real | None = None,
    max: Real | None = None,
    min_exclusive: bool = False,
    max_exclusive: bool = False,
) -> Callable[[Any], bool]:
    """Numeric value must lie within the given bounds.

    Args:
        min: Minimum value (inclusive by default)
        max: Maximum value (inclusive by default)
        min_exclusive: If True, value must be greater than min
        max_exclusive: If True, value must be less than max

    Raises:
        ConfigurationError: If min is greater than max
    """
    if min is not None and max is not None and min > max:
        raise ConfigurationError(
            f"min ({min}) cannot be greater than max ({max})",
            context={"min": min, "max": max},
        )

    def check(value: Any) -> bool:
        # bool is a Real subclass but never a meaningful quantity here
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if isinstance(value, float) and math.isnan(value):
            return False
        if min is not None:
            if value < min or (min_exclusive and value == min):
                return False
        if max is not None:
            if value > max or (max_exclusive and value == max):
                return False
        return True

    return check


def has_length(min: int | None = None, max: int | None = None) -> Callable[[Any], bool]:
    """String or collection length must lie within the given inclusive bounds.

    Raises:
        ConfigurationError: If a bound is negative or min is greater than max
    """
    if min is not None and min < 0:
        raise ConfigurationError(f"min length cannot be negative: {min}")
    if max is not None and max < 0:
        raise ConfigurationError(f"max length cannot be negative: {max}")
    if min is not None and max is not None and min > max:
        raise ConfigurationError(f"min length ({min}) cannot be greater than max ({max})")

    def check(value: Any) -> bool:
        if value is None or not hasattr(value, "__len__"):
            return False
        length = len(value)
        if min is not None and length < min:
            return False
        if max is not None and length > max:
            return False
        return True

    return check


def matches(pattern: str | RegexPattern) -> Callable[[Any], bool]:
    """String value must match the regex pattern from its start."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return lambda value: isinstance(value, str) and regex.match(value) is not None


def one_of(values: Iterable[Any], case_sensitive: bool = True) -> Callable[[Any], bool]:
    """Value must be one of the allowed values.

    Args:
        values: Allowed values
        case_sensitive: If False, string comparisons ignore case

    Raises:
        ConfigurationError: If no allowed values are given
    """
    allowed = list(values)
    if not allowed:
        raise ConfigurationError("one_of requires at least one allowed value")

    if case_sensitive:
        return lambda value: value in allowed

    allowed_lower = [v.lower() if isinstance(v, str) else v for v in allowed]

    def check(value: Any) -> bool:
        candidate = value.lower() if isinstance(value, str) else value
        return candidate in allowed_lower

    return check


def all_of(*predicates: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Every predicate must hold (AND logic)."""
    return lambda value: all(predicate(value) for predicate in predicates)


def any_of(*predicates: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """At least one predicate must hold (OR logic)."""
    return lambda value: any(predicate(value) for predicate in predicates)


def negate(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Predicate must not hold."""
    return lambda value: not predicate(value)


__all__ = [
    "field",
    "is_present",
    "is_not_blank",
    "in_range",
    "has_length",
    "matches",
    "one_of",
    "all_of",
    "any_of",
    "negate",
]
