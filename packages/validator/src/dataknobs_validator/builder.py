"""Builder for assembling validators step by step."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .chain import ConstraintChain
from .exceptions import ConfigurationError
from .policy import NotNullable, Nullable, NullPolicy
from .validator import Validator

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _constant(message: str) -> Callable[[Any], str]:
    return lambda entity: message


class ValidatorBuilder(Generic[T]):
    """Fluent builder for :class:`Validator`.

    The nullability policy is mandatory and given up front; the message prefix
    is optional; constraints and nested validators are appended in the order
    they will run. ``build()`` may be called any number of times, and each
    built validator keeps the steps present at the time of the call.

    Example:
        ```python
        address_validator = (
            ValidatorBuilder.not_nullable(Address)
            .set_error_message_prefix(lambda a: "Validation failed for address: ")
            .add_constraint(lambda a: bool(a.street), "Address street cannot be null or empty")
            .add_constraint(lambda a: bool(a.city), "Address city cannot be null or empty")
            .build()
        )
        ```
    """

    def __init__(self, policy: NullPolicy):
        """Initialize builder.

        Args:
            policy: ``Nullable()`` or ``NotNullable(label)``

        Raises:
            ConfigurationError: If policy is not a nullability policy
        """
        if not isinstance(policy, NullPolicy):
            raise ConfigurationError(
                "A nullability policy (Nullable or NotNullable) must be set before building",
                context={"policy": policy},
            )
        self._policy = policy
        self._message_prefix: Callable[[T], str] | None = None
        self._chain: ConstraintChain[T] = ConstraintChain()

    @classmethod
    def not_nullable(cls, label: str | type) -> ValidatorBuilder[Any]:
        """Builder whose validators reject a None entity, naming ``label``."""
        return cls(NotNullable(label))

    @classmethod
    def nullable(cls) -> ValidatorBuilder[Any]:
        """Builder whose validators accept a None entity."""
        return cls(Nullable())

    def set_error_message_prefix(
        self, prefix: Callable[[T], str] | None
    ) -> ValidatorBuilder[T]:
        """Set the function producing the text placed before the joined messages.

        Args:
            prefix: Maps the entity to a prefix, or None for no prefix

        Returns:
            Self for chaining
        """
        self._message_prefix = prefix
        return self

    def add_constraint(
        self,
        predicate: Callable[[T], bool],
        message: Callable[[T], str] | str,
    ) -> ValidatorBuilder[T]:
        """Add a constraint checked against the whole entity.

        Args:
            predicate: Returns True when the entity is valid
            message: Failure message, or a function producing it from the entity

        Returns:
            Self for chaining
        """
        if isinstance(message, str):
            message = _constant(message)
        self._chain.add_constraint(predicate, message)
        return self

    def add_nested_validator(
        self,
        accessor: Callable[[T], Any],
        validator: Validator[Any],
    ) -> ValidatorBuilder[T]:
        """Add a nested validator for a value reached through ``accessor``.

        Args:
            accessor: Extracts the nested value from the entity
            validator: An already built validator for the nested value

        Returns:
            Self for chaining

        Raises:
            ConfigurationError: If validator is not a built Validator
        """
        if not isinstance(validator, Validator):
            raise ConfigurationError(
                "Nested validator must be a built Validator",
                context={"validator": type(validator).__name__},
            )
        self._chain.add_nested_validator(accessor, validator)
        return self

    def build(self) -> Validator[T]:
        """Build an immutable validator from the current configuration."""
        validator: Validator[T] = Validator(
            self._policy,
            self._chain.freeze(),
            self._message_prefix,
        )
        logger.debug(f"Built {validator!r}")
        return validator
