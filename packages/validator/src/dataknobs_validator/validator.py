"""Immutable validator and its evaluation entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ConfigurationError
from .policy import NullPolicy
from .result import EvaluationContext, ValidationResult
from .steps import ConstraintStep, NestedStep, Step

if TYPE_CHECKING:
    from collections.abc import Callable

    from .builder import ValidatorBuilder
    from .exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _empty_prefix(entity: Any) -> str:
    return ""


class Validator(Generic[T]):
    """Evaluates an entity against an ordered, fixed sequence of steps.

    Every step runs on every evaluation, so a single call reports all the
    violations at once. The collected messages are folded into one aggregated
    message: the prefix followed by the messages joined with ``", "``.

    A validator never changes after construction and keeps no per-call state,
    so one instance may be shared freely, including across threads.

    Example:
        ```python
        person_validator = (
            Validator.builder(NotNullable(Person))
            .add_constraint(lambda p: p.age >= 18, "Person must be at least 18 years old")
            .add_nested_validator(lambda p: p.address, address_validator)
            .build()
        )
        result = person_validator.evaluate(person)
        if not result:
            print(result.message)
        ```
    """

    def __init__(
        self,
        policy: NullPolicy,
        steps: Iterable[Step] = (),
        message_prefix: Callable[[T], str] | None = None,
    ):
        """Initialize validator.

        Args:
            policy: How a None entity is treated
            steps: Ordered constraint and nested steps
            message_prefix: Produces the text placed before the joined messages;
                defaults to the empty string
        """
        if not isinstance(policy, NullPolicy):
            raise ConfigurationError(
                "Validator requires a nullability policy (Nullable or NotNullable)",
                context={"policy": policy},
            )
        self._policy = policy
        self._steps: tuple[Step, ...] = tuple(steps)
        self._message_prefix = message_prefix if message_prefix is not None else _empty_prefix

    @staticmethod
    def builder(policy: NullPolicy) -> ValidatorBuilder[Any]:
        """Start building a validator with the given nullability policy."""
        from .builder import ValidatorBuilder

        return ValidatorBuilder(policy)

    @property
    def policy(self) -> NullPolicy:
        return self._policy

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def null_message(self) -> str | None:
        """Message for a None entity, or None when the policy is nullable."""
        return self._policy.null_message

    def evaluate(self, entity: T | None) -> ValidationResult:
        """Validate an entity, collecting every failure.

        Args:
            entity: The value to validate

        Returns:
            Ok when every step passes, otherwise Failed with the aggregated message
        """
        if entity is None:
            null_message = self.null_message
            if null_message is None:
                return ValidationResult.ok()
            logger.debug(f"Rejected None entity: {null_message}")
            return ValidationResult.failed(null_message)

        context = self._run(entity)
        if not context.has_messages:
            return ValidationResult.ok()

        message = context.render(self._message_prefix(entity))
        logger.debug(f"Validation failed: {message}")
        return ValidationResult.failed(message)

    def get_validation_error(self, entity: T | None) -> ValidationError | None:
        """Return the aggregated error for an entity, or None if it is valid."""
        return self.evaluate(entity).error

    def validate(self, entity: T | None) -> T | None:
        """Validate an entity and return it unchanged.

        Raises:
            ValidationError: When the entity fails validation
        """
        self.evaluate(entity).raise_for_error()
        return entity

    def _run(self, entity: T) -> EvaluationContext[T]:
        """Run every step against a fresh context for a present entity."""
        context: EvaluationContext[T] = EvaluationContext(entity)
        for step in self._steps:
            if isinstance(step, ConstraintStep):
                self._apply_constraint(step, context)
            elif isinstance(step, NestedStep):
                self._apply_nested(step, context)
            else:
                raise TypeError(f"Unknown validation step: {type(step).__name__}")
        return context

    @staticmethod
    def _apply_constraint(step: ConstraintStep, context: EvaluationContext[T]) -> None:
        if not step.predicate(context.entity):
            context.add_message(step.message(context.entity))

    def _apply_nested(self, step: NestedStep, context: EvaluationContext[T]) -> None:
        nested_entity = step.accessor(context.entity)
        if nested_entity is None:
            # A missing nested value is reported with this validator's own null message
            if self.null_message is not None:
                context.add_message(self.null_message)
            return

        nested = step.validator
        nested_context = nested._run(nested_entity)
        if nested_context.has_messages:
            rendered = nested_context.render(nested._message_prefix(nested_entity))
            context.add_message(f"({rendered})")

    def __repr__(self) -> str:
        return f"Validator(policy={self._policy!r}, steps={len(self._steps)})"
