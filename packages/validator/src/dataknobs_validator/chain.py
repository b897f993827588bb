"""Append-only assembly of validation steps."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .steps import ConstraintStep, NestedStep, Step

if TYPE_CHECKING:
    from collections.abc import Callable

    from .validator import Validator

T = TypeVar("T")


class ConstraintChain(Generic[T]):
    """Ordered sequence of steps accumulated at build time.

    Adding a step only records it; nothing runs until a built validator is
    evaluated. ``freeze()`` hands out an immutable snapshot, so steps added
    afterwards never reach validators built earlier.
    """

    def __init__(self) -> None:
        self._steps: list[Step] = []

    def add_constraint(
        self,
        predicate: Callable[[T], bool],
        message: Callable[[T], str],
    ) -> ConstraintChain[T]:
        """Append a predicate/message step.

        Args:
            predicate: Returns True when the entity satisfies the constraint
            message: Produces the failure message from the entity

        Returns:
            Self for chaining
        """
        self._steps.append(ConstraintStep(predicate, message))
        return self

    def add_nested_validator(
        self,
        accessor: Callable[[T], Any],
        validator: Validator[Any],
    ) -> ConstraintChain[T]:
        """Append a delegation step to a built validator.

        The validator is held by reference. Nesting a validator inside itself,
        directly or through others, is not detected and never terminates.

        Args:
            accessor: Extracts the nested value from the entity
            validator: Validator applied to the nested value

        Returns:
            Self for chaining
        """
        self._steps.append(NestedStep(accessor, validator))
        return self

    def freeze(self) -> tuple[Step, ...]:
        """Snapshot of the steps accumulated so far."""
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)
