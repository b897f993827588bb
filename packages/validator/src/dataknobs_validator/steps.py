"""The two kinds of step a validator runs, in declaration order.

A step is either a ``ConstraintStep`` (a predicate paired with a message
producer) or a ``NestedStep`` (delegation of a field to another validator).
``Step`` is the closed union of the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable

    from .validator import Validator

T = TypeVar("T")


@dataclass(frozen=True)
class ConstraintStep(Generic[T]):
    """A predicate over the whole entity and the message reported when it fails."""

    predicate: Callable[[T], bool]
    message: Callable[[T], str]


@dataclass(frozen=True)
class NestedStep(Generic[T]):
    """Validation of a sub-value through another, already built, validator.

    Attributes:
        accessor: Extracts the nested value from the parent entity; may return None
        validator: The validator applied to the nested value
    """

    accessor: Callable[[T], Any]
    validator: Validator[Any]


Step = Union[ConstraintStep, NestedStep]
