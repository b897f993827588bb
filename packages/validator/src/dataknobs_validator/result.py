"""Validation result types and the per-evaluation context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .exceptions import ValidationError

T = TypeVar("T")

MESSAGE_SEPARATOR = ", "


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one evaluation: Ok, or Failed with one aggregated message.

    Results are immutable so the same validator evaluated against the same
    entity always yields equal results.
    """

    message: str | None = None

    @property
    def valid(self) -> bool:
        """True when no failure message was produced."""
        return self.message is None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    @property
    def error(self) -> ValidationError | None:
        """The aggregated failure as an exception, or None on success."""
        if self.message is None:
            return None
        return ValidationError(self.message)

    def raise_for_error(self) -> None:
        """Raise the aggregated ValidationError if this result failed.

        Raises:
            ValidationError: When the result is not valid
        """
        error = self.error
        if error is not None:
            raise error

    @classmethod
    def ok(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls(message=None)

    @classmethod
    def failed(cls, message: str) -> ValidationResult:
        """Create a failed validation result.

        Args:
            message: The aggregated failure message

        Returns:
            Failed ValidationResult
        """
        return cls(message=message)


@dataclass
class EvaluationContext(Generic[T]):
    """Ephemeral state for a single run of a validator's steps.

    One context is created per evaluation and discarded once the result is
    rendered, so evaluations never share mutable state.
    """

    entity: T
    messages: list[str] = field(default_factory=list)

    def add_message(self, message: str) -> None:
        """Record a failure message, preserving step order."""
        self.messages.append(message)

    @property
    def has_messages(self) -> bool:
        return bool(self.messages)

    def render(self, prefix: Any = "") -> str:
        """Join the collected messages behind ``prefix``.

        Args:
            prefix: Text placed once in front of the joined messages

        Returns:
            The aggregated message string
        """
        return f"{prefix}{MESSAGE_SEPARATOR.join(self.messages)}"
