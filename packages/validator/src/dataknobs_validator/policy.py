"""Nullability policies deciding how a validator treats a ``None`` entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .exceptions import ConfigurationError

NULL_ENTITY_MESSAGE = "Entity to validate cannot be null for class {label}"


class NullPolicy(ABC):
    """Base class for the two nullability policies."""

    @property
    @abstractmethod
    def null_message(self) -> str | None:
        """Message reported for a ``None`` entity, or None when it is accepted."""
        pass


@dataclass(frozen=True)
class Nullable(NullPolicy):
    """A ``None`` entity is accepted without running any step."""

    @property
    def null_message(self) -> str | None:
        return None


@dataclass(frozen=True)
class NotNullable(NullPolicy):
    """A ``None`` entity is rejected with a message naming ``label``.

    Args:
        label: Human-readable identifier of the entity, usually its type name.
            A class may be given instead, in which case its ``__name__`` is used.
    """

    label: str

    def __init__(self, label: str | type):
        if isinstance(label, type):
            label = label.__name__
        if not isinstance(label, str) or not label:
            raise ConfigurationError(
                "NotNullable requires a non-empty label or a class",
                context={"label": label},
            )
        object.__setattr__(self, "label", label)

    @property
    def null_message(self) -> str | None:
        return NULL_ENTITY_MESSAGE.format(label=self.label)
