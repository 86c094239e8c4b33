"""
State kinds, equality policies and errors shared by every chain store.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable


class StateKind(Enum):
    """
    Kind of a chain state.

    Only matters when looking a state up by value: marker states hold
    bookkeeping payloads (sentence begin/end) that must not collide with
    real values. Value and marker states may link to each other freely.
    """
    VALUE = "value"
    MARKER = "marker"


class InvalidStateError(IndexError):
    """Raised when a state index does not name an existing state."""

    def __init__(self, name: str, index: int):
        super().__init__(f"Invalid {name} index: {index}")
        self.name = name
        self.index = index


def _identity(value: Any) -> Hashable:
    return value


@dataclass(frozen=True)
class EqualityPolicy:
    """
    Decides when two state payloads are the same state.

    ``key`` maps a payload to a hashable lookup key; payloads with equal
    keys are deduplicated into one state.
    """
    key: Callable[[Any], Hashable] = _identity
    name: str = "natural"

    def lookup_key(self, value: Any) -> Hashable:
        return self.key(value)


NATURAL_EQUALITY = EqualityPolicy()
