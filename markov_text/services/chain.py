"""
Markov chain storage.

``MarkovChain`` is the capability contract the sentence generators are
written against; ``InMemoryMarkovChain`` is the in-process implementation
backed by one ``WeightedAdjacency`` per state.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, List, Optional, Protocol, Tuple, TypeVar

from markov_text.services.adjacency import WeightedAdjacency
from markov_text.services.states import (
    NATURAL_EQUALITY,
    EqualityPolicy,
    InvalidStateError,
    StateKind,
)
from markov_text.utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


class MarkovChain(Protocol[T]):
    """Operations every chain store must support."""

    def find_state(self, kind: StateKind, value: T) -> Optional[int]:
        """Index of the state holding ``value``, or None if absent."""
        ...

    def find_or_create_state(self, kind: StateKind, value: T) -> int:
        """Index of the state holding ``value``, creating it if needed."""
        ...

    def get_value(self, state: int) -> T:
        """Payload of a state. Raises InvalidStateError for bad indices."""
        ...

    def add_link(self, from_state: int, to_state: int, weight: int) -> None:
        """Accumulate ``max(0, weight)`` on the edge ``from_state -> to_state``."""
        ...

    def get_random_next(self, from_state: int, rng: random.Random) -> Optional[int]:
        """Weighted random successor of ``from_state``, or None at a dead end."""
        ...


@dataclass
class ChainStats:
    """Size summary of a chain."""
    state_count: int = 0
    value_states: int = 0
    marker_states: int = 0
    edge_count: int = 0
    total_weight: int = 0


@dataclass
class _State(Generic[T]):
    kind: StateKind
    value: T
    links: WeightedAdjacency


class InMemoryMarkovChain(Generic[T]):
    """
    Markov chain held entirely in memory.

    States are deduplicated per kind using an equality policy and receive
    stable, sequential indices that are never reused.
    """

    def __init__(self, policy: EqualityPolicy = NATURAL_EQUALITY):
        """
        Initialize an empty chain.

        Args:
            policy: Equality policy used to deduplicate state payloads
        """
        if policy is None:
            raise ValueError("policy must not be None")

        self.policy = policy
        self._states: List[_State[T]] = []
        self._indexes: Dict[StateKind, Dict[Hashable, int]] = {
            kind: {} for kind in StateKind
        }

    def __len__(self) -> int:
        return len(self._states)

    def find_state(self, kind: StateKind, value: T) -> Optional[int]:
        return self._indexes[kind].get(self.policy.lookup_key(value))

    def find_or_create_state(self, kind: StateKind, value: T) -> int:
        key = self.policy.lookup_key(value)
        indexes = self._indexes[kind]
        index = indexes.get(key)
        if index is None:
            index = len(self._states)
            self._states.append(_State(kind, value, WeightedAdjacency()))
            indexes[key] = index
            logger.debug("[CHAIN] Created %s state %d: %r", kind.value, index, value)
        return index

    def get_value(self, state: int) -> T:
        self._check_state("state", state)
        return self._states[state].value

    def get_kind(self, state: int) -> StateKind:
        self._check_state("state", state)
        return self._states[state].kind

    def add_link(self, from_state: int, to_state: int, weight: int):
        self._check_state("from_state", from_state)
        self._check_state("to_state", to_state)
        self._states[from_state].links.add(to_state, weight)

    def get_random_next(self, from_state: int, rng: random.Random) -> Optional[int]:
        self._check_state("from_state", from_state)
        return self._states[from_state].links.draw(rng)

    # --- inspection ---
    def get_weight(self, from_state: int, to_state: int) -> int:
        """Accumulated weight of ``from_state -> to_state`` (0 if unlinked)."""
        self._check_state("from_state", from_state)
        self._check_state("to_state", to_state)
        return self._states[from_state].links.weight_of(to_state)

    def transitions(self, from_state: int) -> List[Tuple[int, int]]:
        """``(target, weight)`` pairs leaving ``from_state`` in sampling order."""
        self._check_state("from_state", from_state)
        return self._states[from_state].links.items()

    def stats(self) -> ChainStats:
        stats = ChainStats(state_count=len(self._states))
        for state in self._states:
            if state.kind is StateKind.MARKER:
                stats.marker_states += 1
            else:
                stats.value_states += 1
            stats.edge_count += len(state.links)
            stats.total_weight += state.links.total_weight()
        return stats

    # --- helpers ---
    def _check_state(self, name: str, index: Any):
        if not isinstance(index, int) or index < 0 or index >= len(self._states):
            raise InvalidStateError(name, index)
