"""
Word pair payload for order-2 chains.
"""
from __future__ import annotations

from typing import Optional, Tuple

from markov_text.services.states import EqualityPolicy


def _fold(word: Optional[str]) -> Optional[str]:
    return word.casefold() if word is not None else None


class WordPair:
    """
    Two adjacent words; ``second`` is None for a sentence's lone word.

    Equality and hashing ignore case on both words, while the original
    spelling is kept for output.
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: str, second: Optional[str] = None):
        if first is None:
            raise ValueError("first word must not be None")
        self._first = first
        self._second = second

    # Read-only: the hash of a stored pair must never change
    @property
    def first(self) -> str:
        return self._first

    @property
    def second(self) -> Optional[str]:
        return self._second

    def folded(self) -> Tuple[Optional[str], Optional[str]]:
        """Case-folded ``(first, second)`` used as the lookup key."""
        return _fold(self.first), _fold(self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordPair):
            return NotImplemented
        return self.folded() == other.folded()

    def __hash__(self) -> int:
        return hash(self.folded())

    def __repr__(self) -> str:
        return f"WordPair({self.first!r}, {self.second!r})"

    def __str__(self) -> str:
        if self.second is None:
            return f'("{self.first}")'
        return f'("{self.first}", "{self.second}")'


WORD_PAIR_EQUALITY = EqualityPolicy(key=WordPair.folded, name="word-pair-ignore-case")
