"""
Order-2 sentence generator.

States are overlapping word pairs, so each word depends on the two words
before it. A sentence "a b c d" is stored as the path

    ^ -> (a, b) -> (b, c) -> (c, d) -> $

and rebuilt by emitting the first word of every pair plus the second word
of the last pair. A one-word sentence is stored as ``(word, None)``.
"""
from __future__ import annotations

import random
from typing import Iterator, Optional, Union

from markov_text.config import settings
from markov_text.services.chain import InMemoryMarkovChain, MarkovChain
from markov_text.services.sentence import check_rng, tokenize_line, walk
from markov_text.services.states import StateKind
from markov_text.services.word_pair import WORD_PAIR_EQUALITY, WordPair


def _require(name: str, word: Optional[str]):
    if word is None:
        raise ValueError(f"{name} must not be None")


class Order2SentenceGenerator:
    """Word chain where every state is a pair of adjacent words."""

    def __init__(self, chain: MarkovChain[WordPair], max_steps: Optional[int] = None):
        """
        Args:
            chain: Chain to train and walk; should compare pairs ignoring case
            max_steps: Draw limit per sentence (default: settings.MAX_WALK_STEPS)
        """
        if chain is None:
            raise ValueError("chain must not be None")
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")

        self.chain = chain
        self.max_steps = max_steps if max_steps is not None else settings.MAX_WALK_STEPS
        self.begin_marker = chain.find_or_create_state(
            StateKind.MARKER, WordPair(settings.BEGIN_MARKER)
        )
        self.end_marker = chain.find_or_create_state(
            StateKind.MARKER, WordPair(settings.END_MARKER)
        )

    @classmethod
    def in_memory(cls, **kwargs) -> "Order2SentenceGenerator":
        return cls(InMemoryMarkovChain(WORD_PAIR_EQUALITY), **kwargs)

    # --- training ---
    def feed_word_triplet(self, word1: str, word2: str, word3: str):
        """Record that ``word3`` followed ``word1 word2``."""
        _require("word1", word1)
        _require("word2", word2)
        _require("word3", word3)

        from_index = self._pair_state(word1, word2)
        to_index = self._pair_state(word2, word3)
        self.chain.add_link(from_index, to_index, 1)

    def feed_start_pair(self, word1: str, word2: str):
        """Record that a sentence opened with ``word1 word2``."""
        _require("word1", word1)
        _require("word2", word2)

        self.chain.add_link(self.begin_marker, self._pair_state(word1, word2), 1)

    def feed_end_pair(self, word1: str, word2: str):
        """Record that a sentence closed with ``word1 word2``."""
        _require("word1", word1)
        _require("word2", word2)

        self.chain.add_link(self._pair_state(word1, word2), self.end_marker, 1)

    def feed_lone_word(self, word: str):
        """Record a sentence made of a single word."""
        _require("word", word)

        state = self._pair_state(word, None)
        self.chain.add_link(self.begin_marker, state, 1)
        self.chain.add_link(state, self.end_marker, 1)

    def feed_line(self, line: str):
        words = tokenize_line(line)
        if not words:
            return
        if len(words) == 1:
            self.feed_lone_word(words[0])
            return

        self.feed_start_pair(words[0], words[1])
        for word1, word2, word3 in zip(words, words[1:], words[2:]):
            self.feed_word_triplet(word1, word2, word3)
        self.feed_end_pair(words[-2], words[-1])

    # --- generation ---
    def generate_sentence(self, rng: random.Random) -> Iterator[str]:
        check_rng(rng)
        return self._generate_from_state(self.begin_marker, rng)

    def generate_from(self, start: Union[WordPair, str], rng: random.Random) -> Iterator[str]:
        """
        Generate a sentence starting with the pair ``start``.

        A plain string is looked up as a lone-word pair. Unknown pairs fall
        back to a normal sentence from the begin marker.
        """
        check_rng(rng)
        pair = start if isinstance(start, WordPair) else WordPair(start)
        state = self.chain.find_state(StateKind.VALUE, pair)
        return self._generate_from_state(self.begin_marker if state is None else state, rng)

    def _generate_from_state(self, start: int, rng: random.Random) -> Iterator[str]:
        trailing: Optional[str] = None
        for state in walk(self.chain, start, self.begin_marker, self.end_marker, rng, self.max_steps):
            pair = self.chain.get_value(state)
            trailing = pair.second
            yield pair.first
        if trailing is not None:
            yield trailing

    def _pair_state(self, word1: str, word2: Optional[str]) -> int:
        return self.chain.find_or_create_state(StateKind.VALUE, WordPair(word1, word2))
