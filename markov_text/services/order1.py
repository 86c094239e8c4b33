"""
Order-1 sentence generator: each word depends only on the previous word.
"""
from __future__ import annotations

import random
from typing import Iterator, Optional

from markov_text.config import settings
from markov_text.services.chain import InMemoryMarkovChain, MarkovChain
from markov_text.services.sentence import check_rng, tokenize_line, walk
from markov_text.services.states import StateKind


class Order1SentenceGenerator:
    """
    Word chain where every state is a single word.

    Usage:
        gen = Order1SentenceGenerator.in_memory()
        gen.feed_line("the cat sat")
        words = list(gen.generate_sentence(random.Random(1)))
    """

    def __init__(self, chain: MarkovChain[str], max_steps: Optional[int] = None):
        """
        Args:
            chain: Chain to train and walk; it is mutated by feeding
            max_steps: Draw limit per sentence (default: settings.MAX_WALK_STEPS)
        """
        if chain is None:
            raise ValueError("chain must not be None")
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")

        self.chain = chain
        self.max_steps = max_steps if max_steps is not None else settings.MAX_WALK_STEPS
        self.begin_marker = chain.find_or_create_state(StateKind.MARKER, settings.BEGIN_MARKER)
        self.end_marker = chain.find_or_create_state(StateKind.MARKER, settings.END_MARKER)

    @classmethod
    def in_memory(cls, **kwargs) -> "Order1SentenceGenerator":
        return cls(InMemoryMarkovChain(), **kwargs)

    # --- training ---
    def feed_word_pair(self, from_word: str, to_word: str):
        """Record that ``to_word`` followed ``from_word``."""
        if from_word is None or to_word is None:
            raise ValueError("words must not be None")

        from_index = self._word_state(from_word)
        to_index = self._word_state(to_word)
        self.chain.add_link(from_index, to_index, 1)

    def feed_start_word(self, word: str):
        """Record that ``word`` opened a sentence."""
        self.chain.add_link(self.begin_marker, self._word_state(word), 1)

    def feed_end_word(self, word: str):
        """Record that ``word`` closed a sentence."""
        self.chain.add_link(self._word_state(word), self.end_marker, 1)

    def feed_line(self, line: str):
        words = tokenize_line(line)
        if not words:
            return

        self.feed_start_word(words[0])
        for prev, word in zip(words, words[1:]):
            self.feed_word_pair(prev, word)
        self.feed_end_word(words[-1])

    # --- generation ---
    def generate_sentence(self, rng: random.Random) -> Iterator[str]:
        check_rng(rng)
        return self._generate_from_state(self.begin_marker, rng)

    def generate_from(self, start_word: str, rng: random.Random) -> Iterator[str]:
        """
        Generate a sentence starting with ``start_word``.

        Unknown words fall back to a normal sentence from the begin marker.
        """
        check_rng(rng)
        state = self.chain.find_state(StateKind.VALUE, start_word)
        return self._generate_from_state(self.begin_marker if state is None else state, rng)

    def _generate_from_state(self, start: int, rng: random.Random) -> Iterator[str]:
        for state in walk(self.chain, start, self.begin_marker, self.end_marker, rng, self.max_steps):
            yield self.chain.get_value(state)

    def _word_state(self, word: str) -> int:
        if word is None:
            raise ValueError("word must not be None")
        return self.chain.find_or_create_state(StateKind.VALUE, word)
