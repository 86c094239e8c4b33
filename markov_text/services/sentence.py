"""
Shared pieces of the word-level sentence generators.

Both generators train by posting weight-1 links between word states and
generate by walking the chain from a begin marker until the end marker
(or a state with no outgoing edges) is reached.
"""
from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Protocol

from markov_text.services.chain import MarkovChain
from markov_text.utils.logger import setup_logger

logger = setup_logger(__name__)


class SentenceGenerator(Protocol):
    """Learns from lines of text and produces random sentences."""

    def feed_line(self, line: str) -> None:
        ...

    def generate_sentence(self, rng: random.Random) -> Iterator[str]:
        ...


def tokenize_line(line: str) -> List[str]:
    """Split on single spaces, dropping empty and whitespace-only tokens."""
    if line is None:
        raise ValueError("line must not be None")
    return [word for word in line.split(" ") if word.strip()]


def feed_lines(generator: SentenceGenerator, lines: Iterable[str]) -> int:
    """
    Feed every line to a generator, trimming surrounding whitespace.

    Returns:
        Number of lines fed
    """
    count = 0
    for line in lines:
        generator.feed_line(line.strip())
        count += 1
    return count


def check_rng(rng: Optional[random.Random]) -> random.Random:
    if rng is None:
        raise ValueError("rng must not be None")
    return rng


def walk(
    chain: MarkovChain,
    start: int,
    begin: int,
    end: int,
    rng: random.Random,
    max_steps: Optional[int] = None,
) -> Iterator[int]:
    """
    Random walk over ``chain`` yielding every visited state except markers.

    Stops at ``end``, at a dead end, or after ``max_steps`` draws.
    """
    current = start
    steps = 0
    while current != end:
        if current != begin:
            yield current
        if max_steps is not None and steps >= max_steps:
            logger.warning("[WALK] Stopped after %d steps without reaching the end marker", steps)
            return
        current = chain.get_random_next(current, rng)
        steps += 1
        if current is None:
            return
