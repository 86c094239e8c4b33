"""
Shared pytest fixtures for chain and generator tests.
"""
import random
from typing import List

import pytest


@pytest.fixture
def sample_corpus() -> List[str]:
    """Sample training lines for the word generators."""
    return [
        "Hello friend how are you today",
        "The universe is full of amazing wonders",
        "I love exploring new planets and stars",
        "Would you like to play a game together",
        "The stars are beautiful tonight",
        "Friends always support each other",
        "I feel happy when we talk together",
        "The universe is a wonderful adventure",
    ]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random number generator."""
    return random.Random(1234)


class FixedRandom(random.Random):
    """Random whose ``randrange`` always returns a preset value."""

    def __init__(self, value: int):
        super().__init__(0)
        self.value = value

    def randrange(self, *args, **kwargs):
        return self.value


@pytest.fixture
def fixed_rng():
    """Factory for a Random that always draws the given value."""
    return FixedRandom
