"""
Chain engine and sentence generators.
"""
from markov_text.services.chain import ChainStats, InMemoryMarkovChain, MarkovChain
from markov_text.services.order1 import Order1SentenceGenerator
from markov_text.services.order2 import Order2SentenceGenerator
from markov_text.services.sentence import SentenceGenerator, feed_lines, tokenize_line
from markov_text.services.states import (
    NATURAL_EQUALITY,
    EqualityPolicy,
    InvalidStateError,
    StateKind,
)
from markov_text.services.word_pair import WORD_PAIR_EQUALITY, WordPair

__all__ = [
    "ChainStats",
    "EqualityPolicy",
    "InMemoryMarkovChain",
    "InvalidStateError",
    "MarkovChain",
    "NATURAL_EQUALITY",
    "Order1SentenceGenerator",
    "Order2SentenceGenerator",
    "SentenceGenerator",
    "StateKind",
    "WORD_PAIR_EQUALITY",
    "WordPair",
    "feed_lines",
    "tokenize_line",
]
