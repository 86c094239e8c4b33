"""
Tests for the order-2 WordPair payload.
"""
import pytest

from markov_text.services.chain import InMemoryMarkovChain
from markov_text.services.states import StateKind
from markov_text.services.word_pair import WORD_PAIR_EQUALITY, WordPair


class TestWordPair:
    """Test suite for WordPair."""

    def test_initialization(self):
        """Test pair keeps both words as given."""
        pair = WordPair("The", "Cat")

        assert pair.first == "The"
        assert pair.second == "Cat"

    def test_second_defaults_to_none(self):
        """Test a lone word has no second word."""
        assert WordPair("x").second is None

    def test_first_required(self):
        """Test a missing first word is rejected."""
        with pytest.raises(ValueError):
            WordPair(None, "cat")

    def test_words_are_read_only(self):
        """Test a stored pair cannot be edited in place."""
        pair = WordPair("The", "Cat")

        with pytest.raises(AttributeError):
            pair.first = "dog"
        with pytest.raises(AttributeError):
            pair.second = "dog"
        assert pair == WordPair("the", "cat")

    def test_equality_ignores_case(self):
        """Test pairs compare case-insensitively on both words."""
        assert WordPair("The", "Cat") == WordPair("the", "cat")
        assert hash(WordPair("The", "Cat")) == hash(WordPair("tHE", "cAT"))

    def test_inequality(self):
        """Test different words or a missing second word differ."""
        assert WordPair("the", "cat") != WordPair("the", "dog")
        assert WordPair("the") != WordPair("the", "")
        assert WordPair("a", "b") != ("a", "b")

    def test_str(self):
        """Test readable forms with and without a second word."""
        assert str(WordPair("a", "b")) == '("a", "b")'
        assert str(WordPair("a")) == '("a")'

    def test_dedup_in_chain(self):
        """Test a chain with the pair policy merges differently cased pairs."""
        chain = InMemoryMarkovChain(WORD_PAIR_EQUALITY)
        first = chain.find_or_create_state(StateKind.VALUE, WordPair("The", "Cat"))
        second = chain.find_or_create_state(StateKind.VALUE, WordPair("the", "cat"))

        assert first == second
        assert chain.get_value(first).first == "The"
