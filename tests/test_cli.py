"""
Tests for the sentence generator command line.
"""
import pytest

from markov_text.cli import USAGE, main, parse_args
from markov_text.config import settings


@pytest.fixture
def corpus_file(tmp_path, sample_corpus):
    path = tmp_path / "corpus.txt"
    path.write_text("\n".join(sample_corpus) + "\n", encoding="utf-8")
    return path


class TestParseArgs:
    """Test suite for argument parsing."""

    def test_defaults(self):
        """Test option defaults."""
        args = parse_args(["in.txt", "out.txt"])

        assert args.paths == ["in.txt", "out.txt"]
        assert args.seed is None
        assert args.count == settings.SENTENCE_COUNT
        assert args.order == 2

    def test_negative_count_rejected(self, capsys):
        """Test a negative sentence count is refused."""
        with pytest.raises(SystemExit):
            parse_args(["in.txt", "out.txt", "--count", "-1"])

        assert "--count" in capsys.readouterr().err

    def test_zero_count_allowed(self):
        """Test a zero sentence count is accepted."""
        assert parse_args(["in.txt", "out.txt", "--count", "0"]).count == 0


class TestMain:
    """Test suite for the driver program."""

    @pytest.mark.parametrize("argv", [[], ["only-one.txt"], ["a", "b", "c"]])
    def test_wrong_argument_count_prints_usage(self, argv, capsys, tmp_path):
        """Test a bad argument count prints usage and does nothing."""
        result = main(argv)

        assert result == 1
        assert USAGE in capsys.readouterr().out
        assert list(tmp_path.iterdir()) == []

    def test_writes_default_sentence_count(self, tmp_path):
        """Test the default run writes one sentence per line."""
        source = tmp_path / "in.txt"
        source.write_text("  a b c  \n", encoding="utf-8")
        target = tmp_path / "out.txt"

        assert main([str(source), str(target)]) == 0

        lines = target.read_text(encoding="utf-8").splitlines()
        assert len(lines) == settings.SENTENCE_COUNT
        assert set(lines) == {"a b c"}

    def test_count_option(self, corpus_file, tmp_path):
        """Test --count controls the number of sentences."""
        target = tmp_path / "out.txt"

        main([str(corpus_file), str(target), "--count", "7", "--seed", "1"])

        assert len(target.read_text(encoding="utf-8").splitlines()) == 7

    def test_seed_is_reproducible(self, corpus_file, tmp_path):
        """Test the same seed writes the same file."""
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"

        main([str(corpus_file), str(first), "--count", "25", "--seed", "9"])
        main([str(corpus_file), str(second), "--count", "25", "--seed", "9"])

        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_order_one(self, tmp_path):
        """Test the order-1 chain can drive the program."""
        source = tmp_path / "in.txt"
        source.write_text("x\n", encoding="utf-8")
        target = tmp_path / "out.txt"

        main([str(source), str(target), "--order", "1", "--count", "3"])

        assert target.read_text(encoding="utf-8").splitlines() == ["x", "x", "x"]

    def test_missing_input_propagates(self, tmp_path):
        """Test I/O failures are not swallowed."""
        with pytest.raises(FileNotFoundError):
            main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")])
