#!/usr/bin/env python3
"""
Sentence generator command line.

Trains a word chain on a file of newline-delimited text and writes freshly
generated sentences to an output file, one per line.

Usage:
    markov-text corpus.txt generated.txt
    markov-text corpus.txt generated.txt --seed 42 --count 200 --order 1
"""
from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List, Optional

from markov_text.config import settings
from markov_text.services.order1 import Order1SentenceGenerator
from markov_text.services.order2 import Order2SentenceGenerator
from markov_text.services.sentence import SentenceGenerator, feed_lines
from markov_text.utils.logger import setup_logger

logger = setup_logger(__name__)

USAGE = "Usage: markov-text <input lines> <output file>"


def non_negative_int(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return count


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="markov-text",
        description="Generate random sentences from a Markov chain of words",
    )
    parser.add_argument("paths", nargs="*", help="<input lines> <output file>")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible output")
    parser.add_argument("--count", type=non_negative_int, default=settings.SENTENCE_COUNT,
                        help="Number of sentences to write")
    parser.add_argument("--order", type=int, choices=(1, 2), default=2,
                        help="Markov order of the word chain")
    return parser.parse_args(argv)


def build_generator(order: int) -> SentenceGenerator:
    if order == 1:
        return Order1SentenceGenerator.in_memory()
    return Order2SentenceGenerator.in_memory()


def train(generator: SentenceGenerator, input_path: Path) -> int:
    """Feed every line of ``input_path`` to the generator."""
    with input_path.open("r", encoding="utf-8") as f:
        return feed_lines(generator, f)


def write_sentences(
    generator: SentenceGenerator,
    output_path: Path,
    count: int,
    rng: random.Random,
):
    with output_path.open("w", encoding="utf-8") as f:
        for _ in range(count):
            f.write(" ".join(generator.generate_sentence(rng)) + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if len(args.paths) != 2:
        print(USAGE)
        return 1

    input_path, output_path = (Path(p) for p in args.paths)

    generator = build_generator(args.order)
    lines = train(generator, input_path)
    logger.info(f"[CLI] Trained order-{args.order} chain on {lines} lines from {input_path}")

    rng = random.Random(args.seed)
    write_sentences(generator, output_path, args.count, rng)
    logger.info(f"[CLI] Wrote {args.count} sentences to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
