"""Count how often each word occurs."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from typing import Iterable, Mapping, Sequence


def count_words(words: Iterable[str]) -> dict[str, int]:
    """Occurrences of each word, in order of first appearance."""
    return dict(Counter(words))


def format_counts(counts: Mapping[str, int]) -> list[str]:
    """One line per word: the word and its count, singular or plural."""
    return [
        f"{word} {'times:' if count > 1 else 'time:'}{count}"
        for word, count in counts.items()
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Count the words given, or else the words read from input."""
    parser = argparse.ArgumentParser(description="Count word occurrences.")
    parser.add_argument("words", nargs="*", help="words to count; read from input if none")
    args = parser.parse_args(argv)
    print("input words here:")
    words = args.words if args.words else sys.stdin.read().split()
    for line in format_counts(count_words(words)):
        print(line)
    print("done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())