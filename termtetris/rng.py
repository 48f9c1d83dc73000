"""Random numbers for choosing pieces, colours and spawn columns."""

from __future__ import annotations

import argparse
import math
import random
from typing import Sequence

_RAND_MAX = 2**31 - 1


def _lround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Rand:
    """A random source with the draws the games need."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def uniform(self, begin: int, end: int) -> int:
        """Return an integer drawn evenly from ``begin`` to ``end``, both included.

        The first draw is thrown away, as the games always did.
        """
        if begin > end:
            raise ValueError(f"empty range: {begin} > {end}")
        self._random.randint(begin, end)
        return self._random.randint(begin, end)

    def normal(self, average: float, variance: float, begin: int, end: int) -> int:
        """Return a rounded normal draw, redrawn until it lies in ``begin..end``.

        ``variance`` is the spread handed to the distribution (its standard
        deviation). The first draw is thrown away.
        """
        if variance <= 0:
            raise ValueError("spread must be positive")
        if begin > end:
            raise ValueError(f"empty range: {begin} > {end}")
        self._random.gauss(average, variance)
        value = _lround(self._random.gauss(average, variance))
        while not begin <= value <= end:
            value = _lround(self._random.gauss(average, variance))
        return value

    def rand_num(self, begin: int, end: int) -> int:
        """Return ``begin`` plus a scaled fraction of the span, truncated.

        ``end`` itself only comes up when the raw draw is at its maximum.
        """
        fraction = self._random.randint(0, _RAND_MAX) / _RAND_MAX
        return int(begin + (end - begin) * fraction)


_shared: Rand | None = None


def shared_rand() -> Rand:
    """Return the one process-wide random source, creating it on first use."""
    global _shared
    if _shared is None:
        _shared = Rand()
    return _shared


def main(argv: Sequence[str] | None = None) -> int:
    """Print five uniform draws from 1..9, a rule, then fifteen normal draws."""
    parser = argparse.ArgumentParser(description="Show sample random draws.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the draws")
    args = parser.parse_args(argv)
    rng = Rand(args.seed) if args.seed is not None else shared_rand()
    for _ in range(5):
        print(rng.uniform(1, 9))
    print("******************")
    for _ in range(15):
        print(rng.normal(8, 1.0, 1, 15))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())