"""Estimating the number of distinct elements of a stream with bounded memory.

The estimator keeps a sample of the values seen, each one kept with the
current probability ``factor``. Whenever the sample grows to
``max_set_size`` it is thinned out and the probability is lowered.
"""

from __future__ import annotations

import argparse
import random
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, replace

UNLIMITED_SET_SIZE = 2**64 - 1


@dataclass(frozen=True)
class Params:
    """Tuning of an :class:`ApproximateCountDistinct` estimator."""

    max_set_size: int
    factor: float = 1.0
    factor_adjustment: float = 0.5

    @classmethod
    def with_max_set_size(cls, max_set_size: int) -> Params:
        """Parameters with the given sample limit and the default factors."""
        return cls(max_set_size=max_set_size)

    @classmethod
    def with_unlimited_set_size(cls) -> Params:
        """Parameters whose sample never has to be thinned out."""
        return cls.with_max_set_size(UNLIMITED_SET_SIZE)

    def set_max_set_size(self, max_set_size: int) -> Params:
        """A copy with another sample limit, which must be positive."""
        if not max_set_size > 0:
            raise ValueError("max_set_size must be greater than zero")
        return replace(self, max_set_size=max_set_size)

    def set_factor(self, factor: float) -> Params:
        """A copy with another initial probability, in (0, 1]."""
        if not factor > 0.0:
            raise ValueError("factor must be greater than zero")
        if not factor <= 1.0:
            raise ValueError("factor must be less than or equal to one")
        return replace(self, factor=factor)

    def set_factor_adjustment(self, factor_adjustment: float) -> Params:
        """A copy with another thinning probability, in (0, 1)."""
        if not factor_adjustment > 0.0:
            raise ValueError("factor_adjustment must be greater than zero")
        if not factor_adjustment < 1.0:
            raise ValueError("factor_adjustment must be less than one")
        return replace(self, factor_adjustment=factor_adjustment)


class ApproximateCountDistinct:
    """Streaming estimator of how many distinct values have been seen."""

    def __init__(self, params: Params, rng: random.Random | None = None) -> None:
        self._params = params
        self._rng = rng if rng is not None else random.Random()
        self._seen: set[Hashable] = set()

    @classmethod
    def with_max_set_size(cls, max_set_size: int) -> ApproximateCountDistinct:
        """An estimator whose sample holds at most ``max_set_size`` values."""
        return cls(Params.with_max_set_size(max_set_size))

    @property
    def params(self) -> Params:
        """The current parameters; ``factor`` drops as the sample is thinned."""
        return self._params

    def _chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def see(self, value: Hashable) -> None:
        """Take one value of the stream into account."""
        if self._chance(self._params.factor):
            self._seen.add(value)
            if len(self._seen) >= self._params.max_set_size:
                adjustment = self._params.factor_adjustment
                self._seen = {v for v in self._seen if self._chance(adjustment)}
                self._params = replace(self._params, factor=self._params.factor * adjustment)
        else:
            self._seen.discard(value)

    def see_many(self, values: Iterable[Hashable]) -> None:
        """Take every value of ``values`` into account, in order."""
        for value in values:
            self.see(value)

    def approximate_count_distinct(self) -> float:
        """The current estimate of the number of distinct values."""
        return len(self._seen) / self._params.factor


def _average_estimate(params: Params, runs: int, rng: random.Random) -> float:
    counts = []
    for _ in range(runs):
        counter = ApproximateCountDistinct(params, rng)
        counter.see_many(range(1, 101))
        counts.append(counter.approximate_count_distinct())
    return sum(counts) / len(counts)


def main(argv: list[str] | None = None) -> int:
    """Print the average estimate of 100 distinct values under several settings."""
    parser = argparse.ArgumentParser(prog="approximate-count-distinct")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--runs", type=int, default=100)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    settings = [Params.with_unlimited_set_size()]
    settings += [Params.with_max_set_size(size) for size in range(100, 9, -10)]
    settings += [
        Params.with_max_set_size(1),
        Params.with_max_set_size(10).set_factor_adjustment(0.1),
        Params.with_max_set_size(10).set_factor_adjustment(0.99),
    ]

    for params in settings:
        print(f"params = {params!r}")
        print(f"  average: {_average_estimate(params, args.runs, rng)}")
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())