"""Choosing items in proportion to weights without randomness.

Each step picks the item whose choice brings the vector of counts closest,
by cosine similarity, to the vector of weights.
"""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ItemStats:
    """The weight of one item and how many times it was chosen."""

    weight: float
    count: int = 0


def _vector_length(values: Iterable[float]) -> float:
    return math.sqrt(sum(x * x for x in values))


class RawDeterministicChooser:
    """Endless iterator of the indexes of the chosen items."""

    def __init__(self, weights: Iterable[float]) -> None:
        stats = []
        for weight in weights:
            if not weight >= 0.0:
                raise ValueError("all weights must be non-negative")
            stats.append(ItemStats(weight))
        self._stats = stats
        self._weights_length = _vector_length(s.weight for s in stats)
        if not self._weights_length > 0.0:
            raise ValueError("at least one weight must be positive")

    def stats(self) -> tuple[ItemStats, ...]:
        """Weight and count of every item, in the order given."""
        return tuple(self._stats)

    def _similarity_if_chosen(self, index: int) -> float:
        counts = [s.count + (1 if i == index else 0) for i, s in enumerate(self._stats)]
        dot = sum(s.weight * c for s, c in zip(self._stats, counts))
        return dot / (self._weights_length * _vector_length(counts))

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        # Ties go to the last index.
        index = max(reversed(range(len(self._stats))), key=self._similarity_if_chosen)
        self._stats[index] = replace(self._stats[index], count=self._stats[index].count + 1)
        return index


class DeterministicChooser(Generic[T]):
    """Endless iterator of values chosen in proportion to their weights."""

    def __init__(self, values_and_weights: Iterable[tuple[T, float]]) -> None:
        pairs = list(values_and_weights)
        self._values = [value for value, _ in pairs]
        self._raw = RawDeterministicChooser(weight for _, weight in pairs)

    def stats(self) -> list[tuple[T, ItemStats]]:
        """Each value with its weight and count."""
        return list(zip(self._values, self._raw.stats()))

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self._values[next(self._raw)]


@dataclass(frozen=True)
class BoolStats:
    """How many ``True`` values were produced, out of how many."""

    trues: int
    total: int


class DeterministicBoolChooser:
    """Endless iterator of booleans that are ``True`` for the given share."""

    def __init__(self, true_percentage: float) -> None:
        self._chooser = DeterministicChooser(
            [(True, true_percentage), (False, 1.0 - true_percentage)]
        )

    def stats(self) -> BoolStats:
        stats = self._chooser.stats()
        return BoolStats(
            trues=stats[0][1].count,
            total=sum(item.count for _, item in stats),
        )

    def __iter__(self) -> Iterator[bool]:
        return self

    def __next__(self) -> bool:
        return next(self._chooser)


def _show(value: object) -> str:
    return str(value).lower() if isinstance(value, bool) else str(value)


def _distance(v1: list[float], v2: list[float]) -> float:
    if len(v1) != len(v2):
        raise ValueError("vectors must have the same length")
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(v1, v2)))


def _demo_chooser(values_and_weights: list[tuple[object, float]]) -> None:
    weights_sum = sum(w for _, w in values_and_weights)
    normalized = [w / weights_sum for _, w in values_and_weights]
    print(normalized)

    chooser = DeterministicChooser(values_and_weights)
    for _ in range(20):
        chosen = next(chooser)
        stats = chooser.stats()
        total = sum(s.count for _, s in stats)
        ratios = [s.count / total for _, s in stats]
        print(f"{_show(chosen)} {_distance(ratios, normalized)} {ratios}")
    print()


def _demo_bool_chooser(true_percentage: float) -> None:
    chooser = DeterministicBoolChooser(true_percentage)
    print(true_percentage)
    for _ in range(20):
        value = next(chooser)
        stats = chooser.stats()
        ratio = stats.trues / stats.total
        print(f"{_show(value)} {abs(ratio - true_percentage)} {ratio} {stats}")
    print()


def main(argv: list[str] | None = None) -> int:
    """Show how closely the choices follow several sets of weights."""
    parser = argparse.ArgumentParser(prog="deterministic-chooser")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    _demo_chooser([("a", 5.0), ("b", 3.0), ("c", 2.0)])
    _demo_chooser([("A", rng.random()), ("B", rng.random()), ("C", rng.random())])
    _demo_chooser([(True, 5.0)])
    _demo_chooser([(True, 0.0), (False, 0.0001)])
    _demo_chooser([(True, 1.0), (False, 1.0)])
    _demo_bool_chooser(0.25)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())