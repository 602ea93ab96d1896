"""Probabilities of the totals obtained by rolling several dice."""

from __future__ import annotations

import argparse
from collections import Counter

DEFAULT_FACES = 6
_MAX_ARGUMENT = 255

_HEADER = ("N", "P(X=N)", "P(X≤N)", "P(X≥N)")


def distribution(dices: int, faces: int = DEFAULT_FACES) -> dict[int, int]:
    """Map every possible total to the number of rolls that give it, lowest total first."""
    if dices < 1:
        raise ValueError("Number of dices cannot be zero")
    if faces < 1:
        raise ValueError("Number of faces must be at least one")

    counts: Counter[int] = Counter({0: 1})
    for _ in range(dices):
        rolled: Counter[int] = Counter()
        for total, count in counts.items():
            for face in range(1, faces + 1):
                rolled[total + face] += count
        counts = rolled
    return {total: counts[total] for total in range(dices, dices * faces + 1)}


def _format_probability(count: int, possibilities: int) -> str:
    return f"{count}:{possibilities} = {100.0 * count / possibilities:.2f}%"


def _render(rows: list[tuple[str, ...]]) -> str:
    widths = [max(len(row[column]) for row in rows) for column in range(len(rows[0]))]

    def border(left: str, middle: str, right: str) -> str:
        return left + middle.join("═" * (width + 2) for width in widths) + right

    def line(row: tuple[str, ...]) -> str:
        return "║" + "║".join(f" {cell:<{width}} " for cell, width in zip(row, widths)) + "║"

    header, *body = rows
    lines = [border("╔", "╦", "╗"), line(header), border("╠", "╬", "╣")]
    lines.extend(line(row) for row in body)
    lines.append(border("╚", "╩", "╝"))
    return "\n".join(lines)


def render_table(dices: int, faces: int = DEFAULT_FACES) -> str:
    """A table of P(X=N), P(X≤N) and P(X≥N) for every total N."""
    counts = distribution(dices, faces)
    possibilities = faces**dices

    rows: list[tuple[str, ...]] = [_HEADER]
    accumulated_le = 0
    accumulated_ge = possibilities
    for total, count in counts.items():
        accumulated_le += count
        rows.append(
            (
                str(total),
                _format_probability(count, possibilities),
                _format_probability(accumulated_le, possibilities),
                _format_probability(accumulated_ge, possibilities),
            )
        )
        accumulated_ge -= count
    return _render(rows)


def _small_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("Invalid number") from None
    if not 0 <= value <= _MAX_ARGUMENT:
        raise argparse.ArgumentTypeError("Invalid number")
    return value


def main(argv: list[str] | None = None) -> int:
    """Print the probability table for the dice given on the command line."""
    parser = argparse.ArgumentParser(prog="dices-probabilities")
    parser.add_argument("dices", type=_small_count, help="How many dices?")
    parser.add_argument("faces", type=_small_count, nargs="?", default=DEFAULT_FACES)
    args = parser.parse_args(argv)
    if args.dices == 0:
        parser.error("Number of dices cannot be zero")
    if args.faces == 0:
        parser.error("Number of faces must be at least one")
    print(render_table(args.dices, args.faces))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())