"""Bit fields of an integer and their grouping into bytes for display."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

Colorizer = Callable[[str], str]

GROUP_SIZE = 8


def mask(length: int) -> int:
    """An integer whose lowest ``length`` bits are set."""
    if length < 1:
        raise ValueError("mask length must be at least one")
    return (1 << length) - 1


@dataclass(frozen=True)
class Bits:
    """A field of ``length`` bits holding ``value``."""

    value: int
    length: int

    @classmethod
    def extract_from(cls, source: int, length: int) -> tuple[Bits, int]:
        """Split off the lowest ``length`` bits; return them and the rest, shifted down."""
        return cls(source & mask(length), length), source >> length

    def __str__(self) -> str:
        return format(self.value, f"0{self.length}b")


def bit_groups(parts: Iterable[tuple[str, Colorizer]]) -> Iterator[str]:
    """Regroup coloured strings into chunks of eight characters.

    Each piece of a part keeps its own colouring; the last group may be shorter.
    """
    output: list[str] = []
    missing = GROUP_SIZE
    for text, colorize in parts:
        if not text:
            raise ValueError("bit group parts must not be empty")
        while text:
            taken = min(missing, len(text))
            output.append(colorize(text[:taken]))
            text = text[taken:]
            missing -= taken
            if missing == 0:
                yield "".join(output)
                output = []
                missing = GROUP_SIZE
    if output:
        yield "".join(output)