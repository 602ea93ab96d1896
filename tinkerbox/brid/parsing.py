"""Reading a fixed number of digits out of a formatted identifier."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tinkerbox.brid.errors import InvalidChar, WrongNumberOfDigits

FORMATTING_CHARS = frozenset(".-/")


def is_ascii_digit(char: str) -> bool:
    """True for the characters 0 to 9."""
    return "0" <= char <= "9"


def is_ascii_alphanumeric(char: str) -> bool:
    """True for ASCII letters and digits."""
    return char.isascii() and char.isalnum()


@dataclass(frozen=True)
class DigitParser:
    """Takes ``length`` digits from an iterator of ``(index, char)`` pairs.

    Formatting characters (``.``, ``/`` and ``-``) are skipped; any other
    non-digit raises the error built by ``error`` from an :class:`InvalidChar`.
    The same iterator is meant to be shared between several parsers.
    """

    length: int
    is_digit: Callable[[str], bool]
    error: Callable[[InvalidChar], Exception]

    def parse(self, chars: Iterable[tuple[int, str]]) -> str:
        """Consume chars until ``length`` digits are read; return them upper-cased."""
        chars = iter(chars)
        digits: list[str] = []
        while len(digits) < self.length:
            try:
                index, char = next(chars)
            except StopIteration:
                raise WrongNumberOfDigits() from None
            if self.is_digit(char):
                digits.append(char.upper())
            else:
                self._ensure_formatting_char(char, index)
        return "".join(digits)

    def ensure_all_consumed(self, chars: Iterable[tuple[int, str]]) -> None:
        """Check that what remains holds only formatting characters."""
        for index, char in chars:
            if self.is_digit(char):
                raise WrongNumberOfDigits()
            self._ensure_formatting_char(char, index)

    def _ensure_formatting_char(self, char: str, index: int) -> None:
        if char not in FORMATTING_CHARS:
            raise self.error(InvalidChar(char, index))