"""The two check digits shared by CPF and CNPJ numbers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from tinkerbox.brid.errors import InvalidCheckDigitCharError
from tinkerbox.brid.parsing import DigitParser, is_ascii_digit

CHECK_DIGITS_LENGTH = 2

CHECK_DIGITS_PARSER = DigitParser(
    length=CHECK_DIGITS_LENGTH,
    is_digit=is_ascii_digit,
    error=InvalidCheckDigitCharError,
)


@dataclass(frozen=True, order=True)
class CheckDigits:
    """Two check digits, kept as a string of two characters."""

    LENGTH: ClassVar[int] = CHECK_DIGITS_LENGTH

    digits: str

    def __post_init__(self) -> None:
        if len(self.digits) != self.LENGTH or not all(map(is_ascii_digit, self.digits)):
            raise ValueError(f"check digits must be {self.LENGTH} ASCII digits")

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> CheckDigits:
        """Read check digits from characters, skipping formatting marks."""
        indexed = enumerate(chars)
        digits = CHECK_DIGITS_PARSER.parse(indexed)
        CHECK_DIGITS_PARSER.ensure_all_consumed(indexed)
        return cls(digits)

    @classmethod
    def parse(cls, text: str) -> CheckDigits:
        """Read check digits from a string."""
        return cls.from_chars(text)

    def char(self, index: int) -> str:
        return self.digits[index]

    def chars(self) -> tuple[str, ...]:
        return tuple(self.digits)

    def __str__(self) -> str:
        return self.digits


class _Calculator:
    def __init__(self, max_weight: int, initial_weight: int) -> None:
        self.next_weight = initial_weight
        self.accumulator = 0
        self.max_weight = max_weight

    def process(self, digit: str) -> None:
        if is_ascii_digit(digit):
            value = ord(digit) - ord("0")
        elif "A" <= digit <= "Z":
            value = ord(digit) - ord("A") + 17
        else:
            raise ValueError(f"not a digit or upper-case letter: {digit!r}")

        self.accumulator += self.next_weight * value
        self.next_weight = self.max_weight if self.next_weight == 2 else self.next_weight - 1

    def check_digit(self) -> str:
        rem = self.accumulator % 11
        value = 0 if rem in (0, 1) else 11 - rem
        return chr(ord("0") + value)


def calculate_check_digits(digits: str, max_weight: int, initial_weight: int) -> CheckDigits:
    """Compute the check digits of ``digits`` with modulo-11 weighting.

    The n-th check digit starts with weight ``initial_weight + n``; weights
    count down to 2 and then wrap to ``max_weight``.
    """
    calculators = [
        _Calculator(max_weight, initial_weight + i) for i in range(CHECK_DIGITS_LENGTH)
    ]
    for digit in digits:
        for calculator in calculators:
            calculator.process(digit)

    result = []
    for i, calculator in enumerate(calculators):
        check_digit = calculator.check_digit()
        result.append(check_digit)
        for later in calculators[i + 1 :]:
            later.process(check_digit)

    return CheckDigits("".join(result))


def cpf_check_digits(digits: str) -> CheckDigits:
    """Check digits of the nine base digits of a CPF."""
    return calculate_check_digits(digits, 11, 10)


def cnpj_check_digits(digits: str) -> CheckDigits:
    """Check digits of the twelve base characters of a CNPJ."""
    return calculate_check_digits(digits, 9, 5)