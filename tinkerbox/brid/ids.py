"""CPF and CNPJ identifiers, with and without their check digits."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import ClassVar

from tinkerbox.brid.check_digits import (
    CHECK_DIGITS_PARSER,
    CheckDigits,
    cnpj_check_digits,
    cpf_check_digits,
)
from tinkerbox.brid.errors import InvalidCharError, WrongCheckDigits
from tinkerbox.brid.parsing import DigitParser, is_ascii_alphanumeric, is_ascii_digit

UNCHECKED_CPF_PARSER = DigitParser(length=9, is_digit=is_ascii_digit, error=InvalidCharError)
UNCHECKED_CNPJ_PARSER = DigitParser(
    length=12, is_digit=is_ascii_alphanumeric, error=InvalidCharError
)


def _valid_digit(char: str, is_digit: Callable[[str], bool]) -> bool:
    return is_digit(char) and char == char.upper()


@dataclass(frozen=True, order=True)
class UncheckedId:
    """The base digits of an identifier, without its check digits."""

    LENGTH: ClassVar[int] = 0
    _PARSER: ClassVar[DigitParser]
    _calculate: ClassVar[Callable[[str], CheckDigits]]

    digits: str

    def __post_init__(self) -> None:
        if len(self.digits) != self.LENGTH or not all(
            _valid_digit(c, self._PARSER.is_digit) for c in self.digits
        ):
            raise ValueError(f"{type(self).__name__} needs {self.LENGTH} valid digits")

    @classmethod
    def from_chars(cls, chars: Iterable[str]):
        """Read the digits from characters, skipping formatting marks."""
        indexed = enumerate(chars)
        digits = cls._PARSER.parse(indexed)
        cls._PARSER.ensure_all_consumed(indexed)
        return cls(digits)

    @classmethod
    def parse(cls, text: str):
        """Read the digits from a string."""
        return cls.from_chars(text)

    def char(self, index: int) -> str:
        return self.digits[index]

    def chars(self) -> tuple[str, ...]:
        return tuple(self.digits)

    def calculate_check_digits(self) -> CheckDigits:
        """The check digits that belong to these digits."""
        return type(self)._calculate(self.digits)

    def with_check_digits(self) -> CheckedId:
        """The complete identifier, with its calculated check digits appended."""
        return self._checked_type()(self.digits + str(self.calculate_check_digits()))

    def checked(self) -> CheckedId:
        """Same as :meth:`with_check_digits`."""
        return self.with_check_digits()

    @classmethod
    def _checked_type(cls) -> type[CheckedId]:
        raise TypeError(f"{cls.__name__} has no checked counterpart")


@dataclass(frozen=True, order=True)
class CheckedId:
    """A complete identifier: base digits followed by two check digits."""

    LENGTH: ClassVar[int] = 0
    _UNCHECKED: ClassVar[type[UncheckedId]]

    digits: str

    def __post_init__(self) -> None:
        base_length = self._UNCHECKED.LENGTH
        is_digit = self._UNCHECKED._PARSER.is_digit
        base, check = self.digits[:base_length], self.digits[base_length:]
        if (
            len(self.digits) != self.LENGTH
            or not all(_valid_digit(c, is_digit) for c in base)
            or not all(map(is_ascii_digit, check))
        ):
            raise ValueError(f"{type(self).__name__} needs {self.LENGTH} valid digits")

    @classmethod
    def from_chars(cls, chars: Iterable[str]):
        """Read and verify an identifier from characters, skipping formatting marks."""
        indexed = enumerate(chars)
        unchecked = cls._UNCHECKED(cls._UNCHECKED._PARSER.parse(indexed))
        check_digits = CheckDigits(CHECK_DIGITS_PARSER.parse(indexed))
        CHECK_DIGITS_PARSER.ensure_all_consumed(indexed)

        if unchecked.calculate_check_digits() != check_digits:
            raise WrongCheckDigits()

        return cls(unchecked.digits + check_digits.digits)

    @classmethod
    def parse(cls, text: str):
        """Read and verify an identifier from a string."""
        return cls.from_chars(text)

    def char(self, index: int) -> str:
        return self.digits[index]

    def chars(self) -> tuple[str, ...]:
        return tuple(self.digits)

    def without_check_digits(self) -> UncheckedId:
        """The base digits alone."""
        return self._UNCHECKED(self.digits[: self._UNCHECKED.LENGTH])

    def unchecked(self) -> UncheckedId:
        """Same as :meth:`without_check_digits`."""
        return self.without_check_digits()

    def check_digits(self) -> CheckDigits:
        """The two trailing check digits."""
        return CheckDigits(self.digits[self._UNCHECKED.LENGTH :])

    def __str__(self) -> str:
        return f"{self.without_check_digits()}-{self.check_digits()}"


class UncheckedCPF(UncheckedId):
    """The nine base digits of a CPF."""

    LENGTH = 9
    _PARSER = UNCHECKED_CPF_PARSER
    _calculate = staticmethod(cpf_check_digits)

    @classmethod
    def _checked_type(cls) -> type[CheckedId]:
        return CPF

    def __str__(self) -> str:
        d = self.digits
        return f"{d[0:3]}.{d[3:6]}.{d[6:9]}"


class UncheckedCNPJ(UncheckedId):
    """The twelve base characters of a CNPJ."""

    LENGTH = 12
    _PARSER = UNCHECKED_CNPJ_PARSER
    _calculate = staticmethod(cnpj_check_digits)

    @classmethod
    def _checked_type(cls) -> type[CheckedId]:
        return CNPJ

    def __str__(self) -> str:
        d = self.digits
        return f"{d[0:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}"


class CPF(CheckedId):
    """A complete CPF number."""

    LENGTH = UncheckedCPF.LENGTH + CheckDigits.LENGTH
    _UNCHECKED = UncheckedCPF


class CNPJ(CheckedId):
    """A complete CNPJ number."""

    LENGTH = UncheckedCNPJ.LENGTH + CheckDigits.LENGTH
    _UNCHECKED = UncheckedCNPJ