"""Errors raised while reading Brazilian taxpayer identifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidChar:
    """A character that is neither a digit nor a formatting mark, and where it was."""

    char: str
    index: int


class DocumentError(ValueError):
    """Base class for every identifier parsing or validation error."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class WrongNumberOfDigits(DocumentError):
    """The input holds too few or too many digits."""

    def __str__(self) -> str:
        return "Número errado de dígitos"


class _InvalidCharBase(DocumentError):
    _kind = "dígito"

    def __init__(self, invalid_char: InvalidChar) -> None:
        super().__init__(invalid_char)
        self.invalid_char = invalid_char

    def __str__(self) -> str:
        return (
            f"Caractere inválido como {self._kind} no índice "
            f"{self.invalid_char.index}: {self.invalid_char.char!r}"
        )


class InvalidCharError(_InvalidCharBase):
    """A character that cannot appear among the identifier's digits."""

    _kind = "dígito"


class InvalidCheckDigitCharError(_InvalidCharBase):
    """A character that cannot appear among the check digits."""

    _kind = "dígito de verificação"


class WrongCheckDigits(DocumentError):
    """The check digits do not match the ones calculated from the digits."""

    def __str__(self) -> str:
        return "Dígitos de verificação errados"