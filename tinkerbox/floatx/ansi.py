"""ANSI terminal colours for the parts of a floating point number."""

from __future__ import annotations


def _escape(code: int) -> str:
    return f"\x1b[{code}m"


def _format(value: object, begin: int, end: int) -> str:
    return f"{_escape(begin)}{value}{_escape(end)}"


def _color(value: object, code: int) -> str:
    return _format(value, code, 39)


def sign_color(value: object) -> str:
    """Blue, used for the sign bit."""
    return _color(value, 34)


def exponent_color(value: object) -> str:
    """Green, used for the exponent."""
    return _color(value, 32)


def fraction_color(value: object) -> str:
    """Red, used for the fraction."""
    return _color(value, 31)


def normal_color(value: object) -> str:
    """Yellow, used for normal numbers."""
    return _color(value, 33)


def subnormal_color(value: object) -> str:
    """Magenta, used for subnormal numbers."""
    return _color(value, 35)


def bold(value: object) -> str:
    """Bold text."""
    return _format(value, 1, 22)