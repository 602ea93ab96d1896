"""Reading a precision and a floating point value from command line arguments."""

from __future__ import annotations

import math
import string
from collections.abc import Callable, Sequence
from typing import Optional

from tinkerbox.floatx.bits import mask
from tinkerbox.floatx.formats import DOUBLE, SINGLE, FloatFormat

EXPECTED_ARGUMENTS_COUNT = 2

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_PRECISIONS = {"single": SINGLE, "double": DOUBLE}

_HELP_LINES = (
    "Expected arguments: PRECISION VALUE",
    "  The arguments are parsed in a case-insensitive manner.",
    "",
    "PRECISION",
    "",
    "  'single' - for single-precision, 32 bits, floating points (IEEE 754 binary32).",
    "  'double' - for double-precision, 64 bits, floating points (IEEE 754 binary64).",
    "",
    "VALUE",
    "",
    "  Binary digits - the character 'b' followed by the binary digits.",
    "    Exactly 32 binary digits are expected for single-precision values.",
    "    Exactly 64 binary digits are expected for double-precision values.",
    "    The separator ':' is used only for visual aid, and is ignored during parsing.",
    "    Examples:",
    "      single b:1001:0110:1011:0110:0010:0101:1010:0101",
    "      double b:10010110:10110110:00100101:10100101:10010110:10110110:00100101:10100101",
    "",
    "  Hexadecimal digits - the character 'h' or 'x' followed by the hexadecimal digits.",
    "    Exactly 8 hexadecimal digits are expected for single-precision values.",
    "    Exactly 16 hexadecimal digits are expected for double-precision values.",
    "    The separator ':' is used only for visual aid, and is ignored during parsing.",
    "    Examples:",
    "      single h:96b6:25a5",
    "      double h:4009:21FB:5444:2D18",
    "",
    "  Decimal bytes - comma-delimited bytes values in decimal representation.",
    "    Exactly 4 byte values are expected for single-precision values.",
    "    Exactly 8 byte values are expected for double-precision values.",
    "    Examples:",
    "      single 150,182,37,165",
    "      double 150,182,37,165,150,182,37,165",
    "",
    "  Mantissa and exponent - a mantissa value is optionally followed by the base "
    "indicator and the exponent value.",
    "    The mantissa value is composed by an optional sign, followed by digits possibly "
    "containing a decimal point.",
    "    The base indicator is the character 'e' for base 10 and 'b' for base 2.",
    "    The exponent is an optional sign followed by a natural number.",
    "    Examples:",
    "      single 1",
    "      double -1.",
    "      single .2",
    "      double -1.2",
    "      single 1.2e3  # meaning 1.2 x 10^3 = 1200.0",
    "      double -1.2b-3  # meaning -1.2 x 2^-3 = -0.15",
    "",
    "  Not-a-number - simply the string 'NaN'.",
    "    Examples:",
    "      single NAN",
    "      double nan",
    "",
    "  Predefined values - all optionally signed.",
    "    'inf' or 'infinity' or 'infinite'",
    "    'largest_normal' or 'largest'",
    "    'smallest_normal'",
    "    'largest_subnormal'",
    "    'smallest_subnormal' or 'smallest'",
    "    'pi'",
    "    'e'",
    "    Examples:",
    "      single -inf",
    "      double +smallest",
)


class ArgumentError(ValueError):
    """Base class for every problem with the command line arguments."""


class InvalidArgumentsCount(ArgumentError):
    """Not exactly the expected number of arguments."""

    def __init__(self, found: int, expected: int) -> None:
        super().__init__(
            f"Invalid number of arguments. Found: {found}. Expected: {expected}"
        )
        self.found = found
        self.expected = expected


class InvalidPrecision(ArgumentError):
    """The precision is neither 'single' nor 'double'."""

    def __init__(self) -> None:
        super().__init__("Invalid precision argument")


class InvalidLength(ArgumentError):
    """A binary or hexadecimal value with the wrong number of digits."""

    def __init__(self, found: int, expected: int, base: int) -> None:
        super().__init__(
            f"Invalid length for number in base {base}. "
            f"Found: {found}. Expected: {expected}"
        )
        self.found = found
        self.expected = expected
        self.base = base


class InvalidNumberOfBytes(ArgumentError):
    """A list of decimal bytes of the wrong length."""

    def __init__(self, found: int, expected: int) -> None:
        super().__init__(
            f"Invalid number of bytes values. Found: {found}. Expected: {expected}"
        )
        self.found = found
        self.expected = expected


class NumberParseError(ArgumentError):
    """An integer that could not be read."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Can't parse number. {reason}")
        self.reason = reason


class UnrecognizedNumberFormat(ArgumentError):
    """The value matches none of the accepted notations."""

    def __init__(self) -> None:
        super().__init__("Unrecognized number format")


def help_text() -> str:
    """The description of the expected arguments."""
    return "\n".join(_HELP_LINES)


def _ascii_lower(text: str) -> str:
    return text.translate(str.maketrans(string.ascii_uppercase, string.ascii_lowercase))


def parse_args(argv: Sequence[str]) -> Optional[tuple[float, FloatFormat]]:
    """Read ``PRECISION VALUE``; return ``(value, format)``, or None when help is asked for."""
    args = list(argv)
    if "-h" in args or "--help" in args:
        return None
    if len(args) != EXPECTED_ARGUMENTS_COUNT:
        raise InvalidArgumentsCount(len(args), EXPECTED_ARGUMENTS_COUNT)

    fmt = _PRECISIONS.get(args[0].lower())
    if fmt is None:
        raise InvalidPrecision()
    return parse_value(args[1], fmt), fmt


def parse_value(text: str, fmt: FloatFormat) -> float:
    """Read a value in any of the accepted notations, as a number of ``fmt``."""
    text = _ascii_lower(text)
    parsers: tuple[Callable[[str, FloatFormat], Optional[float]], ...] = (
        _parse_nan,
        _parse_predefined_value,
        _parse_binary,
        _parse_hexadecimal,
        _parse_decimal_bytes,
        _parse_composed,
    )
    for parser in parsers:
        value = parser(text, fmt)
        if value is not None:
            return value
    raise UnrecognizedNumberFormat()


def _parse_nan(text: str, fmt: FloatFormat) -> Optional[float]:
    return fmt.nan if text == "nan" else None


def _parse_predefined_value(text: str, fmt: FloatFormat) -> Optional[float]:
    negative = text.startswith("-")
    if text[:1] in ("-", "+"):
        text = text[1:]

    def compose(exponent: int, fraction: int) -> float:
        return fmt.from_bits((exponent << fmt.fraction_bits) | fraction)

    all_exponent = mask(fmt.exponent_bits)
    all_fraction = mask(fmt.fraction_bits)

    if text in ("inf", "infinity", "infinite"):
        value = compose(all_exponent, 0)
    elif text in ("largest_normal", "largest"):
        value = compose(all_exponent - 1, all_fraction)
    elif text == "smallest_normal":
        value = compose(1, 0)
    elif text == "largest_subnormal":
        value = compose(0, all_fraction)
    elif text in ("smallest_subnormal", "smallest"):
        value = compose(0, 1)
    elif text == "pi":
        value = fmt.pi
    elif text == "e":
        value = fmt.e
    else:
        return None
    return -value if negative else value


def _parse_unsigned(text: str, radix: int, max_value: int) -> int:
    """Read an unsigned integer: an optional '+' then digits of ``radix``."""
    if text in ("+", "-"):
        raise NumberParseError("invalid digit found in string")
    if text.startswith("+"):
        text = text[1:]
    if not text:
        raise NumberParseError("cannot parse integer from empty string")
    allowed = (string.digits + string.ascii_lowercase)[:radix]
    if any(char.lower() not in allowed for char in text):
        raise NumberParseError("invalid digit found in string")
    value = int(text, radix)
    if value > max_value:
        raise NumberParseError("number too large to fit in target type")
    return value


def _radix_parse(
    text: str, prefixes: str, radix: int, length: int, fmt: FloatFormat
) -> Optional[float]:
    if not text or text[0] not in prefixes:
        return None
    digits = text[1:].replace(":", "")
    if len(digits) != length:
        raise InvalidLength(len(digits), length, radix)
    return fmt.from_bits(_parse_unsigned(digits, radix, mask(fmt.bits)))


def _parse_binary(text: str, fmt: FloatFormat) -> Optional[float]:
    return _radix_parse(text, "b", 2, fmt.bits, fmt)


def _parse_hexadecimal(text: str, fmt: FloatFormat) -> Optional[float]:
    return _radix_parse(text, "hx", 16, fmt.bits // 4, fmt)


def _parse_decimal_bytes(text: str, fmt: FloatFormat) -> Optional[float]:
    parts = text.split(",")
    if len(parts) == 1:
        return None
    if len(parts) != fmt.byte_length:
        raise InvalidNumberOfBytes(len(parts), fmt.byte_length)
    data = bytes(_parse_unsigned(part, 10, 255) for part in parts)
    return fmt.from_be_bytes(data)


def _split(text: str, separators: str) -> Optional[tuple[str, str, str]]:
    for index, char in enumerate(text):
        if char in separators:
            return text[:index], char, text[index + 1 :]
    return None


def _strip_sign(text: str) -> str:
    return text[1:] if text[:1] in ("+", "-") else text


def _has_digits_only(text: str) -> bool:
    return all(char in string.digits for char in text)


def _parse_mantissa(text: str, fmt: FloatFormat) -> Optional[float]:
    unsigned = _strip_sign(text)
    parts = _split(unsigned, ".")
    integer, fraction = (parts[0], parts[2]) if parts is not None else (unsigned, "")
    if (integer or fraction) and _has_digits_only(integer) and _has_digits_only(fraction):
        return fmt.round(float(text))
    return None


def _parse_exponent(text: str) -> Optional[int]:
    unsigned = _strip_sign(text)
    if not unsigned or not _has_digits_only(unsigned):
        return None
    value = int(text)
    if value > _I32_MAX:
        raise NumberParseError("number too large to fit in target type")
    if value < _I32_MIN:
        raise NumberParseError("number too small to fit in target type")
    return value


def _power_of_two(exponent: int, fmt: FloatFormat) -> float:
    try:
        return fmt.round(2.0**exponent)
    except OverflowError:
        return math.inf


def _parse_composed(text: str, fmt: FloatFormat) -> Optional[float]:
    parts = _split(text, "eb")
    if parts is None:
        return _parse_mantissa(text, fmt)

    mantissa_text, base, exponent_text = parts
    mantissa = _parse_mantissa(mantissa_text, fmt)
    if mantissa is None:
        return None
    exponent = _parse_exponent(exponent_text)
    if exponent is None:
        return None

    if base == "e":
        return fmt.round(float(text))
    return fmt.round(mantissa * _power_of_two(exponent, fmt))