"""Showing how a floating point number is laid out in its bits."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from typing import Optional

from tinkerbox.floatx.ansi import (
    bold,
    exponent_color,
    fraction_color,
    normal_color,
    sign_color,
    subnormal_color,
)
from tinkerbox.floatx.bits import Bits, bit_groups, mask
from tinkerbox.floatx.formats import FloatFormat
from tinkerbox.floatx.parsing import ArgumentError, help_text, parse_args

CATEGORY_NORMAL = "NORMAL"
CATEGORY_SUBNORMAL = "SUBNORMAL"
CATEGORY_ZERO = "ZERO"
CATEGORY_INFINITY = "INFINITY"
CATEGORY_NAN = "NAN"

_MAX_SIGNIFICANT_DIGITS = 17


def ensure_dot(text: str) -> str:
    """``text`` with ``.0`` appended unless it already holds a dot."""
    return text if "." in text else text + ".0"


def ensure_sign(text: str) -> str:
    """``text`` with ``+`` prepended unless it already starts with a sign."""
    return text if text.startswith(("+", "-")) else "+" + text


def _shortest_digits(magnitude: float, fmt: FloatFormat) -> tuple[str, int]:
    """Fewest significant digits that read back as ``magnitude``, and the decimal exponent."""
    if magnitude == 0.0:
        return "0", 0
    text = repr(magnitude)
    for precision in range(_MAX_SIGNIFICANT_DIGITS):
        text = f"{magnitude:.{precision}e}"
        if fmt.round(float(text)) == magnitude:
            break
    mantissa, exponent = text.split("e")
    digits = mantissa.replace(".", "").rstrip("0") or "0"
    return digits, int(exponent)


def _sign_prefix(value: float) -> str:
    return "-" if math.copysign(1.0, value) < 0 else ""


def _display(value: float, fmt: FloatFormat) -> str:
    """The plain decimal notation of ``value``, with as few digits as the format needs."""
    if math.isnan(value):
        return "NaN"
    sign = _sign_prefix(value)
    if math.isinf(value):
        return sign + "inf"
    digits, exponent = _shortest_digits(abs(value), fmt)
    if exponent >= len(digits) - 1:
        body = digits + "0" * (exponent - len(digits) + 1)
    elif exponent >= 0:
        body = f"{digits[: exponent + 1]}.{digits[exponent + 1 :]}"
    else:
        body = "0." + "0" * (-exponent - 1) + digits
    return sign + body


def _lower_exp(value: float, fmt: FloatFormat) -> str:
    """The scientific notation of ``value``, such as ``1.2e3``."""
    if math.isnan(value):
        return "NaN"
    sign = _sign_prefix(value)
    if math.isinf(value):
        return sign + "inf"
    digits, exponent = _shortest_digits(abs(value), fmt)
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{exponent}"


def _center(text: str, width: int) -> str:
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def _bytes_line(title: str, groups: Iterable[str], separator: str) -> str:
    return f"{title}: " + separator.join(_center(group, 8) for group in groups)


def explore(value: float, fmt: FloatFormat) -> str:
    """A coloured report of the sign, exponent and fraction of ``value`` in ``fmt``."""
    pattern = fmt.to_bits(value)
    fraction_bits, rest = Bits.extract_from(pattern, fmt.fraction_bits)
    exponent_bits, rest = Bits.extract_from(rest, fmt.exponent_bits)
    sign_bits, _ = Bits.extract_from(rest, 1)

    data = fmt.to_be_bytes(value)
    bias = fmt.exponent_bias

    lines = [
        _bytes_line(
            "Bin",
            bit_groups(
                [
                    (str(sign_bits), sign_color),
                    (str(exponent_bits), exponent_color),
                    (str(fraction_bits), fraction_color),
                ]
            ),
            ":",
        ),
        _bytes_line("Hex", (f"{byte:02x}" for byte in data), ":"),
        _bytes_line("Dec", (f"{byte:>3} " for byte in data), ","),
        "",
    ]

    sign = sign_color("+" if sign_bits.value == 0 else "-")
    fraction_value = fmt.round(fraction_bits.value / (1 << fmt.fraction_bits))
    fraction = fraction_color(ensure_dot(_display(fraction_value, fmt)))

    def composition(exponent: str, integer: str) -> str:
        return (
            f"{bold(ensure_dot(_display(value, fmt)))} = {bold(_lower_exp(value, fmt))} = "
            f"(-1)^{sign_color(sign_bits.value)} x 2^{exponent} x ({integer} + {fraction})"
        )

    if exponent_bits.value == 0:
        if fraction_bits.value == 0:
            category = CATEGORY_ZERO
            exponent = f"{exponent_color(CATEGORY_ZERO)} or {CATEGORY_SUBNORMAL}"
            shown = bold(ensure_dot(ensure_sign(_display(value, fmt))))
        else:
            category = subnormal_color(CATEGORY_SUBNORMAL)
            exponent = f"{CATEGORY_ZERO} or {exponent_color(CATEGORY_SUBNORMAL)}"
            shown = composition(subnormal_color(1 - bias), subnormal_color(0))
    elif exponent_bits.value == mask(exponent_bits.length):
        if fraction_bits.value == 0:
            category = CATEGORY_INFINITY
            exponent = f"{exponent_color(CATEGORY_INFINITY)} or {CATEGORY_NAN}"
            shown = bold(ensure_sign(_display(value, fmt)))
        else:
            category = CATEGORY_NAN
            exponent = f"{CATEGORY_INFINITY} or {exponent_color(CATEGORY_NAN)}"
            shown = bold(_display(value, fmt))
    else:
        category = normal_color(CATEGORY_NORMAL)
        exponent_value = exponent_color(exponent_bits.value - bias)
        exponent = f"{exponent_color(exponent_bits.value)} - {bias} = {exponent_value}"
        shown = composition(exponent_value, normal_color(1))

    lines += [
        f"Category: {category}",
        "",
        f"{sign_color('Sign')}: {sign}",
        f"{exponent_color('Exponent')}: {exponent}",
        f"{fraction_color('Fraction')}: {fraction}",
        "",
        f"Value: {shown}",
    ]
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    """Explore the value given on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        parsed = parse_args(argv)
    except ArgumentError as error:
        print(f"ERROR: {error}", file=sys.stderr)
        print("Execute with --help for expected arguments", file=sys.stderr)
        return 1
    if parsed is None:
        print(help_text())
        return 0
    value, fmt = parsed
    print(explore(value, fmt))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())