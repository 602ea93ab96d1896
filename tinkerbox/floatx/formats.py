"""IEEE 754 binary32 and binary64 formats, seen through their bits."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum

from tinkerbox.floatx.bits import mask


class FpCategory(Enum):
    """The kind of value a bit pattern encodes."""

    NAN = "nan"
    INFINITE = "infinite"
    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"


@dataclass(frozen=True)
class FloatFormat:
    """A binary floating point format of ``bits`` bits with ``exponent_bits`` of exponent."""

    name: str
    bits: int
    exponent_bits: int

    @property
    def byte_length(self) -> int:
        return self.bits // 8

    @property
    def fraction_bits(self) -> int:
        return self.bits - self.exponent_bits - 1

    @property
    def exponent_bias(self) -> int:
        return (2 << (self.exponent_bits - 2)) - 1

    @property
    def _struct_format(self) -> str:
        if self.bits == 32:
            return ">f"
        if self.bits == 64:
            return ">d"
        raise ValueError(f"unsupported floating point width: {self.bits}")

    @property
    def nan(self) -> float:
        return math.nan

    @property
    def pi(self) -> float:
        return self.round(math.pi)

    @property
    def e(self) -> float:
        return self.round(math.e)

    def to_be_bytes(self, value: float) -> bytes:
        """Big-endian encoding; finite values too large for the format become infinite."""
        try:
            return struct.pack(self._struct_format, value)
        except OverflowError:
            return struct.pack(self._struct_format, math.copysign(math.inf, value))

    def from_be_bytes(self, data: bytes) -> float:
        """Decode exactly ``byte_length`` big-endian bytes."""
        data = bytes(data)
        if len(data) != self.byte_length:
            raise ValueError(f"expected {self.byte_length} bytes, got {len(data)}")
        return struct.unpack(self._struct_format, data)[0]

    def to_bits(self, value: float) -> int:
        """The bit pattern of ``value`` in this format."""
        return int.from_bytes(self.to_be_bytes(value), "big")

    def from_bits(self, bits: int) -> float:
        """The value whose pattern is the lowest ``bits`` bits of ``bits``."""
        return self.from_be_bytes((bits & mask(self.bits)).to_bytes(self.byte_length, "big"))

    def round(self, value: float) -> float:
        """``value`` rounded to the nearest number this format can hold."""
        return self.from_be_bytes(self.to_be_bytes(value))

    def classify(self, value: float) -> FpCategory:
        """The category of ``value`` once stored in this format."""
        pattern = self.to_bits(value)
        fraction = pattern & mask(self.fraction_bits)
        exponent = (pattern >> self.fraction_bits) & mask(self.exponent_bits)
        if exponent == 0:
            return FpCategory.ZERO if fraction == 0 else FpCategory.SUBNORMAL
        if exponent == mask(self.exponent_bits):
            return FpCategory.INFINITE if fraction == 0 else FpCategory.NAN
        return FpCategory.NORMAL


SINGLE = FloatFormat("single", 32, 8)
DOUBLE = FloatFormat("double", 64, 11)