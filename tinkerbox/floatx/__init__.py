"""Inspection of IEEE 754 single- and double-precision floating-point values."""