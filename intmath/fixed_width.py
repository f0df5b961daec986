"""
Fixed-width signed integer helpers (two's complement).

`add` / `multiply` are exact. This module bounds them to an N-bit range in two
ways:

- checked: overflow raises `ArithmeticOverflow`
- wrapping: the exact result is reduced modulo 2**N into the signed range

Arguments must already lie in the width (default `INT32`); anything else is a
caller error (`ValueError`), not an overflow.
"""

from __future__ import annotations

from dataclasses import dataclass

from .arith import add, multiply
from .errors import ArithmeticOverflow

MIN_BITS = 2
MAX_BITS = 512


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class IntWidth:
    """An N-bit two's-complement signed integer range."""

    bits: int

    def __post_init__(self) -> None:
        _require_int("bits", self.bits)
        if not (MIN_BITS <= self.bits <= MAX_BITS):
            raise ValueError(f"bits must be in [{MIN_BITS}, {MAX_BITS}]")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        _require_int("value", value)
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce *value* modulo 2**bits into ``[min_value, max_value]``."""
        _require_int("value", value)
        modulus = 1 << self.bits
        r = value % modulus
        return r - modulus if r > self.max_value else r


INT8 = IntWidth(8)
INT16 = IntWidth(16)
INT32 = IntWidth(32)
INT64 = IntWidth(64)


def _require_width(width: IntWidth) -> None:
    if not isinstance(width, IntWidth):
        raise TypeError("width must be an IntWidth")


def _require_in_width(name: str, value: int, width: IntWidth) -> None:
    _require_int(name, value)
    if not width.contains(value):
        raise ValueError(f"{name} outside int{width.bits}: {value}")


def _operands(a: int, b: int, width: IntWidth) -> IntWidth:
    _require_width(width)
    _require_in_width("a", a, width)
    _require_in_width("b", b, width)
    return width


def checked_add(a: int, b: int, *, width: IntWidth = INT32) -> int:
    w = _operands(a, b, width)
    result = add(a, b)
    if not w.contains(result):
        raise ArithmeticOverflow("add", result, w)
    return result


def checked_multiply(a: int, b: int, *, width: IntWidth = INT32) -> int:
    w = _operands(a, b, width)
    result = multiply(a, b)
    if not w.contains(result):
        raise ArithmeticOverflow("multiply", result, w)
    return result


def wrapping_add(a: int, b: int, *, width: IntWidth = INT32) -> int:
    w = _operands(a, b, width)
    return w.wrap(add(a, b))


def wrapping_multiply(a: int, b: int, *, width: IntWidth = INT32) -> int:
    w = _operands(a, b, width)
    return w.wrap(multiply(a, b))
