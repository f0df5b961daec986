"""
`intmath`: small, pure integer arithmetic.

Public API:
- `add(a, b)`, `multiply(a, b)`: exact, total over ints
- `IntWidth`, `INT8` .. `INT64`: two's-complement ranges
- `checked_add`, `checked_multiply`: raise `ArithmeticOverflow` past the width
  (default `INT32`)
- `wrapping_add`, `wrapping_multiply`: wrap modulo 2**bits
"""

from .arith import add, multiply
from .errors import ArithmeticOverflow
from .fixed_width import (
    INT8,
    INT16,
    INT32,
    INT64,
    IntWidth,
    checked_add,
    checked_multiply,
    wrapping_add,
    wrapping_multiply,
)

__all__ = [
    "add",
    "multiply",
    "IntWidth",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "checked_add",
    "checked_multiply",
    "wrapping_add",
    "wrapping_multiply",
    "ArithmeticOverflow",
]
