"""Pure integer arithmetic.

Both functions are stateless and total over plain Python ints. Python ints are
unbounded, so results are exact; see `intmath.fixed_width` for N-bit
overflow handling.
"""

from __future__ import annotations


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def add(a: int, b: int) -> int:
    """Sum of *a* and *b*."""
    _require_int("a", a)
    _require_int("b", b)
    return a + b


def multiply(a: int, b: int) -> int:
    """Product of *a* and *b*."""
    _require_int("a", a)
    _require_int("b", b)
    return a * b
