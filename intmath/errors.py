"""Exception types for `intmath`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .fixed_width import IntWidth


class ArithmeticOverflow(ArithmeticError):
    """Raised when a checked operation's exact result does not fit its width."""

    def __init__(self, op: str, result: int, width: IntWidth) -> None:
        self.op = op
        self.result = result
        self.width = width
        super().__init__(
            f"{op} overflow: {result} outside int{width.bits} "
            f"[{width.min_value}, {width.max_value}]"
        )
