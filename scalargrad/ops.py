# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Operation tags recorded on every node of the computation graph."""
from __future__ import annotations

import enum


class Op(enum.Enum):
    """Which backward rule produced a :class:`~scalargrad.value.Value`.

    The enum value is the short symbol used as the ``_op`` label.
    """
    NONE = ""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    NEG = "~"
    RELU = "R"

    @property
    def symbol(self) -> str:
        return self.value

    @staticmethod
    def from_symbol(symbol: 'str | Op') -> 'Op':
        """Map a symbol to its tag; unknown labels map to ``Op.NONE``."""
        if isinstance(symbol, Op):
            return symbol
        _map = {op.value: op for op in Op}
        return _map.get(symbol, Op.NONE)

    def __repr__(self) -> str:
        return f"scalargrad.Op.{self.name}"
