# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.Parameter — learnable scalar leaf."""
from __future__ import annotations

from ..value import Value


class Parameter(Value):
    """A leaf :class:`Value` that is automatically registered as a module parameter."""

    def __init__(self, data: Value | float = 0.0):
        super().__init__(data)

    def __repr__(self) -> str:
        return f"Parameter(data={self._data}, grad={self._grad})"
