# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.functional — stateless activations and losses (F.*)."""
from __future__ import annotations

from typing import Sequence

from ..value import Value


def _as_list(x) -> list:
    return [x] if isinstance(x, (Value, int, float)) else list(x)


# ──────────────────────── Activations ─────────────────────────────────

def relu(input):
    """ReLU on a Value or elementwise on a sequence of Values."""
    if isinstance(input, Value):
        return input.relu()
    return [v.relu() for v in input]


# ──────────────────────── Losses ──────────────────────────────────────

def mse_loss(input: Value | Sequence[Value],
             target: float | Sequence[float | Value]) -> Value:
    """Mean squared error."""
    preds, targets = _as_list(input), _as_list(target)
    if len(preds) != len(targets):
        raise ValueError(
            f"input and target sizes differ: {len(preds)} vs {len(targets)}")
    if not preds:
        raise ValueError("mse_loss of an empty sequence")
    total = 0.0
    for p, t in zip(preds, targets):
        d = p - t
        total = d * d + total
    return total / len(preds)


def hinge_loss(scores: Sequence[Value],
               labels: Sequence[float]) -> Value:
    """Mean max-margin loss ``relu(1 - y * s)`` for labels in {-1, +1}."""
    scores, labels = _as_list(scores), _as_list(labels)
    if len(scores) != len(labels):
        raise ValueError(
            f"scores and labels sizes differ: {len(scores)} vs {len(labels)}")
    if not scores:
        raise ValueError("hinge_loss of an empty sequence")
    total = 0.0
    for s, y in zip(scores, labels):
        total = (1 - y * s).relu() + total
    return total / len(scores)
