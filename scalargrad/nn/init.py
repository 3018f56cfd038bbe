# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.init — parameter initialization routines."""
from __future__ import annotations

import math
import numpy as np

from ..value import Value


def normal_(param: Value, mean: float = 0.0, std: float = 1.0) -> Value:
    """Fill *param* with a sample from N(mean, std^2) in-place."""
    param.data = float(np.random.normal(mean, std))
    return param


def uniform_(param: Value, a: float = 0.0, b: float = 1.0) -> Value:
    param.data = float(np.random.uniform(a, b))
    return param


def zeros_(param: Value) -> Value:
    param.data = 0.0
    return param


def ones_(param: Value) -> Value:
    param.data = 1.0
    return param


def constant_(param: Value, val: float) -> Value:
    param.data = val
    return param


def kaiming_uniform_(param: Value, fan_in: int, a: float = 0,
                     nonlinearity: str = 'leaky_relu') -> Value:
    if fan_in <= 0:
        raise ValueError("kaiming_uniform_ requires fan_in > 0")
    gain = _calculate_gain(nonlinearity, a)
    std = gain / math.sqrt(fan_in)
    bound = math.sqrt(3.0) * std
    return uniform_(param, -bound, bound)


def _calculate_gain(nonlinearity, param=None):
    gains = {
        'linear': 1,
        'relu': math.sqrt(2.0),
        'leaky_relu': math.sqrt(2.0 / (1 + (param or 0.01) ** 2)),
    }
    return gains.get(nonlinearity, 1)
