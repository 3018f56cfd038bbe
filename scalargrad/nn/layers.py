# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn layers built from scalar Values: Neuron, Linear, ReLU, MLP."""
from __future__ import annotations

import logging
import math
from typing import Sequence

from ..value import Value
from . import init
from .module import Module, ModuleList, ParameterList
from .parameter import Parameter

logger = logging.getLogger(__name__)


# ──────────────────────── Neuron ──────────────────────────────────────

class Neuron(Module):
    """Weighted sum of inputs plus bias, optionally followed by ReLU."""

    def __init__(self, in_features: int, nonlin: bool = True):
        super().__init__()
        if in_features <= 0:
            raise ValueError(f"in_features must be positive, got {in_features}")
        self.in_features = in_features
        self.nonlin = nonlin
        k = 1.0 / math.sqrt(in_features)
        self.weight = ParameterList(
            init.uniform_(Parameter(), -k, k) for _ in range(in_features))
        self.bias = init.uniform_(Parameter(), -k, k)

    def forward(self, x: Sequence[Value | float]) -> Value:
        if len(x) != self.in_features:
            raise ValueError(
                f"expected {self.in_features} inputs, got {len(x)}")
        act = self.bias
        for wi, xi in zip(self.weight, x):
            act = act + wi * xi
        return act.relu() if self.nonlin else act

    def extra_repr(self) -> str:
        kind = 'ReLU' if self.nonlin else 'Linear'
        return f"{kind}, in_features={self.in_features}"

    def __repr__(self) -> str:
        return f"Neuron({self.extra_repr()})"


# ──────────────────────── Linear ──────────────────────────────────────

class Linear(Module):
    """A layer of independent neurons over the same inputs.

    Returns a list with one :class:`Value` per output feature.
    """

    def __init__(self, in_features: int, out_features: int,
                 nonlin: bool = True):
        super().__init__()
        self.in_features = in_features
        self.out_features = out_features
        self.nonlin = nonlin
        self.neurons = ModuleList(
            Neuron(in_features, nonlin=nonlin) for _ in range(out_features))

    def forward(self, x: Sequence[Value | float]) -> list[Value]:
        return [n(x) for n in self.neurons]

    def __repr__(self) -> str:
        return (f"Linear(in_features={self.in_features}, "
                f"out_features={self.out_features}, nonlin={self.nonlin})")


class ReLU(Module):
    """ReLU activation on a Value or a list of Values."""

    def forward(self, x):
        if isinstance(x, Value):
            return x.relu()
        return [xi.relu() for xi in x]


# ──────────────────────── MLP ─────────────────────────────────────────

class MLP(Module):
    """Multi-layer perceptron: ReLU hidden layers, linear output layer.

    A single output is returned as a bare :class:`Value`.
    """

    def __init__(self, in_features: int, layer_sizes: Sequence[int]):
        super().__init__()
        if not layer_sizes:
            raise ValueError("MLP needs at least one layer")
        sizes = [in_features] + list(layer_sizes)
        self.layers = ModuleList(
            Linear(sizes[i], sizes[i + 1], nonlin=(i != len(layer_sizes) - 1))
            for i in range(len(layer_sizes))
        )
        logger.debug("MLP %s with %d parameters",
                     sizes, sum(1 for _ in self.parameters()))

    def forward(self, x: Sequence[Value | float]) -> Value | list[Value]:
        for layer in self.layers:
            x = layer(x)
        return x[0] if len(x) == 1 else x
