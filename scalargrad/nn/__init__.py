# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""scalargrad.nn — Neural network modules over scalar Values."""
from __future__ import annotations

# Module base class & containers
from .module import Module, ModuleList, ParameterList, Sequential

# Parameter
from .parameter import Parameter

# Layers
from .layers import Neuron, Linear, ReLU, MLP

# Functional API (accessible as nn.functional or F)
from . import functional

# Initialization routines
from . import init

__all__ = [
    'Module', 'ModuleList', 'ParameterList', 'Sequential',
    'Parameter',
    'Neuron', 'Linear', 'ReLU', 'MLP',
    'functional', 'init',
]
