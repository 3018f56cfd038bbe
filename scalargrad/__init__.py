# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
scalargrad — A scalar reverse-mode automatic differentiation engine.

Every number is a :class:`Value` node in a graph built as you compute;
``backward()`` on the output fills ``grad`` on every ancestor.  NumPy
float64 is the arithmetic backend.

Usage::

    import scalargrad as sg
    import scalargrad.nn as nn
    import scalargrad.optim as optim

    a, b = sg.Value(3.0), sg.Value(4.0)
    c = a * a + a * b
    c.backward()
    a.grad  # 10.0
"""
from __future__ import annotations

import logging

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ── Core value class & factory functions ──
from .value import (
    Value,
    create_leaf,
    create_result,
    manual_seed,
)

# ── Operation tags ──
from .ops import Op

# ── Errors ──
from .errors import ScalarGradError, GraphCycleError, GradcheckError

# ── Autograd ──
from .autograd import (
    backward,
    topo_sort,
    zero_grad,
    no_grad,
    is_grad_enabled,
    set_grad_enabled,
    is_cycle_check_enabled,
    set_cycle_check,
)

# ── Sub-packages ──
from . import nn
from . import optim
from . import utils

__all__ = [
    "__version__",
    "__author__",

    # Value
    'Value', 'create_leaf', 'create_result', 'manual_seed',
    # Ops
    'Op',
    # Errors
    'ScalarGradError', 'GraphCycleError', 'GradcheckError',
    # Autograd
    'backward', 'topo_sort', 'zero_grad',
    'no_grad', 'is_grad_enabled', 'set_grad_enabled',
    'is_cycle_check_enabled', 'set_cycle_check',
    # Sub-packages
    'nn', 'optim', 'utils',
]
