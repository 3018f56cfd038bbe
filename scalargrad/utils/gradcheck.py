# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""scalargrad.utils.gradcheck — finite-difference gradient check.

Compares the gradients produced by :meth:`Value.backward` against
central differences of the forward function.
"""
from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from ..autograd import no_grad
from ..errors import GradcheckError
from ..value import Value


def gradcheck(fn: Callable[..., Value], inputs: Sequence[Value],
              eps: float = 1e-6, atol: float = 1e-5,
              rtol: float = 1e-3) -> bool:
    """Check ``fn(*inputs)`` gradients numerically.

    Returns True if every input's analytic gradient matches, raises
    :class:`GradcheckError` otherwise.  Input gradients are reset to
    zero before the backward pass and hold the analytic values
    afterwards.
    """
    inputs = list(inputs)
    for inp in inputs:
        inp.grad = 0.0
    fn(*inputs).backward()
    analytic = [inp.grad for inp in inputs]

    for i, inp in enumerate(inputs):
        original = inp.data
        try:
            with no_grad():
                inp.data = original + eps
                f_plus = fn(*inputs).data
                inp.data = original - eps
                f_minus = fn(*inputs).data
        finally:
            inp.data = original
        numeric = (f_plus - f_minus) / (2.0 * eps)
        if not np.isclose(analytic[i], numeric, rtol=rtol, atol=atol):
            raise GradcheckError(
                f"gradient mismatch for input {i}: "
                f"analytic={analytic[i]!r}, numeric={numeric!r}")
    return True
