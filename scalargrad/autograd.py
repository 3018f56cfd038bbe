# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Autograd engine — reverse-mode automatic differentiation on scalars.

Every operation on :class:`~scalargrad.value.Value` records a
:class:`GradFn` on its output.  :func:`backward` sorts the graph
topologically from the output and replays those rules in reverse
order, accumulating into each node's ``grad``.

All float math goes through NumPy float64 with floating-point errors
suppressed, so division by zero or an invalid power yields ``inf`` /
``nan`` instead of raising.
"""
from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, Callable

import numpy as np

from .errors import GraphCycleError
from .ops import Op

if TYPE_CHECKING:
    from .value import Value

logger = logging.getLogger(__name__)


# ──────────────────────── Global switches ─────────────────────────────

_grad_enabled: bool = True
_cycle_check: bool = os.environ.get('SCALARGRAD_CYCLE_CHECK', '1') != '0'


def is_grad_enabled() -> bool:
    return _grad_enabled


def set_grad_enabled(mode: bool) -> None:
    global _grad_enabled
    _grad_enabled = bool(mode)


def is_cycle_check_enabled() -> bool:
    return _cycle_check


def set_cycle_check(mode: bool) -> None:
    """Turn cycle detection in :func:`topo_sort` on or off."""
    global _cycle_check
    _cycle_check = bool(mode)


class no_grad:
    """Context manager / decorator that disables graph recording."""

    def __enter__(self):
        self._prev = _grad_enabled
        set_grad_enabled(False)
        return self

    def __exit__(self, *args):
        set_grad_enabled(self._prev)

    def __call__(self, fn):
        @functools.wraps(fn)
        def wrapper(*a, **kw):
            with self:
                return fn(*a, **kw)
        return wrapper


# ──────────────────────── Forward kernels ─────────────────────────────

def _relu(a):
    return a if a > 0 else np.float64(0.0)


_FORWARD: dict[Op, Callable] = {
    Op.ADD: np.add,
    Op.SUB: np.subtract,
    Op.MUL: np.multiply,
    Op.DIV: np.true_divide,
    Op.POW: np.power,
    Op.NEG: np.negative,
    Op.RELU: _relu,
}


def forward(op: Op, *operands: float) -> float:
    """Compute the forward value of *op* applied to raw floats."""
    try:
        kernel = _FORWARD[op]
    except KeyError:
        raise ValueError(f"no forward kernel for {op!r}") from None
    args = [np.float64(x) for x in operands]
    with np.errstate(all='ignore'):
        return float(kernel(*args))


# ──────────────────────── GradFn base class ───────────────────────────

class GradFn:
    """Backward rule attached to a non-leaf node.

    ``inputs`` are the operand nodes in ``(self, other)`` order.
    :meth:`backward` maps the output gradient to one local gradient per
    input; :meth:`apply` adds those into the inputs' ``grad``.
    """
    __slots__ = ('inputs', 'name')

    op: Op = Op.NONE
    arity: int = 2

    def __init__(self, name: str = 'GradFn'):
        self.inputs: list[Value] = []
        self.name = name

    def backward(self, g: np.float64) -> tuple[np.float64, ...]:
        raise NotImplementedError

    def apply(self, out: 'Value') -> None:
        with np.errstate(all='ignore'):
            grads = self.backward(np.float64(out._grad))
            for inp, ig in zip(self.inputs, grads):
                inp._grad = float(inp._grad + ig)

    def _operands(self) -> tuple[np.float64, ...]:
        # Read live values: leaf data may have been reassigned since the
        # forward pass.
        return tuple(np.float64(inp._data) for inp in self.inputs)

    def __repr__(self) -> str:
        return f"<{self.name}>"


# ──────────────────────── Concrete GradFn nodes ───────────────────────

class AddBackward(GradFn):
    op = Op.ADD

    def __init__(self):
        super().__init__('AddBackward')

    def backward(self, g):
        return (g, g)


class SubBackward(GradFn):
    op = Op.SUB

    def __init__(self):
        super().__init__('SubBackward')

    def backward(self, g):
        return (g, -g)


class MulBackward(GradFn):
    op = Op.MUL

    def __init__(self):
        super().__init__('MulBackward')

    def backward(self, g):
        a, b = self._operands()
        return (b * g, a * g)


class DivBackward(GradFn):
    op = Op.DIV

    def __init__(self):
        super().__init__('DivBackward')

    def backward(self, g):
        a, b = self._operands()
        return (g / b, -(a * g) / (b * b))


class PowBackward(GradFn):
    op = Op.POW

    def __init__(self):
        super().__init__('PowBackward')

    def backward(self, g):
        base, exp_val = self._operands()
        gb = exp_val * np.power(base, exp_val - 1) * g
        ge = np.power(base, exp_val) * np.log(base) * g
        return (gb, ge)


class NegBackward(GradFn):
    op = Op.NEG
    arity = 1

    def __init__(self):
        super().__init__('NegBackward')

    def backward(self, g):
        return (-g,)


class ReluBackward(GradFn):
    op = Op.RELU
    arity = 1

    def __init__(self):
        super().__init__('ReluBackward')

    def backward(self, g):
        (x,) = self._operands()
        return ((1.0 if x > 0 else 0.0) * g,)


_GRAD_FNS: dict[Op, type[GradFn]] = {
    cls.op: cls for cls in (
        AddBackward, SubBackward, MulBackward, DivBackward,
        PowBackward, NegBackward, ReluBackward,
    )
}


def grad_fn_for(op: Op, inputs: 'list[Value] | tuple[Value, ...]') -> GradFn:
    """Instantiate the backward rule for *op* bound to *inputs*."""
    try:
        cls = _GRAD_FNS[op]
    except KeyError:
        raise ValueError(f"no backward rule for {op!r}") from None
    if len(inputs) != cls.arity:
        raise ValueError(
            f"{cls.__name__} expects {cls.arity} input(s), got {len(inputs)}")
    gfn = cls()
    gfn.inputs = list(inputs)
    return gfn


# ──────────────────────── Topological backward ────────────────────────

def topo_sort(root: 'Value') -> list['Value']:
    """Return every node reachable from *root*, children before parents.

    Uses iterative DFS to avoid Python recursion limits on deep graphs.
    Nodes are keyed by identity, so each appears exactly once.
    """
    check = _cycle_check
    visited: set[int] = set()
    on_path: set[int] = set()
    order: list['Value'] = []
    stack: list[tuple['Value', bool]] = [(root, False)]
    while stack:
        v, processed = stack[-1]
        vid = id(v)
        if processed:
            stack.pop()
            on_path.discard(vid)
            if vid not in visited:
                visited.add(vid)
                order.append(v)
            continue
        if vid in visited:
            stack.pop()
            continue
        if vid in on_path:
            if check:
                raise GraphCycleError(v)
            stack.pop()
            continue
        stack[-1] = (v, True)
        on_path.add(vid)
        for child in reversed(v._children):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: 'Value', grad: float | None = None) -> None:
    """Run backward pass from *root*.

    Seeds ``root.grad`` with *grad* (default ``1.0``), overwriting any
    prior value.  Other gradients are not reset, so repeated calls
    accumulate.
    """
    order = topo_sort(root)
    root._grad = 1.0 if grad is None else float(grad)
    n_rules = 0
    for v in reversed(order):
        gfn = v._grad_fn
        if gfn is not None:
            gfn.apply(v)
            n_rules += 1
    logger.debug("backward: %d nodes, %d rules applied", len(order), n_rules)


def zero_grad(root: 'Value') -> None:
    """Reset ``grad`` to zero on every node reachable from *root*."""
    for v in topo_sort(root):
        v._grad = 0.0
