# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Core Value class: a scalar node in the autograd graph."""
from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from . import autograd as _ag
from .ops import Op

_REAL_TYPES = (int, float, np.integer, np.floating)


def _as_float(x: Any, attr: str) -> float:
    if isinstance(x, _REAL_TYPES):
        return float(x)
    raise TypeError(f"The {attr} attribute must be a float or an int")


def _noop() -> None:
    return None


class Value:
    """A scalar with a gradient and the operation that produced it.

    Leaves come from user data; every arithmetic operator returns a new
    non-leaf whose ``grad_fn`` knows how to push ``grad`` back onto its
    operands.  Equality and hashing are by identity.
    """

    __slots__ = (
        '_data', '_grad', '_children', '_label', '_grad_fn',
    )

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(self, data: Any, _children: Iterable['Value'] = (),
                 _op: 'str | Op' = ""):
        if isinstance(data, Value):
            data = data._data
        self._data: float = _as_float(data, 'data')
        self._grad: float = 0.0
        try:
            children = tuple(_children)
        except TypeError:
            raise TypeError(
                "The _children attribute must be an iterable") from None
        for c in children:
            if not isinstance(c, Value):
                raise TypeError(
                    f"children must be Value instances, got {type(c).__name__}")
        self._children: tuple[Value, ...] = children
        if isinstance(_op, Op):
            _op = _op.symbol
        elif not isinstance(_op, str):
            raise TypeError("The _op attribute must be a str or an Op")
        self._label: str = _op
        self._grad_fn: _ag.GradFn | None = None

    @staticmethod
    def _wrap(data: float, children: tuple['Value', ...] = (),
              label: str = "",
              grad_fn: _ag.GradFn | None = None) -> 'Value':
        v = Value.__new__(Value)
        v._data = data
        v._grad = 0.0
        v._children = children
        v._label = label
        v._grad_fn = grad_fn
        return v

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> float:
        return self._data

    @data.setter
    def data(self, value):
        self._data = _as_float(value, 'data')

    @data.deleter
    def data(self):
        raise TypeError("Cannot delete the data attribute")

    @property
    def grad(self) -> float:
        return self._grad

    @grad.setter
    def grad(self, value):
        self._grad = _as_float(value, 'grad')

    @grad.deleter
    def grad(self):
        raise TypeError("Cannot delete the grad attribute")

    @property
    def op(self) -> Op:
        """The tag of the bound backward rule; ``Op.NONE`` without one."""
        if self._grad_fn is None:
            return Op.NONE
        return self._grad_fn.op

    @property
    def _op(self) -> str:
        return self._label

    @property
    def children(self) -> tuple['Value', ...]:
        return self._children

    @property
    def _prev(self) -> set['Value']:
        return set(self._children)

    @property
    def grad_fn(self) -> _ag.GradFn | None:
        return self._grad_fn

    @property
    def _backward(self):
        """Apply this node's backward rule once; a no-op on leaves."""
        if self._grad_fn is None:
            return _noop
        gfn, out = self._grad_fn, self

        def _apply() -> None:
            gfn.apply(out)
        return _apply

    @property
    def is_leaf(self) -> bool:
        return self._grad_fn is None

    # ------------------------------------------------------------------ #
    #  Basic info methods                                                #
    # ------------------------------------------------------------------ #

    def item(self) -> float:
        return self._data

    def __float__(self) -> float:
        return self._data

    def __repr__(self) -> str:
        return f"Value(data={self._data}, grad={self._grad})"

    # ------------------------------------------------------------------ #
    #  Arithmetic operators                                              #
    # ------------------------------------------------------------------ #

    def __add__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.ADD, self, b)

    def __radd__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.ADD, b, self)

    def __sub__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.SUB, self, b)

    def __rsub__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.SUB, b, self)

    def __mul__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.MUL, self, b)

    def __rmul__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.MUL, b, self)

    def __truediv__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.DIV, self, b)

    def __rtruediv__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.DIV, b, self)

    def __pow__(self, other, mod=None):
        if mod is not None:
            raise TypeError("Mod not supported")
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.POW, self, b)

    def __rpow__(self, other, mod=None):
        if mod is not None:
            raise TypeError("Mod not supported")
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return _apply_op(Op.POW, b, self)

    def __neg__(self):
        return _apply_op(Op.NEG, self)

    def relu(self) -> 'Value':
        return _apply_op(Op.RELU, self)

    # ---- Autograd methods ----

    def backward(self, gradient=None) -> None:
        if gradient is not None:
            gradient = _as_float(gradient, 'gradient')
        _ag.backward(self, gradient)

    def zero_grad(self) -> None:
        _ag.zero_grad(self)


# ====================================================================
# Graph construction
# ====================================================================

def _coerce(x) -> Value | None:
    """Wrap a raw real as a fresh leaf; ``None`` for unsupported types."""
    if isinstance(x, Value):
        return x
    if isinstance(x, _REAL_TYPES):
        return Value._wrap(float(x))
    return None


def _apply_op(op: Op, *operands: Value) -> Value:
    data = _ag.forward(op, *(v._data for v in operands))
    if not _ag.is_grad_enabled():
        return Value._wrap(data)
    return create_result(data, op, operands)


def create_leaf(value) -> Value:
    """A node with no children and no backward rule."""
    return Value(value)


def create_result(value, op: 'Op | str',
                  children: Iterable[Value]) -> Value:
    """A node produced by *op* from *children*, with its rule bound."""
    op = Op.from_symbol(op)
    children = tuple(children)
    for c in children:
        if not isinstance(c, Value):
            raise TypeError(
                f"children must be Value instances, got {type(c).__name__}")
    grad_fn = None if op is Op.NONE else _ag.grad_fn_for(op, children)
    return Value._wrap(_as_float(value, 'data'), children, op.symbol, grad_fn)


# ====================================================================
# Utility functions
# ====================================================================

def manual_seed(seed: int) -> None:
    np.random.seed(seed)
