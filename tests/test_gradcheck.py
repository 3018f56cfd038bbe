"""Finite-difference checks of every backward rule."""
import pytest

import scalargrad as sg
from scalargrad import GradcheckError, Value
from scalargrad.utils import gradcheck


@pytest.mark.parametrize("fn, data", [
    (lambda a, b: a + b, (1.5, -2.0)),
    (lambda a, b: a - b, (1.5, -2.0)),
    (lambda a, b: a * b, (1.5, -2.0)),
    (lambda a, b: a / b, (1.5, -2.0)),
    (lambda a, b: a ** b, (1.5, 2.5)),
    (lambda a, b: -a * b, (1.5, -2.0)),
    (lambda a, b: (a * b).relu(), (1.5, 2.0)),
    (lambda a, b: (a * a + a * b) / (b - 0.5) ** 2, (0.7, 3.0)),
])
def test_rules_match_finite_differences(fn, data):
    inputs = [Value(x) for x in data]
    assert gradcheck(fn, inputs)


def test_reports_mismatch():
    a = Value(3.0)

    def wrong(x):
        # Treats the second factor as a constant, so d/dx is off by x.
        return x * x.data

    with pytest.raises(GradcheckError):
        gradcheck(wrong, [a])


def test_restores_inputs():
    a, b = Value(1.25), Value(-0.5)
    gradcheck(lambda x, y: x * y, [a, b])
    assert a.data == 1.25
    assert b.data == -0.5
    assert a.grad == -0.5
    assert sg.is_grad_enabled()


def test_restores_inputs_when_fn_raises():
    a = Value(2.0)

    def fails_without_grad(x):
        if not sg.is_grad_enabled():
            raise ValueError("forward failed")
        return x * x

    with pytest.raises(ValueError):
        gradcheck(fails_without_grad, [a])
    assert a.data == 2.0
    assert sg.is_grad_enabled()
