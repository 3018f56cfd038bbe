"""Tests for scalargrad.optim."""
import pytest

import scalargrad.optim as optim
from scalargrad.nn import Parameter


def _param(data, grad):
    p = Parameter(data)
    p.grad = grad
    return p


class TestSGD:

    def test_plain_step(self):
        p = _param(1.0, 0.5)
        optim.SGD([p], lr=0.1).step()
        assert p.data == pytest.approx(0.95)

    def test_momentum(self):
        p = _param(1.0, 0.5)
        opt = optim.SGD([p], lr=0.1, momentum=0.9)
        opt.step()
        assert p.data == pytest.approx(0.95)
        opt.step()
        assert p.data == pytest.approx(0.95 - 0.1 * (0.9 * 0.5 + 0.5))

    def test_weight_decay(self):
        p = _param(1.0, 0.5)
        optim.SGD([p], lr=0.1, weight_decay=0.1).step()
        assert p.data == pytest.approx(0.94)

    def test_param_groups(self):
        p1, p2 = _param(1.0, 1.0), _param(1.0, 1.0)
        opt = optim.SGD([{'params': [p1]}, {'params': [p2], 'lr': 0.5}], lr=0.1)
        opt.step()
        assert p1.data == pytest.approx(0.9)
        assert p2.data == pytest.approx(0.5)

    def test_zero_grad(self):
        p = _param(1.0, 0.5)
        opt = optim.SGD([p], lr=0.1)
        opt.zero_grad()
        assert p.grad == 0.0

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            optim.SGD([], lr=0.1)
        with pytest.raises(ValueError):
            optim.SGD([Parameter(1.0)], lr=-1.0)
        with pytest.raises(ValueError):
            optim.SGD([Parameter(1.0)], lr=0.1, momentum=-0.5)

    def test_state_dict(self):
        p = _param(1.0, 0.5)
        opt = optim.SGD([p], lr=0.1, momentum=0.9)
        opt.step()
        sd = opt.state_dict()
        assert sd['param_groups'][0]['lr'] == 0.1
        assert 'params' not in sd['param_groups'][0]

        other = optim.SGD([p], lr=0.3)
        other.load_state_dict(sd)
        assert other.param_groups[0]['lr'] == 0.1
        assert other.param_groups[0]['momentum'] == 0.9


class TestAdamW:

    def test_first_step_moves_by_lr(self):
        p = _param(1.0, 0.5)
        optim.AdamW([p], lr=0.1, weight_decay=0.0).step()
        assert p.data == pytest.approx(0.9, abs=1e-6)

    def test_weight_decay_is_decoupled(self):
        p = _param(1.0, 0.5)
        optim.AdamW([p], lr=0.1, weight_decay=0.01).step()
        assert p.data == pytest.approx(1.0 * (1 - 0.1 * 0.01) - 0.1, abs=1e-6)

    def test_step_counter(self):
        p = _param(1.0, -0.5)
        opt = optim.AdamW([p], lr=0.01)
        opt.step()
        opt.step()
        assert opt.state[id(p)]['step'] == 2
        assert p.data > 1.0
