"""Tests for scalargrad.nn modules, init routines and losses."""
import math

import pytest

import scalargrad as sg
import scalargrad.nn as nn
import scalargrad.nn.functional as F
import scalargrad.optim as optim
from scalargrad import Value


class TestModule:

    def test_neuron_parameters(self, random_seed):
        n = nn.Neuron(3)
        params = list(n.parameters())
        assert len(params) == 4
        assert all(isinstance(p, nn.Parameter) for p in params)
        names = {name for name, _ in n.named_parameters()}
        assert names == {'bias', 'weight.0', 'weight.1', 'weight.2'}

    def test_neuron_init_bound(self, random_seed):
        n = nn.Neuron(4)
        k = 1.0 / math.sqrt(4)
        assert all(-k <= p.data <= k for p in n.parameters())

    def test_neuron_forward(self):
        n = nn.Neuron(2, nonlin=False)
        nn.init.constant_(n.weight[0], 2.0)
        nn.init.constant_(n.weight[1], -1.0)
        nn.init.constant_(n.bias, 0.5)
        out = n([3.0, 4.0])
        assert isinstance(out, Value)
        assert out.data == pytest.approx(2.5)
        out.backward()
        assert n.weight[0].grad == 3.0
        assert n.weight[1].grad == 4.0
        assert n.bias.grad == 1.0

    def test_neuron_relu(self):
        n = nn.Neuron(1)
        nn.init.constant_(n.weight[0], -1.0)
        nn.init.zeros_(n.bias)
        assert n([2.0]).data == 0.0

    def test_neuron_input_size_checked(self):
        with pytest.raises(ValueError):
            nn.Neuron(3)([1.0, 2.0])
        with pytest.raises(ValueError):
            nn.Neuron(0)

    def test_mlp_structure(self, random_seed):
        model = nn.MLP(3, [4, 4, 1])
        assert len(list(model.parameters())) == 41
        assert [layer.nonlin for layer in model.layers] == [True, True, False]
        out = model([1.0, -2.0, 3.0])
        assert isinstance(out, Value)

    def test_mlp_multiple_outputs(self, random_seed):
        model = nn.MLP(2, [3, 2])
        out = model([Value(1.0), Value(2.0)])
        assert isinstance(out, list) and len(out) == 2

    def test_mlp_requires_layers(self):
        with pytest.raises(ValueError):
            nn.MLP(2, [])

    def test_sequential_and_relu(self, random_seed):
        model = nn.Sequential(nn.Linear(2, 3, nonlin=False), nn.ReLU(),
                              nn.Linear(3, 1, nonlin=False))
        out = model([1.0, 2.0])
        assert len(out) == 1
        assert len(model) == 3
        assert len(list(model.parameters())) == 3 * 3 + 1 * 4

    def test_relu_module_on_value(self):
        assert nn.ReLU()(Value(-3.0)).data == 0.0

    def test_zero_grad(self, random_seed):
        model = nn.MLP(2, [3, 1])
        model([1.0, 1.0]).backward()
        model.zero_grad()
        assert all(p.grad == 0.0 for p in model.parameters())

    def test_state_dict_round_trip(self, random_seed):
        a = nn.MLP(2, [2, 1])
        b = nn.MLP(2, [2, 1])
        b.load_state_dict(a.state_dict())
        assert [p.data for p in a.parameters()] == [p.data for p in b.parameters()]

    def test_load_state_dict_strict(self, random_seed):
        model = nn.Neuron(2)
        with pytest.raises(RuntimeError):
            model.load_state_dict({'bias': 1.0})
        model.load_state_dict({'bias': 1.0}, strict=False)
        assert model.bias.data == 1.0

    def test_train_eval(self, random_seed):
        model = nn.MLP(2, [2, 1])
        model.eval()
        assert not model.training
        assert all(not m.training for _, m in model.named_modules())
        model.train()
        assert model.training

    def test_attribute_registration(self):
        m = nn.Module()
        m.scale = nn.Parameter(2.0)
        m.inner = nn.Neuron(1)
        assert m.scale.data == 2.0
        assert len(list(m.parameters())) == 3
        del m.scale
        assert len(list(m.parameters())) == 2
        with pytest.raises(AttributeError):
            m.missing


class TestInit:

    def test_normal_reproducible(self):
        sg.manual_seed(0)
        first = nn.init.normal_(nn.Parameter()).data
        sg.manual_seed(0)
        second = nn.init.normal_(nn.Parameter()).data
        assert first == second

    def test_kaiming_uniform_bound(self, random_seed):
        bound = math.sqrt(3.0) * math.sqrt(2.0) / math.sqrt(8)
        for _ in range(20):
            p = nn.init.kaiming_uniform_(nn.Parameter(), fan_in=8,
                                         nonlinearity='relu')
            assert -bound <= p.data <= bound

    def test_kaiming_requires_fan_in(self):
        with pytest.raises(ValueError):
            nn.init.kaiming_uniform_(nn.Parameter(), fan_in=0)

    def test_constant_and_ones(self):
        assert nn.init.ones_(nn.Parameter()).data == 1.0
        assert nn.init.constant_(nn.Parameter(), 3).data == 3.0


class TestFunctional:

    def test_mse_loss(self):
        p1, p2 = Value(1.0), Value(3.0)
        loss = F.mse_loss([p1, p2], [0.0, 1.0])
        assert loss.data == pytest.approx(2.5)
        loss.backward()
        assert p1.grad == pytest.approx(1.0)
        assert p2.grad == pytest.approx(2.0)

    def test_mse_loss_size_mismatch(self):
        with pytest.raises(ValueError):
            F.mse_loss([Value(1.0)], [1.0, 2.0])

    def test_hinge_loss(self):
        s1, s2 = Value(0.5), Value(-2.0)
        loss = F.hinge_loss([s1, s2], [1.0, 1.0])
        assert loss.data == pytest.approx(1.75)
        loss.backward()
        assert s1.grad == pytest.approx(-0.5)
        assert s2.grad == pytest.approx(-0.5)

    def test_relu_list(self):
        out = F.relu([Value(-1.0), Value(2.0)])
        assert [v.data for v in out] == [0.0, 2.0]


class TestTraining:

    def test_linear_regression_converges(self, random_seed):
        model = nn.Neuron(1, nonlin=False)
        opt = optim.SGD(model.parameters(), lr=0.05)
        xs = [-1.0, 0.0, 1.0, 2.0]
        ys = [2 * x + 1 for x in xs]
        for _ in range(200):
            loss = F.mse_loss([model([x]) for x in xs], ys)
            opt.zero_grad()
            loss.backward()
            opt.step()
        assert loss.data < 1e-3
        assert model.weight[0].data == pytest.approx(2.0, abs=0.05)
        assert model.bias.data == pytest.approx(1.0, abs=0.05)

    def test_mlp_loss_decreases(self, random_seed):
        model = nn.MLP(2, [4, 1])
        opt = optim.SGD(model.parameters(), lr=0.01)
        xs = [[0.0, 1.0], [1.0, 0.0], [1.0, 1.0], [0.5, -0.5]]
        ys = [1.0, -1.0, 0.5, 0.0]

        def compute_loss():
            return F.mse_loss([model(x) for x in xs], ys)

        initial = compute_loss().data
        for _ in range(50):
            loss = compute_loss()
            opt.zero_grad()
            loss.backward()
            opt.step()
        assert compute_loss().data < initial
