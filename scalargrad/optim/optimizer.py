# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Optimizer base class, SGD and AdamW over scalar parameters."""
from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


class Optimizer:
    """Base class for all optimizers."""

    def __init__(self, params, defaults: dict):
        self.defaults = defaults
        self.param_groups: list[dict] = []
        self.state: dict[int, dict] = {}

        params = list(params)
        if not params:
            raise ValueError("optimizer got an empty parameter list")
        if isinstance(params[0], dict):
            for group in params:
                pg = {**defaults, **group}
                if 'params' in pg:
                    pg['params'] = list(pg['params'])
                self.param_groups.append(pg)
        else:
            self.param_groups.append({**defaults, 'params': params})

    def zero_grad(self):
        for group in self.param_groups:
            for p in group['params']:
                p.grad = 0.0

    def step(self):
        raise NotImplementedError

    def state_dict(self) -> dict:
        return {
            'state': self.state,
            'param_groups': [
                {k: v for k, v in g.items() if k != 'params'}
                for g in self.param_groups
            ],
        }

    def load_state_dict(self, state_dict: dict):
        self.state = state_dict.get('state', {})
        for group, saved in zip(self.param_groups,
                                state_dict.get('param_groups', [])):
            group.update(saved)


class SGD(Optimizer):
    """Stochastic gradient descent with optional momentum and weight decay."""

    def __init__(self, params, lr: float = 1e-2, momentum: float = 0.0,
                 weight_decay: float = 0.0):
        if lr < 0.0:
            raise ValueError(f"Invalid learning rate: {lr}")
        if momentum < 0.0:
            raise ValueError(f"Invalid momentum value: {momentum}")
        defaults = dict(lr=lr, momentum=momentum, weight_decay=weight_decay)
        super().__init__(params, defaults)

    def step(self):
        for group in self.param_groups:
            lr = group['lr']
            momentum = group['momentum']
            wd = group['weight_decay']

            for p in group['params']:
                d_p = p.grad
                if wd != 0:
                    d_p = d_p + wd * p.data
                if momentum != 0:
                    st = self.state.setdefault(id(p), {})
                    buf = st.get('momentum_buffer')
                    buf = d_p if buf is None else momentum * buf + d_p
                    st['momentum_buffer'] = buf
                    d_p = buf
                p.data = p.data - lr * d_p
        logger.debug("SGD step over %d group(s)", len(self.param_groups))


class AdamW(Optimizer):
    """AdamW optimizer — decoupled weight decay regularization."""

    def __init__(self, params, lr: float = 1e-3,
                 betas: tuple[float, float] = (0.9, 0.999),
                 eps: float = 1e-8,
                 weight_decay: float = 0.01):
        defaults = dict(lr=lr, betas=betas, eps=eps,
                        weight_decay=weight_decay)
        super().__init__(params, defaults)

    def step(self):
        for group in self.param_groups:
            lr = group['lr']
            beta1, beta2 = group['betas']
            eps = group['eps']
            wd = group['weight_decay']

            for p in group['params']:
                st = self.state.setdefault(id(p), {'step': 0, 'm': 0.0, 'v': 0.0})
                st['step'] += 1
                t = st['step']
                grad = p.grad

                bc1 = 1.0 - beta1 ** t
                bc2 = 1.0 - beta2 ** t

                # Decoupled weight decay
                data = p.data
                if wd != 0:
                    data *= (1.0 - lr * wd)
                st['m'] = beta1 * st['m'] + (1.0 - beta1) * grad
                st['v'] = beta2 * st['v'] + (1.0 - beta2) * grad * grad
                denom = math.sqrt(st['v'] / bc2) + eps
                p.data = data - (lr / bc1) * (st['m'] / denom)
        logger.debug("AdamW step over %d group(s)", len(self.param_groups))
