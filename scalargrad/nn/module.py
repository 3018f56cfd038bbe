# ╔══════════════════════════════════════════════════════════════════════╗
# ║  scalargrad — Scalar Autograd Engine                                 ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""nn.Module — base class for all neural network modules."""
from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Iterator

from ..value import Value
from .parameter import Parameter


class Module:
    """Base class for all neural network modules.

    Assigning a :class:`Parameter` or a :class:`Module` to an attribute
    registers it, so :meth:`parameters` can find it later.
    """

    _training: bool
    _modules: OrderedDict
    _parameters: OrderedDict

    def __init__(self):
        object.__setattr__(self, '_training', True)
        object.__setattr__(self, '_modules', OrderedDict())
        object.__setattr__(self, '_parameters', OrderedDict())

    def forward(self, *args, **kwargs):
        raise NotImplementedError

    def __call__(self, *args, **kwargs):
        return self.forward(*args, **kwargs)

    # ---- Attribute management ----

    def __setattr__(self, name: str, value):
        if isinstance(value, Parameter):
            self._parameters[name] = value
        elif isinstance(value, Module):
            self._modules[name] = value
        else:
            object.__setattr__(self, name, value)

    def __getattr__(self, name: str):
        params = object.__getattribute__(self, '_parameters')
        if name in params:
            return params[name]
        modules = object.__getattribute__(self, '_modules')
        if name in modules:
            return modules[name]
        raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __delattr__(self, name: str):
        if name in self._parameters:
            del self._parameters[name]
        elif name in self._modules:
            del self._modules[name]
        else:
            object.__delattr__(self, name)

    # ---- Parameter access ----

    def parameters(self, recurse: bool = True) -> Iterator[Parameter]:
        for p in self._parameters.values():
            yield p
        if recurse:
            for m in self._modules.values():
                yield from m.parameters(recurse=True)

    def named_parameters(self, prefix: str = '',
                         recurse: bool = True) -> Iterator[tuple[str, Parameter]]:
        for name, p in self._parameters.items():
            full_name = f"{prefix}.{name}" if prefix else name
            yield full_name, p
        if recurse:
            for mname, m in self._modules.items():
                full_prefix = f"{prefix}.{mname}" if prefix else mname
                yield from m.named_parameters(full_prefix, recurse=True)

    def named_modules(self, prefix: str = '') -> Iterator[tuple[str, 'Module']]:
        yield prefix, self
        for name, m in self._modules.items():
            full_name = f"{prefix}.{name}" if prefix else name
            yield from m.named_modules(full_name)

    # ---- State dict ----

    def state_dict(self) -> dict[str, float]:
        return OrderedDict((name, p.data) for name, p in self.named_parameters())

    def load_state_dict(self, state_dict: dict, strict: bool = True):
        own = dict(self.named_parameters())
        if strict:
            missing = [k for k in own if k not in state_dict]
            unexpected = [k for k in state_dict if k not in own]
            if missing or unexpected:
                raise RuntimeError(
                    f"Error loading state_dict: missing keys {missing}, "
                    f"unexpected keys {unexpected}")
        for key, val in state_dict.items():
            if key in own:
                own[key].data = val.data if isinstance(val, Value) else val

    # ---- Training mode ----

    @property
    def training(self) -> bool:
        return self._training

    def train(self, mode: bool = True) -> 'Module':
        self._training = mode
        for m in self._modules.values():
            m.train(mode)
        return self

    def eval(self) -> 'Module':
        return self.train(False)

    # ---- Gradient management ----

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0.0

    # ---- Utilities ----

    def extra_repr(self) -> str:
        return ''

    def __repr__(self) -> str:
        lines = [f"{type(self).__name__}({self.extra_repr()}"]
        for name, m in self._modules.items():
            child_repr = repr(m).replace('\n', '\n  ')
            lines.append(f"  ({name}): {child_repr}")
        if len(lines) == 1:
            return lines[0] + ")"
        lines.append(")")
        return '\n'.join(lines)


# ---- Container modules ----

class ParameterList(Module):
    """Holds parameters in a list."""

    def __init__(self, parameters: Iterable[Parameter] | None = None):
        super().__init__()
        self._param_list: list[Parameter] = []
        if parameters is not None:
            for p in parameters:
                self.append(p)

    def append(self, param: Parameter) -> 'ParameterList':
        if not isinstance(param, Parameter):
            param = Parameter(param)
        idx = len(self._param_list)
        self._param_list.append(param)
        self._parameters[str(idx)] = param
        return self

    def __getitem__(self, idx):
        return self._param_list[idx]

    def __len__(self) -> int:
        return len(self._param_list)

    def __iter__(self):
        return iter(self._param_list)

    def extra_repr(self) -> str:
        return f"{len(self._param_list)}"


class ModuleList(Module):
    """Holds submodules in a list."""

    def __init__(self, modules=None):
        super().__init__()
        self._module_list: list[Module] = []
        if modules is not None:
            for m in modules:
                self.append(m)

    def append(self, module: Module) -> 'ModuleList':
        idx = len(self._module_list)
        self._module_list.append(module)
        self._modules[str(idx)] = module
        return self

    def __getitem__(self, idx):
        return self._module_list[idx]

    def __len__(self) -> int:
        return len(self._module_list)

    def __iter__(self):
        return iter(self._module_list)


class Sequential(Module):
    """A sequential container."""

    def __init__(self, *args):
        super().__init__()
        self._seq_modules: list[Module] = []
        for i, m in enumerate(args):
            self._seq_modules.append(m)
            self._modules[str(i)] = m

    def forward(self, x):
        for m in self._seq_modules:
            x = m(x)
        return x

    def __len__(self) -> int:
        return len(self._seq_modules)

    def __getitem__(self, idx):
        return self._seq_modules[idx]

    def __iter__(self):
        return iter(self._seq_modules)
