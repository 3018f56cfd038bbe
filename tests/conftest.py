"""Pytest configuration and fixtures."""
import pytest

import scalargrad as sg


@pytest.fixture(autouse=True)
def restore_global_switches():
    """Grad mode and cycle checking are process-global; reset them per test."""
    grad_mode = sg.is_grad_enabled()
    cycle_check = sg.is_cycle_check_enabled()
    yield
    sg.set_grad_enabled(grad_mode)
    sg.set_cycle_check(cycle_check)


@pytest.fixture
def random_seed():
    """Set random seed for reproducibility."""
    sg.manual_seed(42)
    return 42
