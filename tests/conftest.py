import pytest

from sand import Grid, Stepper, default_registry, new_registry


@pytest.fixture
def registry():
    """Sand=1, Water=2, Rock=3."""
    return default_registry()


@pytest.fixture
def make_stepper(registry):
    def _make(width, height, reg=None):
        grid = Grid(width, height)
        return grid, Stepper(grid, reg or registry)

    return _make


@pytest.fixture
def heavy_light_registry():
    """1 = heavy static (weight 10), 2 = light faller (weight 2, spread 0, bias 1)."""
    return new_registry([
        (10, 0, 0, (130, 130, 130), "Heavy"),
        (2, 0, 1, (0, 0, 255), "Light"),
    ])
