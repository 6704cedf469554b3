import numpy as np
import pytest

from pixel_remap import make_test_pattern


@pytest.fixture
def ramp4():
    """4x4 raster holding 0, 17, ..., 255 in row-major order."""
    return make_test_pattern('ramp', (4, 4))


@pytest.fixture
def random_image():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(13, 17), dtype=np.uint8)


@pytest.fixture
def linear_image():
    """8x8 raster with value 10*col + 20*row."""
    rows, cols = np.indices((8, 8))
    return (10 * cols + 20 * rows).astype(np.uint8)
