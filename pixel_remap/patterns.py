"""
Synthetic rasters and convolution kernels.

The runner and the tests use these in place of decoded image files.
"""

import numpy as np

from .errors import DimensionMismatch, InvalidArgument

PATTERN_KINDS = ('ramp', 'gradient', 'checkerboard', 'rings')
KERNEL_KINDS = ('identity', 'box', 'gaussian', 'laplacian')


def _positive_number(value, name):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not value > 0 or not np.isfinite(value):
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return value


def _check_shape(shape):
    try:
        rows, cols = (int(n) for n in shape)
    except (TypeError, ValueError):
        raise DimensionMismatch(f"shape must be a (rows, cols) pair, got {shape!r}")
    if rows < 1 or cols < 1:
        raise DimensionMismatch(f"shape must be positive, got ({rows}, {cols})")
    return rows, cols


def make_test_pattern(kind, shape, period=8):
    """
    Build a uint8 test raster.

    Parameters
    ----------
    kind : 'ramp' (0..255 in row-major order), 'gradient' (diagonal ramp),
        'checkerboard' (black/white squares of side period) or 'rings'
        (concentric cosine rings of wavelength period).
    shape : (rows, cols).
    period : Square size or ring wavelength in pixels.

    Returns
    -------
    pattern : 2-D uint8 array.
    """
    rows, cols = _check_shape(shape)
    period = _positive_number(period, 'period')

    if kind == 'ramp':
        pattern = np.linspace(0, 255, rows * cols).reshape(rows, cols)
    elif kind == 'gradient':
        y = np.linspace(0, 1, rows)[:, None]
        x = np.linspace(0, 1, cols)[None, :]
        pattern = 255 * (x + y) / 2
    elif kind == 'checkerboard':
        y, x = np.indices((rows, cols))
        pattern = 255 * ((y // period + x // period) % 2)
    elif kind == 'rings':
        y, x = np.indices((rows, cols))
        r = np.hypot(x - (cols - 1) / 2, y - (rows - 1) / 2)
        pattern = 127.5 * (1 + np.cos(2 * np.pi * r / period))
    else:
        raise InvalidArgument(f"Unknown pattern kind {kind!r}. Must be one of: {', '.join(PATTERN_KINDS)}")

    return np.rint(pattern).astype(np.uint8)


def make_kernel(kind, size=3, sigma=1.0):
    """
    Build a convolution kernel.

    'identity' has a single 1 at [0, 0], so convolving with it leaves the
    top-left crop of the convolution equal to the image. 'box' and
    'gaussian' are size x size and sum to 1. 'laplacian' is the 3x3
    four-neighbour operator and ignores size.
    """
    try:
        size = int(size)
    except (TypeError, ValueError):
        raise DimensionMismatch(f"kernel size must be an integer, got {size!r}")
    if size < 1:
        raise DimensionMismatch(f"kernel size must be at least 1, got {size}")

    if kind == 'identity':
        kernel = np.zeros((size, size))
        kernel[0, 0] = 1.
    elif kind == 'box':
        kernel = np.full((size, size), 1. / size**2)
    elif kind == 'gaussian':
        sigma = _positive_number(sigma, 'sigma')
        x = np.arange(size) - (size - 1) / 2
        g = np.exp(-x**2 / (2 * sigma**2))
        kernel = np.outer(g, g)
        kernel /= kernel.sum()
    elif kind == 'laplacian':
        kernel = np.array([[0., 1., 0.], [1., -4., 1.], [0., 1., 0.]])
    else:
        raise InvalidArgument(f"Unknown kernel kind {kind!r}. Must be one of: {', '.join(KERNEL_KINDS)}")

    return kernel
