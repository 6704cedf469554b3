# optimal_fft_size:
#   Smallest transform length >= n whose only prime factors are 2, 3 and 5.
#   Padding to such a length keeps the FFT fast for any image size.
#
# Input parameters:
#     n : minimum length (integer >= 1)
#
# Returns:
#     optimal length (int)

import numbers

from scipy.fft import next_fast_len

from .errors import DimensionMismatch


def optimal_fft_size( n ):

    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise DimensionMismatch(f"transform length must be an integer, got {n!r}")
    if n < 1:
        raise DimensionMismatch(f"transform length must be at least 1, got {n}")

    return int(next_fast_len(int(n), real=True))


def padded_shape( image_shape, kernel_shape ):
    """Per-axis optimal size holding the full linear convolution of image and kernel."""
    return tuple(optimal_fft_size(n + m - 1) for n, m in zip(image_shape, kernel_shape))
