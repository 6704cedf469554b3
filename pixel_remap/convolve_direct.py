# convolve_direct:
#   Spatial-domain convolution of a raster with a kernel, used as the reference
#   path for fft_convolve. The kernel is flipped, the image is zero-padded by
#   (kernel - 1) on every side, and the flipped kernel is slid over it. The
#   output is the top-left image-sized region of the full linear convolution,
#   the same region spectral_convolve returns.
#
# Input parameters:
#    image : 2-D uint8 raster
#   kernel : 2-D real array
#
# Returns:
#    float64 array with the shape of image (not rescaled)

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .raster import as_kernel, as_raster


def flip_kernel( kernel ):
    """Rotate a kernel by 180 degrees (reverse both axes)."""
    return np.asarray(kernel)[::-1, ::-1].copy()


def pad_for_convolution( image, kernel ):

    kr, kc = np.shape(kernel)
    return np.pad(np.asarray(image, dtype=np.float64), ((kr-1, kr-1), (kc-1, kc-1)), mode='constant')


def convolve_direct( image, kernel ):

    image = as_raster(image)
    kernel = as_kernel(kernel)
    rows, cols = image.shape

    padded = pad_for_convolution(image, kernel)
    windows = sliding_window_view(padded, kernel.shape)[:rows, :cols]

    return np.einsum('rcij,ij->rc', windows, flip_kernel(kernel))
