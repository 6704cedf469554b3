# NAME:
#     pad_fft
#
# PURPOSE:
#     Zero-pad an image and a kernel to a common FFT-friendly grid and
#     transform both
#
# EXPLANATION:
#     The common grid is at least (image + kernel - 1) along each axis, so the
#     circular convolution computed by multiplying the spectra equals the
#     linear convolution with no wraparound. Zeros are added on the bottom and
#     right only, leaving the data anchored at [0, 0].
#
#     Every stage returns a new array; the arrays passed in are not modified.
#
# CALLING SEQUENCE:
#     image_spectrum, kernel_spectrum = prepare( image, kernel )
#
# INPUT PARAMETERS:
#     image  : 2-D real array
#     kernel : 2-D real array
#
# RESULT:
#     Two complex arrays with identical padded shape

import logging

import numpy as np
from numpy.fft import fft2

from .errors import DimensionMismatch
from .optimal_fft_size import padded_shape

log = logging.getLogger(__name__)


def zero_pad( array, shape ):

    rows, cols = array.shape
    if shape[0] < rows or shape[1] < cols:
        raise DimensionMismatch(f"cannot pad a {array.shape} array to the smaller shape {tuple(shape)}")

    return np.pad(array, ((0, shape[0] - rows), (0, shape[1] - cols)), mode='constant', constant_values=0)


def forward_transform( padded ):
    return fft2(padded)


def prepare( image, kernel ):

    image = np.asarray(image, dtype=np.float64)
    kernel = np.asarray(kernel, dtype=np.float64)
    if image.ndim != 2 or kernel.ndim != 2:
        raise DimensionMismatch(f"image and kernel must be 2-D, got {image.shape} and {kernel.shape}")
    if image.size == 0 or kernel.size == 0:
        raise DimensionMismatch(f"image and kernel must be non-empty, got {image.shape} and {kernel.shape}")

    shape = padded_shape(image.shape, kernel.shape)
    log.debug(f"Padding image {image.shape} and kernel {kernel.shape} to {shape}")

    image_spectrum = forward_transform(zero_pad(image, shape))
    kernel_spectrum = forward_transform(zero_pad(kernel, shape))

    return image_spectrum, kernel_spectrum
