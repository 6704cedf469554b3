# NAME:
#     fft_convolve
#
# PURPOSE:
#     Convolve a raster with a kernel via FFTs
#
# EXPLANATION:
#     Both arrays are zero-padded to a common optimal size and transformed
#     (pad_fft.prepare), the spectra are multiplied element by element (no
#     conjugation, so this is convolution and not correlation), and the
#     product is inverse transformed. The top-left image-sized region of the
#     real part is kept; the rest of the padded grid holds the tail of the
#     full linear convolution and the zero padding.
#
#     spectral_convolve returns that raw float region, which is linear in the
#     image. convolve_fft rescales the whole padded result min-max to
#     [0, 255], so the tail and the padding take part in the range, rounds to
#     uint8 and only then crops.
#
# CALLING SEQUENCE:
#     result = convolve_fft( image, kernel )
#     raw = spectral_convolve( image, kernel )
#
# INPUT PARAMETERS:
#     image  : 2-D uint8 raster
#     kernel : 2-D real array
#
# RESULT:
#     uint8 raster (convolve_fft) or float64 array (spectral_convolve), both
#     with the shape of image

import logging

import numpy as np
from numpy.fft import ifft2

from .pad_fft import prepare
from .raster import as_kernel, as_raster

log = logging.getLogger(__name__)


def multiply_spectra( image_spectrum, kernel_spectrum ):
    return image_spectrum * kernel_spectrum


def inverse_transform( spectrum ):
    return np.real(ifft2(spectrum))


def crop( data, shape ):
    """Top-left region of data with the given (rows, cols)."""
    return data[:shape[0], :shape[1]].copy()


def normalize_minmax( data, lower=0., upper=255. ):
    """
    Linearly rescale data so that its minimum maps to lower and its maximum
    to upper. A constant array maps to lower everywhere.
    """
    data = np.asarray(data, dtype=np.float64)
    dmin = data.min()
    dmax = data.max()

    if dmax == dmin:
        return np.full(data.shape, lower, dtype=np.float64)

    return (data - dmin) * ((upper - lower) / (dmax - dmin)) + lower


def full_convolution( image, kernel ):
    """Real inverse transform of the product of the spectra, on the whole padded grid."""
    image_spectrum, kernel_spectrum = prepare(image, kernel)
    product = multiply_spectra(image_spectrum, kernel_spectrum)

    return inverse_transform(product)


def spectral_convolve( image, kernel ):

    image = as_raster(image)
    kernel = as_kernel(kernel)

    return crop(full_convolution(image, kernel), image.shape)


def convolve_fft( image, kernel ):

    image = as_raster(image)
    kernel = as_kernel(kernel)

    result = full_convolution(image, kernel)
    log.debug(f"Padded convolution {result.shape}, range [{result.min():.6g}, {result.max():.6g}]")

    scaled = np.clip(np.rint(normalize_minmax(result, 0, 255)), 0, 255).astype(np.uint8)

    return crop(scaled, image.shape)
