import os

__version__ = '1.0.0'

lib_dir = os.path.abspath(os.path.dirname(__file__))

from .errors import DimensionMismatch, InvalidArgument, PixelRemapError
from .hermite import Point2D, cubic_spline

# rotation
from .interpolate import (BACKGROUND, BicubicInterpolator, BilinearInterpolator, InterpolationMode,
                          Interpolator, NearestInterpolator, get_interpolator, read_clamped, sample_image)
from .inverse_rotation import inverse_rotation_map
from .rotate_image import image_center, rotate_image, rotate_image_deg

# convolution
from .optimal_fft_size import optimal_fft_size, padded_shape
from .pad_fft import prepare, zero_pad
from .fft_convolve import convolve_fft, normalize_minmax, spectral_convolve
from .convolve_direct import convolve_direct, flip_kernel

from .patterns import make_kernel, make_test_pattern
from .raster import as_raster
from .logging_config import setup_logging
from .utils import load_config, read_ini_file
