# NAME:
#     interpolate
#
# PURPOSE:
#     Reconstruct raster intensities at non-integer coordinates
#
# EXPLANATION:
#     A coordinate (x, y) is valid when i = floor(x) and j = floor(y) satisfy
#     0 < i < cols and 0 < j < rows. The lower bound is strict, so column 0
#     and row 0 are never sampled; pass strict_lower_bound=False to include
#     them. Invalid coordinates (NaN included) get the background value.
#
#     Every sample fetch goes through read_clamped, so the extra neighbours
#     needed by the bilinear (i+1, j+1) and bicubic (i-1..i+2, j-1..j+2)
#     kernels are clamped into the raster at its edges. Pixels whose whole
#     neighbourhood lies inside the raster are unaffected.
#
#     Bilinear and bicubic values are clipped to [0, 255] and then truncated
#     to uint8.
#
# CALLING SEQUENCE:
#     values = sample_image( image, x, y, mode [, background, strict_lower_bound] )
#
# INPUT PARAMETERS:
#     image : 2-D uint8 raster
#     x, y  : column and row coordinates (scalars or arrays of equal shape)
#     mode  : InterpolationMode or one of 'nearest', 'bilinear', 'bicubic'
#
# OPTIONAL INPUT PARAMETERS:
#     background : value returned outside the raster (default 255)
#     strict_lower_bound : exclude column 0 and row 0 (default True)
#
# RESULT:
#     uint8 values with the shape of x

import enum
import logging

import numpy as np

from .errors import DimensionMismatch, InvalidArgument
from .hermite import Point2D, cubic_spline
from .raster import as_raster

log = logging.getLogger(__name__)

BACKGROUND = 255

_MODE_ALIASES = {'neighbor': 'nearest', 'neighbour': 'nearest', 'linear': 'bilinear', 'cubic': 'bicubic'}


class InterpolationMode(enum.Enum):
    NEAREST = 'nearest'
    BILINEAR = 'bilinear'
    BICUBIC = 'bicubic'

    @classmethod
    def parse(cls, mode):
        """Return the member for an InterpolationMode or a mode name."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            name = mode.strip().lower()
            name = _MODE_ALIASES.get(name, name)
            try:
                return cls(name)
            except ValueError:
                pass
        names = ", ".join(m.value for m in cls)
        raise InvalidArgument(f"Unknown interpolation mode {mode!r}. Must be one of: {names}")


def read_clamped( data, rows, cols ):
    """Fetch data[rows, cols] with the indices clamped into the raster."""
    rows = np.clip(rows, 0, data.shape[0] - 1)
    cols = np.clip(cols, 0, data.shape[1] - 1)
    return data[rows, cols]


def check_background( background ):
    if isinstance(background, (bool, np.bool_)) or not isinstance(background, (int, np.integer)):
        raise InvalidArgument(f"background must be an integer in [0, 255], got {background!r}")
    if not 0 <= background <= 255:
        raise InvalidArgument(f"background must be an integer in [0, 255], got {background}")
    return int(background)


class Interpolator:
    """
    Base class for the interpolation kernels.

    Subclasses implement interpolate(), which receives the float64 raster,
    the integer grid indices (i, j) of the valid coordinates and the
    coordinates themselves, and returns unclipped intensities.
    """

    mode = None

    def interpolate(self, data, i, j, x, y):
        raise NotImplementedError

    def sample(self, data, x, y, background=BACKGROUND, strict_lower_bound=True):

        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.shape != y.shape:
            raise DimensionMismatch(f"x and y coordinate arrays differ in shape: {x.shape} vs {y.shape}")

        rows, cols = data.shape
        lower = 0 if strict_lower_bound else -1

        fi = np.floor(x)
        fj = np.floor(y)
        valid = (fi > lower) & (fj > lower) & (fi < cols) & (fj < rows)

        out = np.full(x.shape, background, dtype=np.uint8)
        if np.any(valid):
            i = fi[valid].astype(np.intp)
            j = fj[valid].astype(np.intp)
            values = self.interpolate(data, i, j, x[valid], y[valid])
            out[valid] = np.clip(values, 0, 255).astype(np.uint8)

        return out


class NearestInterpolator(Interpolator):

    mode = InterpolationMode.NEAREST

    def interpolate(self, data, i, j, x, y):
        return read_clamped(data, j, i)


class BilinearInterpolator(Interpolator):

    mode = InterpolationMode.BILINEAR

    def interpolate(self, data, i, j, x, y):

        dx = x - i
        dy = y - j

        s00 = read_clamped(data, j, i)
        s01 = read_clamped(data, j, i+1)
        s10 = read_clamped(data, j+1, i)
        s11 = read_clamped(data, j+1, i+1)

        p1 = s00 + (s01 - s00) * dx
        p2 = s10 + (s11 - s10) * dx

        return p1 + (p2 - p1) * dy


class BicubicInterpolator(Interpolator):

    mode = InterpolationMode.BICUBIC

    def interpolate(self, data, i, j, x, y):

        # spline across columns i-1..i+2 for each of rows j-1..j+2
        row_values = []
        for row in (j-1, j, j+1, j+2):
            points = [Point2D(col, read_clamped(data, row, col)) for col in (i-1, i, i+1, i+2)]
            row_values.append(cubic_spline(*points, x))

        # then down the column through the four row results
        points = [Point2D(row, value) for row, value in zip((j-1, j, j+1, j+2), row_values)]

        return cubic_spline(*points, y)


_INTERPOLATORS = {
    InterpolationMode.NEAREST: NearestInterpolator,
    InterpolationMode.BILINEAR: BilinearInterpolator,
    InterpolationMode.BICUBIC: BicubicInterpolator,
}


def get_interpolator( mode ):
    """Return the interpolator instance for a mode; raises InvalidArgument for unknown modes."""
    return _INTERPOLATORS[InterpolationMode.parse(mode)]()


def sample_image( image, x, y, mode='nearest', background=BACKGROUND, strict_lower_bound=True ):

    interpolator = get_interpolator(mode)
    background = check_background(background)
    data = as_raster(image).astype(np.float64)

    values = interpolator.sample(data, x, y, background, strict_lower_bound)

    if values.ndim == 0:
        return values[()]
    return values
