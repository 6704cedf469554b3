import logging

import numpy as np

from .errors import InvalidArgument
from .hermite import Point2D
from .interpolate import BACKGROUND, check_background, get_interpolator
from .inverse_rotation import inverse_rotation_map
from .raster import as_raster

log = logging.getLogger(__name__)


def image_center( shape ):
    """Geometric center (x, y) of a raster; the central pixel for odd sizes."""
    rows, cols = shape
    return Point2D((cols - 1) / 2, (rows - 1) / 2)


def as_angle( angle, name='theta' ):

    try:
        angle = float(angle)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{name} must be a number, got {angle!r}")
    if not np.isfinite(angle):
        raise InvalidArgument(f"{name} must be finite, got {angle}")

    return angle


def as_center( center, shape ):

    if center is None:
        return image_center(shape)

    try:
        cx, cy = center
        cx = float(cx)
        cy = float(cy)
    except (TypeError, ValueError):
        raise InvalidArgument(f"center must be an (x, y) pair of numbers, got {center!r}")

    if not (np.isfinite(cx) and np.isfinite(cy)):
        raise InvalidArgument(f"center must be finite, got ({cx}, {cy})")

    return Point2D(cx, cy)


def rotate_image( image, theta, center=None, mode='nearest', background=BACKGROUND, strict_lower_bound=True ):
    """
    Rotate a raster about a point by inverse mapping every destination pixel.

    Parameters
    ----------
    image : 2-D uint8 raster.
    theta : Rotation angle in radians.
    center : (x, y) rotation center, x along columns and y along rows.
        Defaults to the geometric center of the raster.
    mode : InterpolationMode or 'nearest', 'bilinear', 'bicubic'.
    background : Value written where the source is not sampled (default 255).
    strict_lower_bound : Keep the legacy rule that never samples column 0
        and row 0 (default True).

    Returns
    -------
    rotated : New uint8 raster with the shape of image.
    """
    interpolator = get_interpolator(mode)
    background = check_background(background)
    src = as_raster(image)

    theta = as_angle(theta)
    center = as_center(center, src.shape)

    log.debug(f"Rotating {src.shape} raster by {theta:.6g} rad about ({center.x:g}, {center.y:g}), mode={interpolator.mode.value}")

    x_src, y_src = inverse_rotation_map(src.shape, theta, center)
    dst = interpolator.sample(src.astype(np.float64), x_src, y_src, background, strict_lower_bound)

    if log.isEnabledFor(logging.DEBUG):
        log.debug(f"Fraction of output pixels at the background value: {np.mean(dst == background):.3f}")

    return dst


def rotate_image_deg( image, angle_deg, center=None, mode='nearest', background=BACKGROUND, strict_lower_bound=True ):
    """Same as rotate_image with the angle given in degrees."""
    return rotate_image(image, np.deg2rad(as_angle(angle_deg, 'angle_deg')), center, mode, background, strict_lower_bound)
