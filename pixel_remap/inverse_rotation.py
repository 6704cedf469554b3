# NAME:
#     inverse_rotation
#
# PURPOSE:
#     Map every destination pixel of a rotated raster back to the source
#
# EXPLANATION:
#     The output is rotated by THETA about CENTER, so each destination pixel
#     (x, y) is sampled from the source at the inverse rotation (by -THETA)
#     of (x, y) about the same center:
#
#        x' =  cos(-t) x + sin(-t) y + (1 - cos(-t)) cx - sin(-t) cy
#        y' = -sin(-t) x + cos(-t) y + sin(-t) cx + (1 - cos(-t)) cy
#
#     Coordinates within SNAP_TOLERANCE of an integer are snapped to it, so
#     that rounding in cos/sin does not move an exactly aligned coordinate
#     (e.g. a quarter turn about a pixel or half-pixel center) across a floor
#     boundary.
#
# CALLING SEQUENCE:
#     x_src, y_src = inverse_rotation_map( shape, theta, center )
#
# INPUT PARAMETERS:
#     shape  : (rows, cols) of the destination raster
#     theta  : rotation angle in radians (counterclockwise with row 0 at the
#              top, as np.rot90)
#     center : Point2D (x = column, y = row)
#
# RESULT:
#     Two float64 arrays of the given shape holding source columns and rows

import numpy as np

SNAP_TOLERANCE = 1e-9


def snap_to_grid( coords, tolerance=SNAP_TOLERANCE ):

    nearest = np.rint(coords)
    return np.where(np.abs(coords - nearest) < tolerance, nearest, coords)


def inverse_rotation_map( shape, theta, center ):

    rows, cols = shape

    c = np.cos(-theta)
    s = np.sin(-theta)

    x, y = np.meshgrid(np.arange(cols, dtype=np.float64), np.arange(rows, dtype=np.float64))

    x_src = c*x + s*y + (1 - c)*center.x - s*center.y
    y_src = -s*x + c*y + s*center.x + (1 - c)*center.y

    return snap_to_grid(x_src), snap_to_grid(y_src)
