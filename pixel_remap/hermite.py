# NAME:
#     hermite
#
# PURPOSE:
#     Hermite cubic spline used by the bicubic interpolation kernel
#
# EXPLANATION:
#     The spline through four consecutive samples p1..p4 is evaluated between
#     p2 and p3. The tangents at p2 and p3 are the backward difference
#     (p2 - p1) and the forward difference (p4 - p3).
#
# CALLING SEQUENCE:
#     value = cubic_spline( p1, p2, p3, p4, x )
#
# INPUT PARAMETERS:
#     p1..p4 : Point2D (abscissa, sample) pairs; fields may be numpy arrays
#     x      : abscissa to evaluate at; only its fractional part is used
#
# RESULT:
#     Spline value (not clipped)

from collections import namedtuple

import numpy as np

Point2D = namedtuple('Point2D', ['x', 'y'])


def h0( t ):
    return 2*t**3 - 3*t**2 + 1


def h1( t ):
    return -2*t**3 + 3*t**2


def h2( t ):
    return t**3 - 2*t**2 + t


def h3( t ):
    return t**3 - t**2


def cubic_spline( p1, p2, p3, p4, x ):

    t = x - np.floor(x)

    return h0(t)*p2.y + h1(t)*p3.y + h2(t)*(p2.y - p1.y) + h3(t)*(p4.y - p3.y)
