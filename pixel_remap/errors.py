# Exceptions raised by pixel_remap.
#
# Sampling outside the source raster is not an error (the background value is
# returned). Everything here is raised before any pixel is computed.


class PixelRemapError(Exception):
    """Base class for all pixel_remap errors."""


class InvalidArgument(PixelRemapError, ValueError):
    """A parameter has an unusable value (unknown interpolation mode,
    non-finite angle, intensities outside 0-255, bad config entry)."""


class DimensionMismatch(PixelRemapError, ValueError):
    """A raster or kernel has the wrong number of dimensions or a zero size,
    or a padding target is smaller than the array it must hold."""
