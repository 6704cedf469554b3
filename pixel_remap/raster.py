import numpy as np

from .errors import DimensionMismatch, InvalidArgument


def as_raster( image, name='image' ):
    """
    Check that an array is a single-channel 8-bit raster and return it as uint8.

    Parameters
    ----------
    image : 2-D array of integer intensities in [0, 255]. Any numeric dtype is
        accepted as long as the values are whole numbers in range.
    name : Name used in error messages.

    Returns
    -------
    raster : uint8 array. The input itself when it is already uint8.
    """
    arr = np.asarray(image)

    if arr.ndim != 2:
        raise DimensionMismatch(f"{name} must be a 2-D single-channel raster, got shape {arr.shape}")
    if arr.size == 0:
        raise DimensionMismatch(f"{name} has a zero dimension: {arr.shape}")

    if arr.dtype == np.uint8:
        return arr

    if not np.issubdtype(arr.dtype, np.number) or np.iscomplexobj(arr):
        raise InvalidArgument(f"{name} must hold real intensities, got dtype {arr.dtype}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument(f"{name} contains non-finite values")
    if arr.min() < 0 or arr.max() > 255:
        raise InvalidArgument(f"{name} values must lie in [0, 255], got [{arr.min()}, {arr.max()}]")
    if np.any(arr != np.floor(arr)):
        raise InvalidArgument(f"{name} must hold whole-number intensities")

    return arr.astype(np.uint8)


def as_kernel( kernel ):
    """Return a convolution kernel as a finite 2-D float64 array."""
    arr = np.asarray(kernel)

    if arr.ndim != 2:
        raise DimensionMismatch(f"kernel must be 2-D, got shape {arr.shape}")
    if arr.size == 0:
        raise DimensionMismatch(f"kernel has a zero dimension: {arr.shape}")
    if np.iscomplexobj(arr) or not (np.issubdtype(arr.dtype, np.number) or arr.dtype == bool):
        raise InvalidArgument(f"kernel must be real-valued, got dtype {arr.dtype}")

    arr = arr.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidArgument("kernel contains non-finite values")

    return arr
