import numpy as np
import pytest

from pixel_remap import (DimensionMismatch, InvalidArgument, Point2D, get_interpolator, image_center,
                         inverse_rotation_map, make_test_pattern, rotate_image, rotate_image_deg)

MODES = ['nearest', 'bilinear', 'bicubic']


def test_inverse_map_of_zero_angle_is_identity():
    x_src, y_src = inverse_rotation_map((3, 5), 0.0, Point2D(1.7, -4.2))
    y, x = np.indices((3, 5))
    np.testing.assert_array_equal(x_src, x)
    np.testing.assert_array_equal(y_src, y)


def test_inverse_map_keeps_center_fixed():
    x_src, y_src = inverse_rotation_map((9, 9), 0.7, Point2D(4., 4.))
    assert x_src[4, 4] == pytest.approx(4.)
    assert y_src[4, 4] == pytest.approx(4.)


def test_inverse_map_quarter_turn_is_exact():
    x_src, y_src = inverse_rotation_map((4, 4), np.pi / 2, Point2D(1.5, 1.5))
    y, x = np.indices((4, 4))
    np.testing.assert_array_equal(x_src, 3 - y)
    np.testing.assert_array_equal(y_src, x)


@pytest.mark.parametrize("mode", MODES)
@pytest.mark.parametrize("center", [(0., 0.), (3.5, 3.5), (2.3, 7.9), (-20., 40.)])
def test_zero_angle_reproduces_source(mode, center, random_image):
    rotated = rotate_image(random_image, 0.0, center, mode)
    np.testing.assert_array_equal(rotated[1:, 1:], random_image[1:, 1:])
    # row 0 and column 0 are never sampled under the strict lower bound
    assert np.all(rotated[0, :] == 255)
    assert np.all(rotated[:, 0] == 255)


@pytest.mark.parametrize("mode", MODES)
def test_zero_angle_with_relaxed_bound_is_exact(mode, random_image):
    rotated = rotate_image(random_image, 0.0, (4., 4.), mode, strict_lower_bound=False)
    np.testing.assert_array_equal(rotated, random_image)


def test_quarter_turn_example(ramp4):
    np.testing.assert_array_equal(ramp4, 17 * np.arange(16).reshape(4, 4))
    rotated = rotate_image(ramp4, np.pi / 2, (1.5, 1.5), 'nearest')
    expected = np.array([[255, 119, 187, 255],
                         [255, 102, 170, 238],
                         [255,  85, 153, 221],
                         [255, 255, 255, 255]], dtype=np.uint8)
    np.testing.assert_array_equal(rotated, expected)


@pytest.mark.parametrize("quarter_turns", [1, 2, 3])
def test_quarter_turns_about_center_match_rot90(quarter_turns, random_image):
    image = random_image[:11, :11]
    rotated = rotate_image(image, quarter_turns * np.pi / 2, None, 'nearest', strict_lower_bound=False)
    np.testing.assert_array_equal(rotated, np.rot90(image, quarter_turns))


@pytest.mark.parametrize("theta", [np.pi / 2, np.pi, -np.pi / 2])
def test_round_trip_is_exact_in_interior(theta):
    image = make_test_pattern('rings', (7, 7), period=3)
    there = rotate_image(image, theta, (3, 3), 'nearest')
    back = rotate_image(there, -theta, (3, 3), 'nearest')
    np.testing.assert_array_equal(back[1:-1, 1:-1], image[1:-1, 1:-1])


def test_round_trip_error_is_bounded():
    rows, cols = np.indices((16, 16))
    image = (3 * rows + 5 * cols).astype(np.uint8)
    center = (7.5, 7.5)

    there = rotate_image(image, 0.3, center, 'nearest')
    back = rotate_image(there, -0.3, center, 'nearest')

    inside = np.hypot(cols - 7.5, rows - 7.5) <= 5
    error = np.abs(back.astype(int) - image.astype(int))[inside]
    # nearest-neighbour truncation moves each axis by at most two pixels over the round trip
    assert error.max() <= 2 * 3 + 2 * 5
    assert np.all(back[inside] != 255)


@pytest.mark.parametrize("mode", ['bilinear', 'bicubic'])
@pytest.mark.parametrize("theta", [0.2, 1.0, 2.5])
def test_output_is_clipped_interpolation(mode, theta):
    image = make_test_pattern('checkerboard', (20, 20), period=2)
    rotated = rotate_image(image, theta, (9.5, 9.5), mode)
    assert rotated.dtype == np.uint8

    # recompute the unclipped values and check the output is exactly their clipped truncation
    x_src, y_src = inverse_rotation_map(image.shape, theta, Point2D(9.5, 9.5))
    i, j = np.floor(x_src), np.floor(y_src)
    valid = (i > 0) & (j > 0) & (i < 20) & (j < 20)
    raw = get_interpolator(mode).interpolate(image.astype(float), i[valid].astype(int), j[valid].astype(int),
                                             x_src[valid], y_src[valid])
    np.testing.assert_array_equal(rotated[valid], np.clip(raw, 0, 255).astype(np.uint8))
    np.testing.assert_array_equal(rotated[~valid], 255)
    if mode == 'bicubic':
        assert raw.max() > 255 or raw.min() < 0


@pytest.mark.parametrize("mode", MODES)
def test_everything_outside_gives_background(mode, random_image):
    rotated = rotate_image(random_image, np.pi, (1000., 1000.), mode)
    assert np.all(rotated == 255)


def test_custom_background(random_image):
    rotated = rotate_image(random_image, 0.5, (-500., 0.), 'bilinear', background=0)
    assert np.all(rotated == 0)


def test_default_center_is_image_center(random_image):
    assert image_center(random_image.shape) == Point2D(8., 6.)
    np.testing.assert_array_equal(rotate_image(random_image, 0.4, None, 'bicubic'),
                                  rotate_image(random_image, 0.4, (8., 6.), 'bicubic'))


def test_degrees_wrapper(random_image):
    np.testing.assert_array_equal(rotate_image_deg(random_image, 90., (6., 6.), 'nearest'),
                                  rotate_image(random_image, np.pi / 2, (6., 6.), 'nearest'))


def test_source_is_not_modified(random_image):
    original = random_image.copy()
    rotated = rotate_image(random_image, 1.1, None, 'bicubic')
    np.testing.assert_array_equal(random_image, original)
    assert rotated is not random_image
    assert rotated.shape == random_image.shape


def test_accepts_integer_arrays_of_other_dtypes(random_image):
    np.testing.assert_array_equal(rotate_image(random_image.astype(np.int64), 0.3),
                                  rotate_image(random_image, 0.3))


def test_unknown_mode_fails_up_front(random_image):
    with pytest.raises(InvalidArgument):
        rotate_image(random_image, 0.3, None, 'lanczos')


@pytest.mark.parametrize("theta", [np.nan, np.inf, 'abc'])
def test_bad_angle(theta, random_image):
    with pytest.raises(InvalidArgument):
        rotate_image(random_image, theta)


@pytest.mark.parametrize("center", [(1.,), (np.nan, 2.), 'xy', 5])
def test_bad_center(center, random_image):
    with pytest.raises(InvalidArgument):
        rotate_image(random_image, 0.3, center)


@pytest.mark.parametrize("image", [np.zeros((4, 4, 3), dtype=np.uint8), np.zeros((0, 4), dtype=np.uint8),
                                   np.zeros(5, dtype=np.uint8)])
def test_bad_dimensions(image):
    with pytest.raises(DimensionMismatch):
        rotate_image(image, 0.3)


@pytest.mark.parametrize("image", [np.full((3, 3), 300), np.full((3, 3), -1), np.full((3, 3), 2.5),
                                   np.full((3, 3), 1 + 1j)])
def test_bad_intensities(image):
    with pytest.raises(InvalidArgument):
        rotate_image(image, 0.3)


@pytest.mark.parametrize("angle_deg", ['abc', None, np.inf])
def test_bad_angle_in_degrees(angle_deg, random_image):
    with pytest.raises(InvalidArgument):
        rotate_image_deg(random_image, angle_deg)
