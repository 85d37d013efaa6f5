import pytest

from manikinkit.geometry import Circle, Rectangle
from manikinkit.image import Image
from manikinkit.imageutil import (
    Channel,
    GrayscaleType,
    SeparationType,
    bilerp_pixels,
    black_hole_effect,
    copy_from_image,
    expand_effect,
    grayscale_image,
    lerp_pixels,
    paste_to_image,
    separate_channel,
    subtract_channel,
    swirl_effect,
)


def gradient(width=8, height=8, channels=4):
    return Image(bytes(i % 256 for i in range(width * height * channels)), width, height, channels)


def outside_unchanged(before, after, x1, y1, x2, y2):
    for y in range(before.height):
        for x in range(before.width):
            if not (x1 <= x < x2 and y1 <= y < y2):
                if before.pixel_at(x, y) != after.pixel_at(x, y):
                    return False
    return True


def test_black_hole_changes_only_affected_area():
    img = gradient()
    before = img.copy()
    black_hole_effect(img, Circle(4, 4, 2))
    assert outside_unchanged(before, img, 2, 2, 6, 6)
    assert img != before


def test_black_hole_zero_radius_is_noop():
    img = gradient()
    before = img.copy()
    black_hole_effect(img, Circle(4, 4, 0))
    assert img == before


def test_expand_keeps_uniform_image():
    img = Image(bytes([9, 8, 7, 6]) * 64, 8, 8, 4)
    before = img.copy()
    expand_effect(img, Circle(4, 4, 3))
    assert img == before


def test_expand_changes_only_affected_area():
    img = gradient()
    before = img.copy()
    expand_effect(img, Circle(3, 3, 2))
    assert (img.width, img.height, img.channels) == (8, 8, 4)
    for y in range(8):
        for x in range(8):
            if not (1 <= x < 5 and 1 <= y < 5):
                assert img.pixel_at(x, y) == before.pixel_at(x, y)


def test_swirl_preserves_centre_and_outside():
    img = gradient()
    before = img.copy()
    swirl_effect(img, Circle(4, 4, 3), 1)
    assert img.pixel_at(4, 4) == before.pixel_at(4, 4)
    assert outside_unchanged(before, img, 1, 1, 7, 7)


def test_swirl_samples_come_from_area_or_are_zero():
    img = gradient()
    before = img.copy()
    swirl_effect(img, Circle(4, 4, 3), 2)
    originals = {before.pixel_at(x, y) for y in range(1, 7) for x in range(1, 7)}
    for y in range(1, 7):
        for x in range(1, 7):
            pixel = img.pixel_at(x, y)
            assert pixel == bytes(4) or pixel in originals


def test_swirl_zero_radius_is_noop():
    img = gradient()
    before = img.copy()
    swirl_effect(img, Circle(4, 4, 0), 3)
    assert img == before


def test_lerp_endpoints():
    a, b = bytes([10, 20, 30]), bytes([200, 100, 0])
    assert lerp_pixels(a, b, 0.0) == a
    assert lerp_pixels(a, b, 1.0) == b


def test_bilerp_integer_position_is_pixel():
    img = gradient()
    assert bilerp_pixels(img, 3.0, 5.0) == img.pixel_at(3, 5)


def test_bilerp_horizontal_midpoint():
    img = Image(bytes([0, 200]), 2, 1, 1)
    assert bilerp_pixels(img, 0.5, 0.0) == bytes([100])


def test_bilerp_vertical_midpoint():
    img = Image(bytes([0, 200]), 1, 2, 1)
    assert bilerp_pixels(img, 0.0, 0.5) == bytes([100])


def test_bilerp_outside_raises():
    img = Image(bytes([0, 200]), 2, 1, 1)
    with pytest.raises(IndexError):
        bilerp_pixels(img, 1.5, 0.0)


@pytest.mark.parametrize(
    "kind, pixel, expected",
    [
        (GrayscaleType.MIN, (10, 200, 50, 77), 10),
        (GrayscaleType.MAX, (10, 200, 50, 77), 200),
        (GrayscaleType.MED, (10, 200, 50, 77), 50),
        (GrayscaleType.MED, (50, 50, 10, 77), 50),
        (GrayscaleType.LIGHTNESS, (10, 20, 30, 77), 20),
        (GrayscaleType.AVG, (10, 20, 30, 77), 20),
    ],
)
def test_grayscale_values(kind, pixel, expected):
    src = Image(bytes(pixel), 1, 1, 4)
    out = grayscale_image(src, kind)
    assert out.pixel_at(0, 0) == bytes([expected, expected, expected, 77])
    assert src.pixel_at(0, 0) == bytes(pixel)


def test_grayscale_luminosity_equal_channels():
    src = Image(bytes([10, 200, 50, 77, 255, 0, 128, 9]), 2, 1, 4)
    out = grayscale_image(src, GrayscaleType.LUMINOSITY)
    for x in range(2):
        r, g, b, a = out.pixel_at(x, 0)
        assert r == g == b
        assert a == src.pixel_at(x, 0)[3]


def test_grayscale_needs_three_channels():
    with pytest.raises(ValueError):
        grayscale_image(Image(bytes([1, 2]), 1, 1, 2), GrayscaleType.MIN)


def test_separate_channel_light_and_dark():
    src = Image(bytes([10, 20, 30, 40]), 1, 1, 4)
    assert separate_channel(src, Channel.RED, SeparationType.LIGHT).data == bytes([10, 255, 255, 255])
    assert separate_channel(src, Channel.RED, SeparationType.DARK).data == bytes([10, 0, 0, 0])
    assert src.data == bytes([10, 20, 30, 40])


def test_separate_alpha_on_three_channels():
    src = Image(bytes([10, 20, 30]), 1, 1, 3)
    assert separate_channel(src, Channel.ALPHA, SeparationType.DARK).data == bytes(3)


def test_subtract_channel():
    src = Image(bytes([10, 20, 30, 40] * 2), 2, 1, 4)
    out = subtract_channel(src, Channel.GREEN, SeparationType.DARK)
    assert out.data == bytes([10, 0, 30, 40] * 2)
    light = subtract_channel(src, Channel.BLUE, SeparationType.LIGHT)
    assert light.data == bytes([10, 20, 255, 40] * 2)


def test_copy_from_image_matches_source():
    src = Image(bytes(range(16)), 4, 4, 1)
    out = copy_from_image(src, Rectangle(1, 1, 2, 2))
    assert (out.width, out.height, out.channels) == (2, 2, 1)
    for y in range(2):
        for x in range(2):
            assert out.pixel_at(x, y) == src.pixel_at(x + 1, y + 1)


def test_copy_with_negative_size_is_normalised():
    src = Image(bytes(range(16)), 4, 4, 1)
    assert copy_from_image(src, Rectangle(3, 3, -2, -2)) == copy_from_image(src, Rectangle(1, 1, 2, 2))


def test_copy_outside_raises():
    src = Image(bytes(range(16)), 4, 4, 1)
    with pytest.raises(IndexError):
        copy_from_image(src, Rectangle(3, 3, 2, 2))


def test_paste_clips_to_destination():
    src = Image(bytes(range(1, 10)), 3, 3, 1)
    dest = Image(bytes(16), 4, 4, 1)
    paste_to_image(src, dest, 2, 2)
    assert dest.pixel_at(2, 2) == src.pixel_at(0, 0)
    assert dest.pixel_at(3, 3) == src.pixel_at(1, 1)
    assert dest.pixel_at(1, 1) == bytes(1)


def test_copy_paste_round_trip():
    src = gradient()
    region = Rectangle(2, 3, 4, 2)
    piece = copy_from_image(src, region)
    blank = Image(bytes(8 * 8 * 4), 8, 8, 4)
    paste_to_image(piece, blank, 2, 3)
    assert copy_from_image(blank, region) == piece