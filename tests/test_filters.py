import pytest

from minitools.bmp import Bmp, Pixel
from minitools.filters import (
    Emboss,
    GaussianBlur,
    GrayScale,
    Invert,
    KernelFilter,
    Sharpen,
    convolve_pixel,
)


def _image(width, height, pixel=Pixel()):
    image = Bmp.create(width, height)
    image.pixels = [[pixel for _ in range(width)] for _ in range(height)]
    return image


def _varied(width, height):
    image = Bmp.create(width, height)
    image.pixels = [
        [Pixel((r * 37 + c * 11) % 256, (r * 5 + c * 71) % 256, (r * 97 + c) % 256) for c in range(width)]
        for r in range(height)
    ]
    return image


def test_invert_black_gives_white():
    image = _image(2, 2)
    Invert().apply(image)
    assert all(p == Pixel(255, 255, 255) for row in image.pixels for p in row)


def test_invert_twice_is_identity():
    image = _varied(4, 3)
    original = [list(row) for row in image.pixels]
    Invert().apply(image)
    assert image.pixels != original
    Invert().apply(image)
    assert image.pixels == original


def test_grayscale_channels_equal_and_idempotent():
    image = _varied(5, 4)
    GrayScale().apply(image)
    assert all(p.red == p.green == p.blue for row in image.pixels for p in row)
    once = [list(row) for row in image.pixels]
    GrayScale().apply(image)
    assert image.pixels == once


@pytest.mark.parametrize("filter_class", [GaussianBlur, Sharpen, Emboss])
def test_uniform_interior_unchanged(filter_class):
    image = _image(3, 3, Pixel(100, 50, 20))
    filter_class().apply(image)
    assert image.pixels[1][1] == Pixel(100, 50, 20)


def test_sharpen_corner_clamps_to_255():
    image = _image(3, 3, Pixel(200, 200, 200))
    Sharpen().apply(image)
    assert image.pixels[0][0] == Pixel(255, 255, 255)


def test_convolve_identity_kernel_returns_pixel():
    image = _varied(3, 3)
    kernel = ((0, 0, 0), (0, 1, 0), (0, 0, 0))
    assert convolve_pixel(image.pixels, 1, 2, kernel) == image.pixels[1][2]


def test_convolve_negative_clamps_to_zero():
    image = _image(3, 3, Pixel(10, 10, 10))
    kernel = ((-1, -1, -1), (-1, -1, -1), (-1, -1, -1))
    assert convolve_pixel(image.pixels, 1, 1, kernel) == Pixel(0, 0, 0)


def test_convolve_rounds_half_away_from_zero():
    image = _image(1, 1, Pixel(3, 3, 3))
    kernel = ((0, 0, 0), (0, 0.5, 0), (0, 0, 0))
    assert convolve_pixel(image.pixels, 0, 0, kernel) == Pixel(2, 2, 2)


def test_kernel_must_be_3x3():
    with pytest.raises(ValueError):
        KernelFilter(((1, 0), (0, 1)))


def test_view_leaves_outside_untouched_and_matches_crop():
    image = _varied(5, 4)
    original = [list(row) for row in image.pixels]
    Sharpen().apply_with_view(image, 1, 1, 3, 2)

    crop = Bmp.create(3, 2)
    crop.pixels = [row[1:4] for row in original[1:3]]
    Sharpen().apply(crop)

    for r in range(4):
        for c in range(5):
            if 1 <= r < 3 and 1 <= c < 4:
                assert image.pixels[r][c] == crop.pixels[r - 1][c - 1]
            else:
                assert image.pixels[r][c] == original[r][c]


def test_view_outside_image_raises():
    image = _image(3, 3)
    with pytest.raises(ValueError):
        Invert().apply_with_view(image, 2, 0, 2, 2)