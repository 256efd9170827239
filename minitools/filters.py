"""Image filters: 3x3 convolution kernels and per-pixel colour changes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from minitools.bmp import Bmp, Pixel

Kernel = Sequence[Sequence[float]]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_channel(value: float) -> int:
    return int(min(max(_round_half_away(value), 0.0), 255.0))


def convolve_pixel(pixels: Sequence[Sequence[Pixel]], row: int, col: int, kernel: Kernel) -> Pixel:
    """Apply a 3x3 kernel centred on ``(row, col)``.

    Neighbours that fall outside the image contribute nothing; each
    channel is rounded half away from zero and clamped to 0..255.
    """
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    red = green = blue = 0.0
    for di, kernel_row in enumerate(kernel):
        r = row - 1 + di
        if not 0 <= r < height:
            continue
        for dj, weight in enumerate(kernel_row):
            c = col - 1 + dj
            if not 0 <= c < width:
                continue
            pixel = pixels[r][c]
            red += weight * pixel.red
            green += weight * pixel.green
            blue += weight * pixel.blue
    return Pixel(_to_channel(red), _to_channel(green), _to_channel(blue))


class Filter(ABC):
    """Something that changes the pixels of an image in place."""

    @abstractmethod
    def apply(self, image: Bmp) -> None:
        """Filter the whole image."""

    def apply_with_view(self, image: Bmp, x: int, y: int, w: int, h: int) -> None:
        """Filter only the ``w`` by ``h`` rectangle whose top-left corner is ``(x, y)``.

        The filter sees the rectangle as an image of its own, so kernels
        do not reach the pixels around it.
        """
        if x < 0 or y < 0 or w < 0 or h < 0 or x + w > image.width or y + h > image.height:
            raise ValueError("view lies outside the image")
        view = Bmp.create(w, h)
        view.pixels = [list(row[x : x + w]) for row in image.pixels[y : y + h]]
        self.apply(view)
        result = [list(row) for row in image.pixels]
        for offset, view_row in enumerate(view.pixels):
            result[y + offset][x : x + w] = view_row
        image.pixels = result


class KernelFilter(Filter):
    """A filter that convolves the image with a 3x3 kernel."""

    def __init__(self, kernel: Kernel) -> None:
        if len(kernel) != 3 or any(len(row) != 3 for row in kernel):
            raise ValueError("kernel must be 3x3")
        self.kernel = tuple(tuple(float(weight) for weight in row) for row in kernel)

    def apply(self, image: Bmp) -> None:
        source = [list(row) for row in image.pixels]
        image.pixels = [
            [convolve_pixel(source, r, c, self.kernel) for c in range(len(row))]
            for r, row in enumerate(source)
        ]


class GaussianBlur(KernelFilter):
    def __init__(self) -> None:
        scale = 1.0 / 16.0
        super().__init__(
            (
                (1 * scale, 2 * scale, 1 * scale),
                (2 * scale, 4 * scale, 2 * scale),
                (1 * scale, 2 * scale, 1 * scale),
            )
        )


class Sharpen(KernelFilter):
    def __init__(self) -> None:
        super().__init__(((0, -1, 0), (-1, 5, -1), (0, -1, 0)))


class Emboss(KernelFilter):
    def __init__(self) -> None:
        super().__init__(((-2, -1, 0), (-1, 1, 1), (0, 1, 2)))


class ColorFilter(Filter):
    """A filter that changes every pixel independently of its neighbours."""

    @staticmethod
    def _recolor_all(image: Bmp, recolor: Callable[[Pixel], Pixel]) -> None:
        image.pixels = [[recolor(pixel) for pixel in row] for row in image.pixels]


class Invert(ColorFilter):
    def apply(self, image: Bmp) -> None:
        self._recolor_all(
            image, lambda p: Pixel(255 - p.red, 255 - p.green, 255 - p.blue)
        )


class GrayScale(ColorFilter):
    def apply(self, image: Bmp) -> None:
        def gray(pixel: Pixel) -> Pixel:
            average = (pixel.red + pixel.green + pixel.blue) // 3
            return Pixel(average, average, average)

        self._recolor_all(image, gray)