"""Read, create and write uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path

BMP_FILE_TYPE = 0x4D42
_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADERS_SIZE = _HEADER.size + _INFO_HEADER.size
_PIXEL_SIZE = 3


class BmpError(Exception):
    """Base error for BMP handling."""


class InvalidFileError(BmpError):
    """The data is not a BMP file."""


class UnsupportedBmpError(BmpError):
    """The BMP uses a format other than uncompressed 24-bit."""


@dataclass(frozen=True, slots=True)
class Pixel:
    red: int = 0
    green: int = 0
    blue: int = 0


def calc_padding(width: int) -> int:
    """Bytes needed to pad a row of ``width`` pixels to four bytes."""
    row_bytes = width * _PIXEL_SIZE
    return 4 - row_bytes % 4 if row_bytes % 4 else 0


@dataclass(eq=False)
class Bmp:
    """An image as rows of pixels, top row first.

    ``raw`` holds the original file bytes; writing stores the pixels back
    into a copy of them, so everything else in the file is kept.
    """

    width: int
    height: int
    pixels: list[list[Pixel]]
    file_size: int
    offset: int
    raw: bytes = field(repr=False)

    @property
    def padding(self) -> int:
        return calc_padding(self.width)

    @property
    def _stride(self) -> int:
        return self.width * _PIXEL_SIZE + self.padding

    def _row_start(self, row: int) -> int:
        return self.offset + (self.height - 1 - row) * self._stride

    @classmethod
    def create(cls, width: int, height: int) -> Bmp:
        """A black image of the given size."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        padding = calc_padding(width)
        image_size = (width + padding) * height * _PIXEL_SIZE
        file_size = _HEADERS_SIZE + image_size
        raw = bytearray(file_size)
        _HEADER.pack_into(raw, 0, BMP_FILE_TYPE, file_size, 0, 0, _HEADERS_SIZE)
        _INFO_HEADER.pack_into(
            raw, _HEADER.size, _INFO_HEADER.size, width, height, 1, 24, 0, image_size, 0, 0, 0, 0
        )
        pixels = [[Pixel() for _ in range(width)] for _ in range(height)]
        return cls(width, height, pixels, file_size, _HEADERS_SIZE, bytes(raw))

    @classmethod
    def from_bytes(cls, data: bytes) -> Bmp:
        """Decode a BMP file held in memory."""
        if len(data) < _HEADERS_SIZE:
            raise InvalidFileError("file is too short for a BMP header")
        file_type, file_size, _, _, offset = _HEADER.unpack_from(data, 0)
        if file_type != BMP_FILE_TYPE:
            raise InvalidFileError("missing BMP signature")
        info = _INFO_HEADER.unpack_from(data, _HEADER.size)
        width, height, bit_count, compression = info[1], info[2], info[4], info[5]
        if bit_count != 24 or compression != 0:
            raise UnsupportedBmpError("only uncompressed 24-bit images are supported")
        if width < 0 or height < 0:
            raise UnsupportedBmpError("negative image dimensions are not supported")

        image = cls(width, height, [], file_size, offset, bytes(data))
        if width and height and len(data) < offset + image._stride * height:
            raise InvalidFileError("pixel data is truncated")
        for row in range(height):
            start = image._row_start(row)
            image.pixels.append(
                [
                    Pixel(data[pos + 2], data[pos + 1], data[pos])
                    for pos in range(start, start + width * _PIXEL_SIZE, _PIXEL_SIZE)
                ]
            )
        return image

    @classmethod
    def read(cls, path: str | os.PathLike) -> Bmp:
        """Read a BMP file from disk."""
        return cls.from_bytes(Path(path).read_bytes())

    def to_bytes(self) -> bytes:
        """Encode the image, keeping all non-pixel bytes of the original."""
        if len(self.pixels) != self.height or any(len(row) != self.width for row in self.pixels):
            raise ValueError("pixel rows do not match the image dimensions")
        buffer = bytearray(self.raw)
        needed = self.offset + self._stride * self.height
        if len(buffer) < needed:
            buffer.extend(bytes(needed - len(buffer)))
        for row, pixels in enumerate(self.pixels):
            pos = self._row_start(row)
            for pixel in pixels:
                buffer[pos : pos + _PIXEL_SIZE] = bytes((pixel.blue, pixel.green, pixel.red))
                pos += _PIXEL_SIZE
        return bytes(buffer[: self.file_size])

    def write(self, path: str | os.PathLike) -> None:
        """Write the image to disk."""
        Path(path).write_bytes(self.to_bytes())