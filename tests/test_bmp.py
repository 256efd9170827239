import struct

import pytest

from minitools.bmp import (
    Bmp,
    BmpError,
    InvalidFileError,
    Pixel,
    UnsupportedBmpError,
    calc_padding,
)


def _sample(width=3, height=2):
    image = Bmp.create(width, height)
    for row in range(height):
        image.pixels[row] = [Pixel(row * 40 + col, 200 - col, 17 * col) for col in range(width)]
    return image


@pytest.mark.parametrize("width", range(0, 12))
def test_padding_aligns_rows(width):
    padding = calc_padding(width)
    assert 0 <= padding < 4
    assert (width * 3 + padding) % 4 == 0


def test_padding_of_aligned_width():
    assert calc_padding(4) == 0


def test_create_header():
    image = Bmp.create(5, 4)
    data = image.to_bytes()
    assert data[:2] == b"BM"
    assert len(data) == image.file_size
    assert struct.unpack_from("<ii", data, 18) == (5, 4)
    assert struct.unpack_from("<HH", data, 26) == (1, 24)
    assert image.offset == 54


def test_create_is_black():
    image = Bmp.create(3, 2)
    assert image.pixels == [[Pixel(0, 0, 0)] * 3] * 2


def test_create_file_size_matches_source_formula():
    assert Bmp.create(1, 1).file_size == 60


def test_create_rejects_negative_size():
    with pytest.raises(ValueError):
        Bmp.create(-1, 2)


def test_round_trip_in_memory():
    image = _sample()
    decoded = Bmp.from_bytes(image.to_bytes())
    assert decoded.width == image.width
    assert decoded.height == image.height
    assert decoded.pixels == image.pixels


def test_bottom_row_is_stored_first():
    image = _sample()
    data = image.to_bytes()
    first = image.pixels[-1][0]
    assert data[image.offset : image.offset + 3] == bytes((first.blue, first.green, first.red))


def test_round_trip_on_disk(tmp_path):
    image = _sample(5, 3)
    path = tmp_path / "out.bmp"
    image.write(path)
    assert Bmp.read(path).pixels == image.pixels


def test_trailing_bytes_are_kept():
    data = _sample().to_bytes() + b"extra"
    image = Bmp.from_bytes(data)
    image.pixels[0][0] = Pixel(1, 2, 3)
    again = Bmp.from_bytes(image.to_bytes())
    assert again.pixels[0][0] == Pixel(1, 2, 3)
    assert again.pixels[1] == Bmp.from_bytes(data).pixels[1]


def test_invalid_signature():
    data = bytearray(_sample().to_bytes())
    data[:2] = b"XX"
    with pytest.raises(InvalidFileError):
        Bmp.from_bytes(bytes(data))


def test_too_short():
    with pytest.raises(InvalidFileError):
        Bmp.from_bytes(b"BM")


def test_unsupported_bit_count():
    data = bytearray(_sample().to_bytes())
    struct.pack_into("<H", data, 28, 32)
    with pytest.raises(UnsupportedBmpError):
        Bmp.from_bytes(bytes(data))


def test_unsupported_compression():
    data = bytearray(_sample().to_bytes())
    struct.pack_into("<I", data, 30, 1)
    with pytest.raises(BmpError):
        Bmp.from_bytes(bytes(data))


def test_truncated_pixels():
    data = _sample(4, 4).to_bytes()
    with pytest.raises(InvalidFileError):
        Bmp.from_bytes(data[:60])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Bmp.read(tmp_path / "absent.bmp")


def test_mismatched_pixel_rows():
    image = Bmp.create(2, 2)
    image.pixels.pop()
    with pytest.raises(ValueError):
        image.to_bytes()