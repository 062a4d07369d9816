import math

import pytest

from posprint.protocol import Pixel, is_black, pack_pixels


@pytest.mark.parametrize(
    "pixel, expected",
    [
        (Pixel(0, 0, 0), True),
        (Pixel(0, 0, 0, 255), True),
        (Pixel(0, 0, 0, 128), True),
        (Pixel(0, 0, 0, 127), False),
        (Pixel(0, 0, 0, 0), False),
        (Pixel(127, 127, 127, 255), True),
        (Pixel(127, 128, 129, 255), False),
        (Pixel(255, 255, 255, 255), False),
        ((10, 10, 10), True),
        (None, False),
    ],
)
def test_is_black(pixel, expected):
    assert is_black(pixel) is expected


def test_single_black_pixel(black):
    raster = pack_pixels([[black]], 1, 1)
    assert (raster.data, raster.bitwidth, raster.bitheight) == (b"\x80", 1, 1)


def test_white_row(white):
    raster = pack_pixels([[white] * 8], 8, 1)
    assert raster.data == b"\x00"


def test_bits_are_msb_first(black, white):
    row = [black, white, white, white, white, white, white, black, white, black]
    raster = pack_pixels([row], 10, 1)
    assert raster.data == b"\x81\x40"
    assert raster.bitwidth == 2


def test_linear_packing_pads_tail(black):
    raster = pack_pixels([[black] * 10, [black] * 10], 10, 2)
    # 20 bits in 3 bytes, padded to a 2x2 grid
    assert raster.data == b"\xff\xff\xf0\x00"
    assert (raster.bitwidth, raster.bitheight) == (2, 2)
    raster.validate()


def test_transparent_black_is_blank():
    raster = pack_pixels([[Pixel(0, 0, 0, 10)] * 8], 8, 1)
    assert raster.data == b"\x00"


def test_missing_pixels_are_blank(black):
    raster = pack_pixels([[black]], 8, 2)
    assert raster.data == b"\x80\x00"


@pytest.mark.parametrize("width, height", [(1, 1), (7, 3), (8, 8), (13, 5), (384, 2)])
def test_payload_is_rectangular(white, width, height):
    grid = [[white] * width for _ in range(height)]
    raster = pack_pixels(grid, width, height)
    bitwidth = math.ceil(width / 8)
    assert raster.bitwidth == bitwidth
    assert raster.bitheight == math.ceil(math.ceil(width * height / 8) / bitwidth)
    assert len(raster.data) == raster.bitwidth * raster.bitheight
