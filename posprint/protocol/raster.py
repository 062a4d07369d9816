from __future__ import annotations

import math
from typing import Optional, Sequence

from .errors import InvalidArgument
from .types import PackedRaster, Pixel

TRANSPARENCY_THRESHOLD = 128
INTENSITY_THRESHOLD = 128
MAX_RASTER_DIMENSION = 0xFFFF

PixelGrid = Sequence[Sequence[Optional[Pixel]]]


def is_black(pixel: Optional[Sequence[int]]) -> bool:
    """Return True when the pixel should be printed as a black dot."""
    if not pixel:
        return False
    alpha = pixel[3] if len(pixel) > 3 else None
    if alpha is not None and alpha < TRANSPARENCY_THRESHOLD:
        return False
    intensity = (pixel[0] + pixel[1] + pixel[2]) / 3
    return intensity < INTENSITY_THRESHOLD


def _pixel_at(pixels: PixelGrid, x: int, y: int) -> Optional[Pixel]:
    if y >= len(pixels):
        return None
    row = pixels[y]
    if row is None or x >= len(row):
        return None
    return row[x]


def pack_pixels(pixels: PixelGrid, width: int, height: int) -> PackedRaster:
    """Pack a row-major pixel grid into a 1-bit raster, MSB first.

    Pixels are numbered linearly (``x + y * width``) so rows are only byte
    aligned when ``width`` is a multiple of 8. Missing rows or columns are
    blank. The payload is zero-padded to ``bitwidth * bitheight`` bytes.
    """
    if width <= 0 or height <= 0:
        raise InvalidArgument(f"Bitmap size must be positive, got {width}x{height}")
    packed = bytearray(math.ceil(width * height / 8))
    for y in range(height):
        for x in range(width):
            if is_black(_pixel_at(pixels, x, y)):
                pos = x + y * width
                packed[pos // 8] |= 1 << (7 - pos % 8)
    bitwidth = math.ceil(width / 8)
    bitheight = math.ceil(len(packed) / bitwidth)
    if bitwidth > MAX_RASTER_DIMENSION or bitheight > MAX_RASTER_DIMENSION:
        raise InvalidArgument(f"Bitmap too large for raster header: {bitwidth} x {bitheight} bytes")
    rastersize = bitwidth * bitheight
    if len(packed) < rastersize:
        packed += bytes(rastersize - len(packed))
    return PackedRaster(bytes(packed), bitwidth, bitheight)
