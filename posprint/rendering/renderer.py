from __future__ import annotations

from typing import List

from PIL import Image

from ..protocol.types import Pixel


def image_to_pixels(img: Image.Image, dither: bool) -> List[List[Pixel]]:
    """Convert an image into the row-major RGBA grid the raster packer reads.

    With ``dither`` the luminance is reduced to 1 bit by Pillow's
    Floyd-Steinberg conversion first; the alpha channel is kept either way.
    """
    rgba = img.convert("RGBA")
    if dither:
        alpha = rgba.getchannel("A")
        flattened = Image.new("RGB", rgba.size, (255, 255, 255))
        flattened.paste(rgba, mask=alpha)
        rgba = flattened.convert("1").convert("RGBA")
        rgba.putalpha(alpha)
    width, height = rgba.size
    access = rgba.load()
    return [[Pixel(*access[x, y]) for x in range(width)] for y in range(height)]
