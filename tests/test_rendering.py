from PIL import Image

from posprint.protocol import Pixel, pack_pixels
from posprint.rendering import fit_to_width, image_to_pixels, load_image, normalized_width


def _two_tone(width: int = 8, height: int = 2) -> Image.Image:
    img = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    img.putpixel((0, 0), (0, 0, 0, 255))
    img.putpixel((1, 0), (0, 0, 0, 0))
    return img


def test_image_to_pixels_keeps_rgba():
    pixels = image_to_pixels(_two_tone(), dither=False)
    assert len(pixels) == 2
    assert len(pixels[0]) == 8
    assert pixels[0][0] == Pixel(0, 0, 0, 255)
    assert pixels[0][1].a == 0
    assert pixels[1][7] == Pixel(255, 255, 255, 255)


def test_dither_keeps_pure_tones_and_alpha():
    pixels = image_to_pixels(_two_tone(), dither=True)
    assert pixels[0][0] == Pixel(0, 0, 0, 255)
    assert pixels[0][1].a == 0
    assert pixels[1][3] == Pixel(255, 255, 255, 255)


def test_transparent_pixels_pack_blank():
    pixels = image_to_pixels(_two_tone(), dither=False)
    raster = pack_pixels(pixels, 8, 2)
    assert raster.data == b"\x80\x00"


def test_normalized_width():
    assert normalized_width(384) == 384
    assert normalized_width(390) == 384
    assert normalized_width(5) == 8


def test_fit_to_width_keeps_aspect():
    img = fit_to_width(Image.new("RGB", (100, 50), (255, 255, 255)), 50)
    assert img.size == (48, 24)


def test_load_image_from_file(tmp_path):
    path = tmp_path / "logo.png"
    Image.new("L", (32, 16), 0).save(path)
    img = load_image(str(path), 16)
    assert img.size == (16, 8)
    pixels = image_to_pixels(img, dither=False)
    assert all(p == Pixel(0, 0, 0, 255) for row in pixels for p in row)


def test_load_palette_image_with_transparency(tmp_path):
    path = tmp_path / "icon.png"
    img = Image.new("P", (8, 8), 0)
    img.putpalette([0, 0, 0, 255, 255, 255] + [0] * 762)
    img.save(path, transparency=0)
    loaded = load_image(str(path), 8)
    assert loaded.mode == "RGBA"
    assert image_to_pixels(loaded, dither=False)[0][0].a == 0
