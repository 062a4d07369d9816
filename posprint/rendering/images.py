from __future__ import annotations

from PIL import Image, ImageOps

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


def load_image(path: str, width: int) -> Image.Image:
    """Open an image file and scale it to the printable width."""
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        img = img.copy()
    return fit_to_width(normalize_image(img), width)


def normalize_image(img: Image.Image) -> Image.Image:
    if img.mode not in ("RGBA", "RGB", "L"):
        if "transparency" in img.info or img.mode in ("LA", "PA"):
            return img.convert("RGBA")
        return img.convert("RGB")
    return img


def normalized_width(width: int) -> int:
    """Round down to a whole number of bytes so raster rows stay aligned."""
    if width % 8 == 0:
        return width
    return max(8, width - (width % 8))


def fit_to_width(img: Image.Image, width: int) -> Image.Image:
    width = normalized_width(width)
    if img.width == width:
        return img
    ratio = width / float(img.width)
    height = max(1, int(img.height * ratio))
    return img.resize((width, height), Image.LANCZOS)
