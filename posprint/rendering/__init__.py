from .images import IMAGE_EXTENSIONS, fit_to_width, load_image, normalized_width
from .renderer import image_to_pixels

__all__ = ["IMAGE_EXTENSIONS", "fit_to_width", "image_to_pixels", "load_image", "normalized_width"]
