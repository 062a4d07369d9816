from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .protocol import (
    Alignment,
    BarcodeSystem,
    BufferBuilder,
    DEFAULT_TEXT_ENCODING,
    QRErrorCorrectionLevel,
)
from .rendering import IMAGE_EXTENSIONS, image_to_pixels, load_image

logger = logging.getLogger(__name__)

DEFAULT_PAPER_WIDTH = 384
TEXT_EXTENSIONS = {".txt"}
SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS | TEXT_EXTENSIONS


@dataclass
class PrintSettings:
    use_defaults: bool = True
    text_encoding: str = DEFAULT_TEXT_ENCODING
    paper_width: int = DEFAULT_PAPER_WIDTH
    dither: bool = True
    cut: bool = True
    beep: bool = False
    align: Optional[Alignment] = None


class PrintJobBuilder:
    def __init__(self, settings: Optional[PrintSettings] = None) -> None:
        self.settings = settings or PrintSettings()

    def build_from_file(self, path: str) -> bytes:
        ext = self._validate_input_path(path)
        if ext in TEXT_EXTENSIONS:
            with open(path, "r", encoding="utf-8", errors="replace") as handle:
                return self.build_from_text(handle.read())
        return self.build_from_image(path)

    def build_from_text(self, text: str) -> bytes:
        lines = text.replace("\t", "    ").splitlines() or [""]

        def body(builder: BufferBuilder) -> None:
            for line in lines:
                builder.print_text_line(line)

        return self._build(body)

    def build_from_image(self, path: str) -> bytes:
        img = load_image(path, self.settings.paper_width)
        logger.info("Printing %s at %dx%d", os.path.basename(path), img.width, img.height)
        pixels = image_to_pixels(img, dither=self.settings.dither)
        return self._build(lambda builder: builder.print_bitmap(pixels, img.width, img.height))

    def build_qr_code(
        self,
        data: Union[str, bytes],
        version: int = 1,
        error_correction_level: QRErrorCorrectionLevel = QRErrorCorrectionLevel.H,
    ) -> bytes:
        return self._build(lambda builder: builder.print_qr_code(data, version, error_correction_level))

    def build_barcode(
        self,
        data: Union[str, bytes],
        system: BarcodeSystem = BarcodeSystem.CODE_128,
    ) -> bytes:
        return self._build(lambda builder: builder.print_barcode(data, system))

    def _build(self, body: Callable[[BufferBuilder], object]) -> bytes:
        builder = BufferBuilder(self.settings.use_defaults, self.settings.text_encoding)
        if self.settings.align is not None:
            builder.start_align(self.settings.align)
        body(builder)
        if self.settings.align is not None:
            builder.reset_align()
        if self.settings.beep:
            builder.play_beep()
        if self.settings.cut:
            builder.paper_cut()
        return builder.build()

    @staticmethod
    def _validate_input_path(path: str) -> str:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        return ext
