from __future__ import annotations

import logging
from typing import Optional, Union

from . import commands
from .errors import InvalidArgument
from .raster import PixelGrid, pack_pixels
from .symbols import barcode_length, barcode_payload, qr_payload, qr_store_length
from .text import encode_text, is_base_encoding, normalize_encoding
from .types import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeSystem,
    BarcodeWidth,
    BitmapScale,
    QRErrorCorrectionLevel,
    StatusType,
    UnderlineMode,
    coerce_enum,
)

logger = logging.getLogger(__name__)

DEFAULT_TEXT_ENCODING = "ascii"
DEFAULT_BARCODE_HEIGHT = 162
MAX_CHARACTER_SCALE = 7
MAX_QR_VERSION = 40


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise InvalidArgument(f"{name} must be in 0..255, got {value}")
    return value


class BufferBuilder:
    """Accumulate ESC/POS commands for one print job.

    Every operation appends to an internal buffer and returns the builder so
    calls can be chained. Arguments are validated before anything is
    appended, so a call that raises leaves the buffer as it was. Mode toggles
    are not tracked: balancing start/end calls is up to the caller.
    """

    def __init__(self, use_defaults: bool = True, text_encoding: str = DEFAULT_TEXT_ENCODING) -> None:
        self.use_defaults = use_defaults
        self.text_encoding = normalize_encoding(text_encoding)
        self._buffer = bytearray()
        self._write_preamble()
        logger.debug("Encoder created (defaults=%s, encoding=%s)", use_defaults, self.text_encoding)

    def _write_preamble(self) -> None:
        if self.use_defaults:
            self.reset_character_size()
            self.reset_character_code_table()
        # Kanji mode is never left again; do not mix single-byte text after this.
        if not is_base_encoding(self.text_encoding):
            self.enter_kanji_printing_mode()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_raw(self, data: bytes) -> "BufferBuilder":
        """Append already encoded bytes verbatim."""
        self._buffer += data
        return self

    def reset(self) -> "BufferBuilder":
        """Drop everything buffered and start over as a fresh builder."""
        self._buffer.clear()
        self._write_preamble()
        return self

    def enter_kanji_printing_mode(self) -> "BufferBuilder":
        return self.write_raw(commands.ENTER_KANJI_MODE)

    def reset_character_code_table(self) -> "BufferBuilder":
        return self.write_raw(commands.char_code_table_cmd(0))

    def set_character_size(self, width: int = 0, height: int = 0) -> "BufferBuilder":
        """Scale characters; ``width`` and ``height`` are multipliers minus one (0..7)."""
        for name, value in (("width", width), ("height", height)):
            if not 0 <= value <= MAX_CHARACTER_SCALE:
                raise InvalidArgument(f"Character {name} must be in 0..{MAX_CHARACTER_SCALE}, got {value}")
        return self.write_raw(commands.char_size_cmd((width << 4) | height))

    def reset_character_size(self) -> "BufferBuilder":
        return self.write_raw(commands.char_size_cmd(0))

    def start_compressed_character(self) -> "BufferBuilder":
        return self.write_raw(commands.compressed_cmd(1))

    def end_compressed_character(self) -> "BufferBuilder":
        return self.write_raw(commands.compressed_cmd(0))

    def start_bold(self) -> "BufferBuilder":
        return self.write_raw(commands.bold_cmd(1))

    def end_bold(self) -> "BufferBuilder":
        return self.write_raw(commands.bold_cmd(0))

    def start_underline(self, mode: UnderlineMode = UnderlineMode.TWO_POINTS_OF_COARSE) -> "BufferBuilder":
        mode = coerce_enum(UnderlineMode, mode)
        return self.write_raw(commands.underline_cmd(mode))

    def end_underline(self) -> "BufferBuilder":
        return self.write_raw(commands.underline_cmd(commands.UNDERLINE_OFF))

    def start_align(self, alignment: Alignment) -> "BufferBuilder":
        alignment = coerce_enum(Alignment, alignment)
        return self.write_raw(commands.align_cmd(alignment))

    def reset_align(self) -> "BufferBuilder":
        return self.start_align(Alignment.LEFT)

    def start_white_mode(self) -> "BufferBuilder":
        return self.write_raw(commands.white_mode_cmd(1))

    def end_white_mode(self) -> "BufferBuilder":
        return self.write_raw(commands.white_mode_cmd(0))

    def start_reverse_mode(self) -> "BufferBuilder":
        return self.write_raw(commands.reverse_mode_cmd(1))

    def end_reverse_mode(self) -> "BufferBuilder":
        return self.write_raw(commands.reverse_mode_cmd(0))

    def print_text(self, text: str, encoding: Optional[str] = None) -> "BufferBuilder":
        """Transcode ``text`` into the target code page and append it."""
        return self.write_raw(encode_text(text, self.text_encoding if encoding is None else encoding))

    def print_text_line(self, text: str) -> "BufferBuilder":
        return self.print_text(text).break_line()

    def break_line(self, lines: int = 0) -> "BufferBuilder":
        return self.write_raw(commands.feed_lines_cmd(_check_byte("lines", lines)))

    def line_feed(self) -> "BufferBuilder":
        return self.write_raw(commands.LINE_FEED)

    def print_barcode(
        self,
        data: Union[str, bytes],
        system: BarcodeSystem,
        width: BarcodeWidth = BarcodeWidth.DOT_375,
        height: int = DEFAULT_BARCODE_HEIGHT,
        label_font: BarcodeLabelFont = BarcodeLabelFont.FONT_A,
        label_position: BarcodeLabelPosition = BarcodeLabelPosition.BOTTOM,
        left_spacing: int = 0,
    ) -> "BufferBuilder":
        """Append a 1D barcode.

        Configuration commands go first; the GS k header carries the data
        length and must be followed directly by the ASCII data.
        """
        system = coerce_enum(BarcodeSystem, system)
        width = coerce_enum(BarcodeWidth, width)
        label_font = coerce_enum(BarcodeLabelFont, label_font)
        label_position = coerce_enum(BarcodeLabelPosition, label_position)
        _check_byte("height", height)
        _check_byte("left_spacing", left_spacing)
        raw = barcode_payload(data)
        logger.debug("Barcode %s with %d data bytes", system.name, len(raw))
        self.write_raw(commands.barcode_width_cmd(width))
        self.write_raw(commands.barcode_height_cmd(height))
        self.write_raw(commands.barcode_left_spacing_cmd(left_spacing))
        self.write_raw(commands.barcode_label_font_cmd(label_font))
        self.write_raw(commands.barcode_label_position_cmd(label_position))
        self.write_raw(commands.barcode_data_cmd(system, barcode_length(raw)))
        return self.write_raw(raw)

    def print_qr_code(
        self,
        data: Union[str, bytes],
        version: int = 1,
        error_correction_level: QRErrorCorrectionLevel = QRErrorCorrectionLevel.H,
        component_types: int = 8,
    ) -> "BufferBuilder":
        """Store and print a QR symbol.

        The model, size and error correction blocks are fixed.
        ``version`` (1..40) and ``error_correction_level`` are validated but
        not sent; ``component_types`` has no ESC/POS counterpart.
        """
        if not 1 <= version <= MAX_QR_VERSION:
            raise InvalidArgument(f"QR version must be in 1..{MAX_QR_VERSION}, got {version}")
        error_correction_level = coerce_enum(QRErrorCorrectionLevel, error_correction_level)
        raw = qr_payload(data)
        p_l, p_h = qr_store_length(raw)
        logger.debug("QR code with %d data bytes, level %s", len(raw), error_correction_level.name)
        self.write_raw(commands.qr_model_cmd())
        self.write_raw(commands.qr_size_cmd())
        self.write_raw(commands.qr_error_correction_cmd())
        self.write_raw(commands.qr_store_cmd(p_l, p_h))
        self.write_raw(raw)
        return self.write_raw(commands.qr_print_cmd())

    def print_bitmap(
        self,
        pixels: PixelGrid,
        width: int,
        height: int,
        scale: Optional[BitmapScale] = None,
    ) -> "BufferBuilder":
        """Append a raster bit image built from an RGBA pixel grid."""
        mode = 0 if scale is None else coerce_enum(BitmapScale, scale)
        raster = pack_pixels(pixels, width, height)
        logger.debug("Bitmap %dx%d packed to %d bytes", width, height, len(raster.data))
        self.write_raw(commands.raster_header_cmd(mode, raster.bitwidth, raster.bitheight))
        return self.write_raw(raster.data)

    def transmit_status(self, status_type: StatusType) -> "BufferBuilder":
        """Request a status byte; reading the reply is up to the transport."""
        status_type = coerce_enum(StatusType, status_type)
        return self.write_raw(commands.status_cmd(status_type))

    def paper_cut(self) -> "BufferBuilder":
        return self.write_raw(commands.cut_cmd(1))

    def play_beep(self) -> "BufferBuilder":
        return self.write_raw(commands.BEEP)

    def build(self) -> bytes:
        """Finish the job and return the encoded bytes."""
        if self.use_defaults:
            self.line_feed()
            self.write_raw(commands.INIT)
        logger.debug("Built %d bytes", len(self._buffer))
        return bytes(self._buffer)
