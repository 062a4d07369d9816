from __future__ import annotations

LF = 0x0A
DLE = 0x10
ESC = 0x1B
FS = 0x1C
GS = 0x1D

LINE_FEED = bytes([LF])
INIT = bytes([ESC, 0x40])
ENTER_KANJI_MODE = bytes([FS, 0x26])
BEEP = bytes([ESC, 0x42, 0x02, 0x02])

UNDERLINE_OFF = 48


def _byte(value: int) -> int:
    return value & 0xFF


def char_code_table_cmd(table: int) -> bytes:
    """ESC t n: select character code table."""
    return bytes([ESC, 0x74, _byte(table)])


def char_size_cmd(size: int) -> bytes:
    """GS ! n: select character size (width nibble << 4 | height nibble)."""
    return bytes([GS, 0x21, _byte(size)])


def compressed_cmd(on: int) -> bytes:
    """ESC M n: select character font (compressed when n == 1)."""
    return bytes([ESC, 0x4D, _byte(on)])


def bold_cmd(on: int) -> bytes:
    """ESC E n: emphasized mode."""
    return bytes([ESC, 0x45, _byte(on)])


def underline_cmd(mode: int) -> bytes:
    """ESC - n: underline mode."""
    return bytes([ESC, 0x2D, _byte(mode)])


def align_cmd(alignment: int) -> bytes:
    """ESC a n: justification."""
    return bytes([ESC, 0x61, _byte(alignment)])


def white_mode_cmd(on: int) -> bytes:
    """GS B n: white/black reverse printing."""
    return bytes([GS, 0x42, _byte(on)])


def reverse_mode_cmd(on: int) -> bytes:
    """ESC { n: upside-down printing."""
    return bytes([ESC, 0x7B, _byte(on)])


def feed_lines_cmd(lines: int) -> bytes:
    """ESC d n: print buffer and feed n lines."""
    return bytes([ESC, 0x64, _byte(lines)])


def status_cmd(status_type: int) -> bytes:
    """DLE EOT n: real-time status transmission."""
    return bytes([DLE, 0x04, _byte(status_type)])


def cut_cmd(mode: int) -> bytes:
    """GS V m: cut paper."""
    return bytes([GS, 0x56, _byte(mode)])


def barcode_width_cmd(width: int) -> bytes:
    return bytes([GS, 0x77, _byte(width)])


def barcode_height_cmd(height: int) -> bytes:
    return bytes([GS, 0x68, _byte(height)])


def barcode_left_spacing_cmd(spacing: int) -> bytes:
    return bytes([GS, 0x78, _byte(spacing)])


def barcode_label_font_cmd(font: int) -> bytes:
    return bytes([GS, 0x66, _byte(font)])


def barcode_label_position_cmd(position: int) -> bytes:
    return bytes([GS, 0x48, _byte(position)])


def barcode_data_cmd(system: int, length: int) -> bytes:
    """GS k m n: print barcode, header only; ``length`` data bytes follow."""
    return bytes([GS, 0x6B, _byte(system), _byte(length)])


def qr_cmd(p_l: int, p_h: int, fn: int, *params: int) -> bytes:
    """GS ( k pL pH cn fn [params]: 2D symbol function with cn = 0x31 (QR)."""
    return bytes([GS, 0x28, 0x6B, _byte(p_l), _byte(p_h), 0x31, _byte(fn)] + [_byte(p) for p in params])


def qr_model_cmd() -> bytes:
    """Function 165: select QR model."""
    return qr_cmd(0x04, 0x00, 0x41, 0x31, 0x00)


def qr_size_cmd() -> bytes:
    """Function 167: set module size (fixed at 1 dot)."""
    return qr_cmd(0x03, 0x00, 0x43, 0x01)


def qr_error_correction_cmd() -> bytes:
    """Function 169: select error correction level (fixed at 49)."""
    return qr_cmd(0x03, 0x00, 0x45, 0x31)


def qr_store_cmd(p_l: int, p_h: int) -> bytes:
    """Function 180 header: store ``(pL + pH * 256) - 3`` data bytes that follow."""
    return qr_cmd(p_l, p_h, 0x50, 0x30)


def qr_print_cmd() -> bytes:
    """Function 181: print the stored symbol."""
    return qr_cmd(0x03, 0x00, 0x51, 0x30)


def raster_header_cmd(mode: int, bitwidth: int, bitheight: int) -> bytes:
    """GS v 0 m xL xH yL yH: raster bit image header."""
    return bytes(
        [
            GS,
            0x76,
            0x30,
            _byte(mode),
            bitwidth & 0xFF,
            (bitwidth >> 8) & 0xFF,
            bitheight & 0xFF,
            (bitheight >> 8) & 0xFF,
        ]
    )
