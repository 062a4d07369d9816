from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional, Type, TypeVar

from .errors import InvalidArgument

E = TypeVar("E", bound=IntEnum)


class UnderlineMode(IntEnum):
    ONE_POINT_OF_COARSE = 49
    TWO_POINTS_OF_COARSE = 50


class Alignment(IntEnum):
    LEFT = 48
    CENTER = 49
    RIGHT = 50


class BarcodeSystem(IntEnum):
    UPC_A = 65
    UPC_E = 66
    EAN_13 = 67
    EAN_8 = 68
    CODE_39 = 69
    ITF = 70
    CODABAR = 71
    CODE_93 = 72
    CODE_128 = 73


class BarcodeWidth(IntEnum):
    DOT_250 = 2
    DOT_375 = 3
    DOT_560 = 4
    DOT_625 = 5
    DOT_750 = 6


class BarcodeLabelFont(IntEnum):
    FONT_A = 48
    FONT_B = 49


class BarcodeLabelPosition(IntEnum):
    NOT_PRINT = 48
    ABOVE = 49
    BOTTOM = 50
    ABOVE_BOTTOM = 51


class QRErrorCorrectionLevel(IntEnum):
    L = 0
    M = 1
    Q = 2
    H = 3


class BitmapScale(IntEnum):
    NORMAL = 48
    DOUBLE_WIDTH = 49
    DOUBLE_HEIGHT = 50
    FOUR_TIMES = 51


class StatusType(IntEnum):
    PRINTER_STATUS = 1
    OFFLINE_STATUS = 2
    ERROR_STATUS = 3
    PAPER_ROLL_SENSOR_STATUS = 4


def coerce_enum(enum_type: Type[E], value: int) -> E:
    """Return ``value`` as a member of ``enum_type`` or raise InvalidArgument."""
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(f"{m.name}={m.value}" for m in enum_type)
        raise InvalidArgument(f"{value!r} is not a valid {enum_type.__name__} ({allowed})") from None


def enum_by_name(enum_type: Type[E], name: str) -> E:
    """Look up an enum member by case-insensitive name (used by the CLI)."""
    key = name.strip().upper().replace("-", "_")
    try:
        return enum_type[key]
    except KeyError:
        allowed = ", ".join(m.name.lower() for m in enum_type)
        raise InvalidArgument(f"Unknown {enum_type.__name__} {name!r} (choose from: {allowed})") from None


class Pixel(NamedTuple):
    """RGBA sample; ``a`` of None means fully opaque."""

    r: int
    g: int
    b: int
    a: Optional[int] = None


@dataclass(frozen=True)
class PackedRaster:
    """1-bit-per-pixel bitmap, MSB first, ``bitwidth`` bytes per row."""

    data: bytes
    bitwidth: int
    bitheight: int

    def validate(self) -> None:
        """Validate that the payload forms a rectangular byte grid."""
        if len(self.data) != self.bitwidth * self.bitheight:
            raise ValueError("Raster payload length must equal bitwidth * bitheight")
