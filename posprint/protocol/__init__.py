from .builder import DEFAULT_TEXT_ENCODING, BufferBuilder
from .errors import InvalidArgument, PosPrintError, UnsupportedEncoding
from .raster import is_black, pack_pixels
from .symbols import barcode_payload, qr_payload, qr_store_length
from .text import encode_text, normalize_encoding
from .types import (
    Alignment,
    BarcodeLabelFont,
    BarcodeLabelPosition,
    BarcodeSystem,
    BarcodeWidth,
    BitmapScale,
    PackedRaster,
    Pixel,
    QRErrorCorrectionLevel,
    StatusType,
    UnderlineMode,
)

__all__ = [
    "Alignment",
    "BarcodeLabelFont",
    "BarcodeLabelPosition",
    "BarcodeSystem",
    "BarcodeWidth",
    "BitmapScale",
    "BufferBuilder",
    "DEFAULT_TEXT_ENCODING",
    "encode_text",
    "InvalidArgument",
    "is_black",
    "normalize_encoding",
    "pack_pixels",
    "PackedRaster",
    "Pixel",
    "PosPrintError",
    "QRErrorCorrectionLevel",
    "barcode_payload",
    "qr_payload",
    "qr_store_length",
    "StatusType",
    "UnderlineMode",
    "UnsupportedEncoding",
]
