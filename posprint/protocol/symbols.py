from __future__ import annotations

from typing import Tuple, Union

from .errors import InvalidArgument

MAX_BARCODE_LENGTH = 0xFF
QR_STORE_OVERHEAD = 3
MAX_QR_LENGTH = 0xFFFF - QR_STORE_OVERHEAD


def _binary(data: object, kind: str) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidArgument(f"{kind} data must be str or bytes, got {type(data).__name__}")
    return bytes(data)


def barcode_payload(data: Union[str, bytes]) -> bytes:
    """Return barcode data as ASCII bytes, checking the one-byte length limit."""
    if isinstance(data, str):
        try:
            raw = data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidArgument(f"Barcode data must be ASCII: {data!r}") from exc
    else:
        raw = _binary(data, "Barcode")
    if len(raw) > MAX_BARCODE_LENGTH:
        raise InvalidArgument(f"Barcode data is {len(raw)} bytes, limit is {MAX_BARCODE_LENGTH}")
    return raw


def barcode_length(raw: bytes) -> int:
    """Length byte of the GS k header."""
    return len(raw)


def qr_payload(data: Union[str, bytes]) -> bytes:
    """Return QR data as bytes (UTF-8 for text), checking the two-byte length limit."""
    raw = data.encode("utf-8") if isinstance(data, str) else _binary(data, "QR")
    if len(raw) > MAX_QR_LENGTH:
        raise InvalidArgument(f"QR data is {len(raw)} bytes, limit is {MAX_QR_LENGTH}")
    return raw


def qr_store_length(raw: bytes) -> Tuple[int, int]:
    """Return (pL, pH) for the store-data block: payload plus the 3 fixed bytes."""
    size = len(raw) + QR_STORE_OVERHEAD
    return size % 256, size // 256
