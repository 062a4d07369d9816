from __future__ import annotations

import codecs

from .errors import UnsupportedEncoding

BASE_ENCODING = "ascii"


def normalize_encoding(encoding: str) -> str:
    """Return the canonical codec name for ``encoding``."""
    try:
        name = codecs.lookup(encoding).name
        # rejects bytes-to-bytes codecs such as base64
        "".encode(name)
    except (LookupError, TypeError):
        raise UnsupportedEncoding(str(encoding)) from None
    return name


def is_base_encoding(encoding: str) -> bool:
    return normalize_encoding(encoding) == BASE_ENCODING


def encode_text(text: str, encoding: str) -> bytes:
    """Transcode text; characters the code page lacks become ``?``."""
    return text.encode(normalize_encoding(encoding), errors="replace")
