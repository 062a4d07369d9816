from __future__ import annotations


class PosPrintError(Exception):
    """Base class for encoder errors."""


class UnsupportedEncoding(PosPrintError, LookupError):
    """Raised when a text encoding identifier has no codec."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported text encoding: {encoding!r}")
        self.encoding = encoding


class InvalidArgument(PosPrintError, ValueError):
    """Raised when an argument is outside the range the protocol accepts."""
