from .print_job import PrintJobBuilder, PrintSettings
from .protocol import BufferBuilder, InvalidArgument, PosPrintError, UnsupportedEncoding

__all__ = [
    "BufferBuilder",
    "InvalidArgument",
    "PosPrintError",
    "PrintJobBuilder",
    "PrintSettings",
    "UnsupportedEncoding",
]
