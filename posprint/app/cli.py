from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..print_job import DEFAULT_PAPER_WIDTH, PrintJobBuilder, PrintSettings
from ..protocol import Alignment, BarcodeSystem, DEFAULT_TEXT_ENCODING, PosPrintError
from ..protocol.types import enum_by_name
from .diagnostics import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="posprint: encode text, images, QR codes and barcodes as ESC/POS bytes."
    )
    parser.add_argument("path", nargs="?", help="File to encode (.png/.jpg/.gif/.bmp/.txt)")
    parser.add_argument("--text", metavar="TEXT", help="Encode raw text instead of a file path")
    parser.add_argument("--qr", metavar="DATA", help="Encode a QR code holding DATA")
    parser.add_argument("--barcode", metavar="DATA", help="Encode a barcode holding DATA")
    parser.add_argument(
        "--barcode-system",
        default="code_128",
        help="Barcode symbology (upc_a, ean_13, code_39, code_128, ...)",
    )
    parser.add_argument("--encoding", default=DEFAULT_TEXT_ENCODING, help="Text code page, e.g. cp437, shift_jis")
    parser.add_argument("--width", type=int, default=DEFAULT_PAPER_WIDTH, help="Printable width in dots")
    parser.add_argument("--align", help="Alignment (left, center, right)")
    parser.add_argument("--no-defaults", action="store_true", help="Skip the init/reset commands")
    parser.add_argument("--no-cut", action="store_true", help="Do not cut the paper at the end")
    parser.add_argument("--no-dither", action="store_true", help="Threshold images instead of dithering")
    parser.add_argument("--beep", action="store_true", help="Beep after printing")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write bytes to PATH (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> PrintSettings:
    align = enum_by_name(Alignment, args.align) if args.align else None
    return PrintSettings(
        use_defaults=not args.no_defaults,
        text_encoding=args.encoding,
        paper_width=args.width,
        dither=not args.no_dither,
        cut=not args.no_cut,
        beep=args.beep,
        align=align,
    )


def build_print_data(args: argparse.Namespace) -> bytes:
    builder = PrintJobBuilder(build_settings(args))
    if args.text is not None:
        return builder.build_from_text(args.text)
    if args.qr is not None:
        return builder.build_qr_code(args.qr)
    if args.barcode is not None:
        return builder.build_barcode(args.barcode, enum_by_name(BarcodeSystem, args.barcode_system))
    return builder.build_from_file(args.path)


def write_output(data: bytes, path: Optional[str]) -> None:
    if path:
        with open(path, "wb") as handle:
            handle.write(data)
        return
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    sources = [args.path, args.text, args.qr, args.barcode]
    provided = sum(1 for source in sources if source is not None)
    if provided == 0:
        print("Missing file path, --text, --qr or --barcode. Use --help for usage.", file=sys.stderr)
        return 2
    if provided > 1:
        print("Provide only one of: file path, --text, --qr, --barcode.", file=sys.stderr)
        return 2
    try:
        data = build_print_data(args)
        write_output(data, args.output)
    except (PosPrintError, ValueError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    logger.info("Wrote %d bytes to %s", len(data), args.output or "stdout")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
