import pytest
from PIL import Image

from posprint.print_job import PrintJobBuilder, PrintSettings
from posprint.protocol import Alignment, BarcodeSystem, UnsupportedEncoding


def _bare_settings(**overrides) -> PrintSettings:
    settings = PrintSettings(use_defaults=False, cut=False)
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


def test_text_lines():
    data = PrintJobBuilder(_bare_settings()).build_from_text("a\nb")
    assert data == b"a\x1b\x64\x00b\x1b\x64\x00"


def test_empty_text_prints_one_blank_line():
    assert PrintJobBuilder(_bare_settings()).build_from_text("") == b"\x1b\x64\x00"


def test_alignment_wraps_content_and_is_reset():
    data = PrintJobBuilder(_bare_settings(align=Alignment.CENTER)).build_from_text("x")
    assert data == b"\x1b\x61\x31x\x1b\x64\x00\x1b\x61\x30"


def test_default_settings_cut_and_finish():
    data = PrintJobBuilder().build_from_text("x")
    assert data.startswith(b"\x1d\x21\x00\x1b\x74\x00x")
    assert data.endswith(b"\x1d\x56\x01\x0a\x1b\x40")


def test_beep_comes_before_cut():
    data = PrintJobBuilder(_bare_settings(beep=True, cut=True)).build_from_text("x")
    assert data.endswith(b"\x1b\x42\x02\x02\x1d\x56\x01")


def test_build_from_text_file(tmp_path):
    path = tmp_path / "note.txt"
    path.write_text("hello\tworld\n", encoding="utf-8")
    data = PrintJobBuilder(_bare_settings()).build_from_file(str(path))
    assert data == b"hello    world\x1b\x64\x00"


def test_build_from_image_file(tmp_path):
    path = tmp_path / "bar.png"
    Image.new("RGB", (8, 1), (0, 0, 0)).save(path)
    data = PrintJobBuilder(_bare_settings(paper_width=8, dither=False)).build_from_file(str(path))
    assert data == b"\x1d\x76\x30\x00\x01\x00\x01\x00\xff"


def test_image_is_scaled_to_paper_width(tmp_path):
    path = tmp_path / "wide.png"
    Image.new("RGB", (64, 8), (255, 255, 255)).save(path)
    data = PrintJobBuilder(_bare_settings(paper_width=16)).build_from_file(str(path))
    # 16 dots wide -> 2 bytes per row, 2 rows
    assert data[:8] == b"\x1d\x76\x30\x00\x02\x00\x02\x00"
    assert data[8:] == b"\x00" * 4


def test_unsupported_extension(tmp_path):
    path = tmp_path / "doc.pdf"
    path.write_bytes(b"%PDF")
    with pytest.raises(ValueError):
        PrintJobBuilder().build_from_file(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PrintJobBuilder().build_from_file(str(tmp_path / "missing.png"))


def test_qr_code_job():
    data = PrintJobBuilder(_bare_settings()).build_qr_code("0123456789")
    assert b"\x1d\x28\x6b\x0d\x00\x31\x50\x300123456789" in data


def test_barcode_job():
    data = PrintJobBuilder(_bare_settings()).build_barcode("12345678", BarcodeSystem.EAN_8)
    assert data.endswith(b"\x1d\x6b\x44\x0812345678")


def test_unknown_encoding_in_settings():
    with pytest.raises(UnsupportedEncoding):
        PrintJobBuilder(_bare_settings(text_encoding="nope")).build_from_text("x")
