"""Tests for file type detection."""

import pytest

from feishu_media.media.filetypes import FILE_TYPES, detect_file_type


@pytest.mark.parametrize("name,expected", [
    ("report.pdf", "pdf"),
    ("clip.mp4", "mp4"),
    ("voice.opus", "opus"),
    ("notes.doc", "doc"),
    ("notes.docx", "doc"),
    ("sheet.xls", "xls"),
    ("sheet.xlsx", "xls"),
    ("deck.ppt", "ppt"),
    ("deck.pptx", "ppt"),
])
def test_known_extensions(name, expected):
    assert detect_file_type(name) == expected


def test_case_insensitive():
    assert detect_file_type("REPORT.PDF") == "pdf"
    assert detect_file_type("Deck.PptX") == "ppt"


@pytest.mark.parametrize("name", ["archive.zip", "README", "", ".bashrc", "photo.png"])
def test_unknown_falls_back_to_stream(name):
    assert detect_file_type(name) == "stream"


def test_total_and_deterministic():
    names = ["a.pdf", "b.unknown", "c", "d.MP4", "e.tar.gz"]
    for name in names:
        first = detect_file_type(name)
        assert first in FILE_TYPES
        assert detect_file_type(name) == first
