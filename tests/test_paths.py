"""Tests for local path resolution."""

import pytest

from feishu_media.media.errors import MediaFileNotFoundError
from feishu_media.media.paths import expand_home, resolve_path


class TestExpandHome:

    def test_tilde_replaced_with_home(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/alice")
        assert expand_home("~/Downloads/photo.png") == "/home/alice/Downloads/photo.png"

    def test_no_tilde_left(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/alice")
        for p in ("~", "~/a", "~/a/~b"):
            assert not expand_home(p).startswith("~")

    def test_expansion_is_idempotent(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/alice")
        once = expand_home("~/x")
        assert expand_home(once) == once

    def test_missing_home_is_empty(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert expand_home("~/x.png") == "/x.png"

    def test_absolute_path_untouched(self):
        assert expand_home("/tmp/a~b.txt") == "/tmp/a~b.txt"


class TestResolvePath:

    def test_existing_file(self, tmp_path):
        f = tmp_path / "photo.png"
        f.write_bytes(b"x")
        assert resolve_path(str(f)) == str(f)

    def test_home_relative_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / "doc.pdf").write_bytes(b"%PDF")
        assert resolve_path("~/doc.pdf") == f"{tmp_path}/doc.pdf"

    def test_not_found_reports_resolved_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        with pytest.raises(MediaFileNotFoundError) as exc:
            resolve_path("~/missing.png", label="Image file")
        assert str(exc.value) == f"Image file not found: {tmp_path}/missing.png"
        assert "~" not in str(exc.value)
