"""Tests for tool result envelopes."""

import base64
import json

from feishu_media.media.errors import RemoteRejectedError
from feishu_media.media.results import (
    ToolFailure,
    ToolSuccess,
    build_data_url,
    download_result,
    error_result,
    json_result,
)


def test_json_result_pretty_prints_details():
    env = json_result({"imageKey": "img_1"}).to_dict()
    assert env["details"] == {"imageKey": "img_1"}
    assert env["content"] == [{"type": "text", "text": json.dumps({"imageKey": "img_1"}, indent=2)}]
    assert "error" not in env


def test_error_result_from_exception():
    env = error_result(RemoteRejectedError("file too large")).to_dict()
    assert env == {
        "content": [{"type": "text", "text": "Error: file too large"}],
        "error": "file too large",
    }
    assert "details" not in env


def test_error_result_from_string():
    failure = error_result("'path' is required")
    assert isinstance(failure, ToolFailure)
    env = failure.to_dict()
    assert env["error"] == "'path' is required"
    assert "details" not in env


def test_success_has_no_error_key():
    env = ToolSuccess(text="x").to_dict()
    assert env == {"content": [{"type": "text", "text": "x"}], "details": {}}


def test_data_url_uses_declared_type():
    assert build_data_url(b"abc", "image/jpeg", "image/png") == "data:image/jpeg;base64,YWJj"


def test_data_url_falls_back_to_default():
    assert build_data_url(b"abc", None, "application/octet-stream") == (
        "data:application/octet-stream;base64,YWJj"
    )


def test_data_url_decodes_to_original_bytes():
    payload = bytes(range(256)) * 3
    url = build_data_url(payload, "image/png", "image/png")
    assert base64.b64decode(url.split(";base64,", 1)[1]) == payload


def test_download_result_image_summary():
    env = download_result("image", b"x" * 17, "image/png", "image/png").to_dict()
    assert env["content"][0]["text"] == "Downloaded image (17 bytes, type: image/png)"
    assert env["details"]["size"] == 17
    assert "fileName" not in env["details"]


def test_download_result_file_summary_unknowns():
    env = download_result(
        "file", b"abc", None, "application/octet-stream", file_name=None, include_name=True,
    ).to_dict()
    assert env["content"][0]["text"] == "Downloaded file (3 bytes, type: unknown, name: unknown)"
    assert env["details"]["contentType"] is None
    assert env["details"]["fileName"] is None
    assert env["details"]["dataUrl"].startswith("data:application/octet-stream;base64,")
