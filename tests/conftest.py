"""Pytest configuration and shared fixtures."""

from typing import Optional

import pytest

from feishu_media.config import FeishuCredentials
from feishu_media.media.client import (
    DownloadImageResult,
    DownloadResourceResult,
    MediaClient,
    SendResult,
    UploadFileResult,
    UploadImageResult,
)


class FakeMediaClient(MediaClient):
    """In-memory MediaClient that records every call.

    Set ``error`` to make the next primitive raise it.
    """

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self.error: Optional[Exception] = None
        self.image = DownloadImageResult(buffer=b"\x89PNG", content_type="image/png")
        self.resource = DownloadResourceResult(
            buffer=b"%PDF-1.7", content_type="application/pdf", file_name="report.pdf",
        )

    def _record(self, name: str, **kwargs):
        self.calls.append((name, kwargs))
        if self.error:
            raise self.error

    async def upload_image(self, path, image_type="message"):
        self._record("upload_image", path=path, image_type=image_type)
        return UploadImageResult(image_key="img_v2_abc")

    async def upload_file(self, path, file_name, file_type, duration=None):
        self._record("upload_file", path=path, file_name=file_name, file_type=file_type, duration=duration)
        return UploadFileResult(file_key="file_v2_abc")

    async def download_image(self, image_key):
        self._record("download_image", image_key=image_key)
        return self.image

    async def download_message_resource(self, message_id, file_key, resource_type="file"):
        self._record("download_message_resource", message_id=message_id, file_key=file_key, resource_type=resource_type)
        return self.resource

    async def send_image(self, to, image_key, reply_to=None):
        self._record("send_image", to=to, image_key=image_key, reply_to=reply_to)
        return SendResult(message_id="om_123", chat_id="oc_456", create_time="1700000000000")

    async def send_file(self, to, file_key, reply_to=None):
        self._record("send_file", to=to, file_key=file_key, reply_to=reply_to)
        return SendResult(message_id="om_789", chat_id="oc_456")


@pytest.fixture
def fake_client():
    return FakeMediaClient()


@pytest.fixture
def credentials():
    return FeishuCredentials(app_id="cli_test", app_secret="secret_test", domain="feishu")
