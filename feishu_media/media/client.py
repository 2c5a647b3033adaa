"""Feishu / Lark media client — upload, download and send primitives.

Each primitive is a single request/response round trip against the
Open Platform IM API. Nothing here retries; retry policy belongs to the
caller.
"""

import asyncio
import json
import logging
import os
import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

import httpx

from ..config import FeishuCredentials
from .errors import (
    MediaFileNotFoundError,
    MediaIOError,
    RemoteNotFoundError,
    RemoteRejectedError,
)

logger = logging.getLogger("feishu_media.media.client")

TOKEN_PATH = "/open-apis/auth/v3/tenant_access_token/internal"
IMAGES_PATH = "/open-apis/im/v1/images"
FILES_PATH = "/open-apis/im/v1/files"
MESSAGES_PATH = "/open-apis/im/v1/messages"

_FILENAME_STAR_RE = re.compile(r"filename\*\s*=\s*(?:[\w-]+'[\w-]*')?([^;]+)", re.IGNORECASE)
_FILENAME_RE = re.compile(r'filename\s*=\s*"?([^";]+)"?', re.IGNORECASE)


@dataclass
class UploadImageResult:
    image_key: str
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"imageKey": self.image_key, **self.metadata}


@dataclass
class UploadFileResult:
    file_key: str
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"fileKey": self.file_key, **self.metadata}


@dataclass
class DownloadImageResult:
    buffer: bytes
    content_type: Optional[str] = None


@dataclass
class DownloadResourceResult:
    buffer: bytes
    content_type: Optional[str] = None
    file_name: Optional[str] = None


@dataclass
class SendResult:
    message_id: str
    chat_id: Optional[str] = None
    create_time: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"messageId": self.message_id, "chatId": self.chat_id}
        if self.create_time:
            data["createTime"] = self.create_time
        return data


class MediaClient(ABC):
    """Remote media primitives. One method per capability."""

    @abstractmethod
    async def upload_image(self, path: str, image_type: str = "message") -> UploadImageResult:
        """Upload a local image; returns the image key."""
        ...

    @abstractmethod
    async def upload_file(
        self,
        path: str,
        file_name: str,
        file_type: str,
        duration: Optional[int] = None,
    ) -> UploadFileResult:
        """Upload a local file; returns the file key."""
        ...

    @abstractmethod
    async def download_image(self, image_key: str) -> DownloadImageResult:
        """Fetch bytes for a previously uploaded image key."""
        ...

    @abstractmethod
    async def download_message_resource(
        self,
        message_id: str,
        file_key: str,
        resource_type: str = "file",
    ) -> DownloadResourceResult:
        """Fetch an attachment embedded in a message."""
        ...

    @abstractmethod
    async def send_image(self, to: str, image_key: str, reply_to: Optional[str] = None) -> SendResult:
        """Post an image key as a chat message."""
        ...

    @abstractmethod
    async def send_file(self, to: str, file_key: str, reply_to: Optional[str] = None) -> SendResult:
        """Post a file key as a chat message."""
        ...


def resolve_receive_id(to: str) -> tuple[str, str]:
    """Map a destination to (receive_id, receive_id_type).

    oc_ → chat_id, ou_ → open_id, on_ → union_id, anything else → user_id.
    Optional "chat:" / "user:" prefixes are stripped first.
    """
    target = to.strip()
    for prefix in ("chat:", "user:"):
        if target.startswith(prefix):
            target = target[len(prefix):].strip()
            break

    if target.startswith("oc_"):
        return target, "chat_id"
    if target.startswith("ou_"):
        return target, "open_id"
    if target.startswith("on_"):
        return target, "union_id"
    return target, "user_id"


def parse_content_disposition(header: Optional[str]) -> Optional[str]:
    """Extract the file name from a Content-Disposition header."""
    if not header:
        return None
    m = _FILENAME_STAR_RE.search(header)
    if m:
        return unquote(m.group(1).strip().strip('"'))
    m = _FILENAME_RE.search(header)
    if m:
        return m.group(1).strip()
    return None


async def read_local_file(path: str) -> bytes:
    """Read a file without blocking the event loop."""
    try:
        return await asyncio.to_thread(Path(path).read_bytes)
    except FileNotFoundError as e:
        raise MediaFileNotFoundError(f"File not found: {path}") from e
    except OSError as e:
        raise MediaIOError(f"Failed to read {path}: {e.strerror or e}") from e


class FeishuMediaClient(MediaClient):
    """MediaClient backed by the Feishu / Lark Open Platform HTTP API."""

    def __init__(
        self,
        credentials: FeishuCredentials,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._credentials = credentials
        self._timeout = timeout
        self._transport = transport  # tests inject httpx.MockTransport
        self._token: Optional[str] = None
        self._token_expires_at = 0.0  # time.monotonic() deadline

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._credentials.base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _tenant_token(self, client: httpx.AsyncClient) -> str:
        """Return the cached tenant access token, fetching a new one once it expires."""
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token

        response = await client.post(
            TOKEN_PATH,
            json={
                "app_id": self._credentials.app_id,
                "app_secret": self._credentials.app_secret,
            },
        )
        body = _json_body(response)
        if response.is_error or body.get("code", 0) != 0:
            msg = body.get("msg") or f"HTTP {response.status_code}"
            logger.error(f"Tenant token request failed: {msg}")
            raise RemoteRejectedError(f"Authentication failed: {msg}")

        token = body.get("tenant_access_token")
        if not token:
            raise RemoteRejectedError("Authentication failed: no tenant_access_token in response")
        self._token = token
        self._token_expires_at = time.monotonic() + body.get("expire", 0)
        return token

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            async with self._http() as client:
                token = await self._tenant_token(client)
                headers = {"Authorization": f"Bearer {token}"}
                return await client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Feishu request {method} {url} failed: {e}")
            raise RemoteRejectedError(f"Request to Feishu failed: {e}") from e

    async def _call(self, method: str, url: str, not_found: str, **kwargs) -> dict:
        """JSON API call. Returns the ``data`` object of a code=0 response."""
        response = await self._request(method, url, **kwargs)
        _raise_for_status(response, not_found)
        body = _json_body(response)
        if not body:
            raise RemoteRejectedError(f"Unexpected response from Feishu (HTTP {response.status_code})")
        return body.get("data") or {}

    async def _download(self, url: str, not_found: str, params: Optional[dict] = None) -> httpx.Response:
        response = await self._request("GET", url, params=params)
        content_type = response.headers.get("content-type", "")
        # Errors come back as JSON even on 200; attachments carry Content-Disposition
        is_error_body = (
            content_type.startswith("application/json")
            and "content-disposition" not in response.headers
        )
        if response.is_error or is_error_body:
            _raise_for_status(response, not_found)
        return response

    # ── Uploads ──

    async def upload_image(self, path: str, image_type: str = "message") -> UploadImageResult:
        payload = await read_local_file(path)
        data = await self._call(
            "POST",
            IMAGES_PATH,
            not_found="Image upload endpoint not found",
            data={"image_type": image_type},
            files={"image": (os.path.basename(path), payload)},
        )
        image_key = data.pop("image_key", None)
        if not image_key:
            raise RemoteRejectedError("Image upload failed: no image_key returned")
        logger.info(f"Uploaded image {os.path.basename(path)} ({len(payload)} bytes) -> {image_key}")
        return UploadImageResult(image_key=image_key, metadata=data)

    async def upload_file(
        self,
        path: str,
        file_name: str,
        file_type: str,
        duration: Optional[int] = None,
    ) -> UploadFileResult:
        payload = await read_local_file(path)
        form = {"file_type": file_type, "file_name": file_name}
        # Required by the server for opus/mp4, passed through as given
        if duration is not None:
            form["duration"] = str(duration)

        data = await self._call(
            "POST",
            FILES_PATH,
            not_found="File upload endpoint not found",
            data=form,
            files={"file": (file_name, payload)},
        )
        file_key = data.pop("file_key", None)
        if not file_key:
            raise RemoteRejectedError("File upload failed: no file_key returned")
        logger.info(f"Uploaded file {file_name} ({file_type}, {len(payload)} bytes) -> {file_key}")
        return UploadFileResult(file_key=file_key, metadata=data)

    # ── Downloads ──

    async def download_image(self, image_key: str) -> DownloadImageResult:
        response = await self._download(
            f"{IMAGES_PATH}/{image_key}",
            not_found=f"Image not found: {image_key}",
        )
        content_type = response.headers.get("content-type") or None
        logger.info(f"Downloaded image {image_key} ({len(response.content)} bytes)")
        return DownloadImageResult(buffer=response.content, content_type=content_type)

    async def download_message_resource(
        self,
        message_id: str,
        file_key: str,
        resource_type: str = "file",
    ) -> DownloadResourceResult:
        response = await self._download(
            f"{MESSAGES_PATH}/{message_id}/resources/{file_key}",
            not_found=f"Resource not found: message {message_id}, key {file_key}",
            params={"type": resource_type},
        )
        content_type = response.headers.get("content-type") or None
        file_name = parse_content_disposition(response.headers.get("content-disposition"))
        logger.info(f"Downloaded {resource_type} {file_key} from {message_id} ({len(response.content)} bytes)")
        return DownloadResourceResult(
            buffer=response.content,
            content_type=content_type,
            file_name=file_name,
        )

    # ── Sends ──

    async def send_image(self, to: str, image_key: str, reply_to: Optional[str] = None) -> SendResult:
        return await self._send(to, "image", {"image_key": image_key}, reply_to)

    async def send_file(self, to: str, file_key: str, reply_to: Optional[str] = None) -> SendResult:
        return await self._send(to, "file", {"file_key": file_key}, reply_to)

    async def _send(self, to: str, msg_type: str, content: dict, reply_to: Optional[str]) -> SendResult:
        body = {"msg_type": msg_type, "content": json.dumps(content)}

        if reply_to:
            data = await self._call(
                "POST",
                f"{MESSAGES_PATH}/{reply_to}/reply",
                not_found=f"Message not found: {reply_to}",
                json=body,
            )
        else:
            receive_id, receive_id_type = resolve_receive_id(to)
            if not receive_id:
                raise RemoteRejectedError(f"Invalid destination: {to!r}")
            data = await self._call(
                "POST",
                MESSAGES_PATH,
                not_found=f"Destination not found: {to}",
                params={"receive_id_type": receive_id_type},
                json={"receive_id": receive_id, **body},
            )

        message_id = data.get("message_id")
        if not message_id:
            raise RemoteRejectedError(f"Send {msg_type} failed: no message_id returned")
        logger.info(f"Sent {msg_type} to {to or reply_to}: {message_id}")
        return SendResult(
            message_id=message_id,
            chat_id=data.get("chat_id"),
            create_time=data.get("create_time"),
        )


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _raise_for_status(response: httpx.Response, not_found: str):
    """Raise the matching MediaError for an error or code != 0 response."""
    if response.status_code == 404:
        raise RemoteNotFoundError(not_found)

    body = _json_body(response)
    code = body.get("code", 0)
    if code != 0:
        msg = body.get("msg") or f"Feishu error code {code}"
        logger.error(f"Feishu API error {code}: {msg}")
        raise RemoteRejectedError(msg)

    if response.is_error:
        error_text = response.text[:300]
        logger.error(f"Feishu HTTP error: {response.status_code} - {error_text}")
        raise RemoteRejectedError(f"HTTP {response.status_code}: {error_text}")
