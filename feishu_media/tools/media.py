"""Feishu media tools — upload, download and send images/files.

Each handler takes the media client and the raw tool arguments and
returns a result envelope dict. Handlers never raise: every failure,
including a missing required argument, comes back as the error shape.
"""

import logging
import os

from ..media.client import MediaClient
from ..media.errors import MissingParameterError
from ..media.filetypes import (
    DEFAULT_FILE_CONTENT_TYPE,
    DEFAULT_IMAGE_CONTENT_TYPE,
    FILE_TYPES,
    IMAGE_TYPES,
    RESOURCE_TYPES,
    detect_file_type,
)
from ..media.paths import resolve_path
from ..media.results import download_result, error_result, json_result

logger = logging.getLogger("feishu_media.tools.media")


def _require(params: dict, *names: str):
    """Raise MissingParameterError for the first absent/empty argument."""
    for name in names:
        if not params.get(name):
            raise MissingParameterError(f"'{name}' is required")


def _failure(tool: str, err: Exception) -> dict:
    logger.warning(f"{tool} failed: {err}")
    return error_result(err).to_dict()


async def upload_image_handler(client: MediaClient, params: dict) -> dict:
    """Upload a local image. Returns {imageKey}."""
    try:
        _require(params, "path")
        resolved = resolve_path(params["path"], label="Image file")
        image_type = params.get("imageType") or "message"

        result = await client.upload_image(resolved, image_type=image_type)
        return json_result(result.to_dict()).to_dict()
    except Exception as e:
        return _failure("feishu_upload_image", e)


async def upload_file_handler(client: MediaClient, params: dict) -> dict:
    """Upload a local file. File type is detected from the name unless given."""
    try:
        _require(params, "path")
        resolved = resolve_path(params["path"])

        name = params.get("fileName") or os.path.basename(resolved)
        file_type = params.get("fileType") or detect_file_type(name)

        result = await client.upload_file(
            resolved,
            file_name=name,
            file_type=file_type,
            duration=params.get("duration"),
        )
        return json_result(result.to_dict()).to_dict()
    except Exception as e:
        return _failure("feishu_upload_file", e)


async def download_image_handler(client: MediaClient, params: dict) -> dict:
    """Download an image by key, embedded as a data URL."""
    try:
        _require(params, "imageKey")
        result = await client.download_image(params["imageKey"])
        return download_result(
            "image",
            result.buffer,
            result.content_type,
            DEFAULT_IMAGE_CONTENT_TYPE,
        ).to_dict()
    except Exception as e:
        return _failure("feishu_download_image", e)


async def download_file_handler(client: MediaClient, params: dict) -> dict:
    """Download a message attachment, embedded as a data URL."""
    try:
        _require(params, "messageId", "fileKey")
        result = await client.download_message_resource(
            params["messageId"],
            params["fileKey"],
            resource_type=params.get("type") or "file",
        )
        return download_result(
            "file",
            result.buffer,
            result.content_type,
            DEFAULT_FILE_CONTENT_TYPE,
            file_name=result.file_name,
            include_name=True,
        ).to_dict()
    except Exception as e:
        return _failure("feishu_download_file", e)


async def send_image_handler(client: MediaClient, params: dict) -> dict:
    try:
        _require(params, "to", "imageKey")
        result = await client.send_image(
            params["to"],
            params["imageKey"],
            reply_to=params.get("replyToMessageId"),
        )
        return json_result(result.to_dict()).to_dict()
    except Exception as e:
        return _failure("feishu_send_image", e)


async def send_file_handler(client: MediaClient, params: dict) -> dict:
    try:
        _require(params, "to", "fileKey")
        result = await client.send_file(
            params["to"],
            params["fileKey"],
            reply_to=params.get("replyToMessageId"),
        )
        return json_result(result.to_dict()).to_dict()
    except Exception as e:
        return _failure("feishu_send_file", e)


# ── Tool Registration Dicts ──

UPLOAD_IMAGE_TOOL = {
    "name": "feishu_upload_image",
    "label": "Feishu Upload Image",
    "description": (
        "Upload an image to Feishu from a local file path. "
        "Supports: JPEG, PNG, WEBP, GIF, TIFF, BMP, ICO. Max size: 30MB. "
        "Returns an image_key for sending."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Absolute path to the image file (e.g. /Users/xxx/Downloads/photo.png)",
            },
            "imageType": {
                "type": "string",
                "enum": list(IMAGE_TYPES),
                "description": "Image usage type (default: message)",
                "default": "message",
            },
        },
        "required": ["path"],
    },
    "handler": upload_image_handler,
}

UPLOAD_FILE_TOOL = {
    "name": "feishu_upload_file",
    "label": "Feishu Upload File",
    "description": (
        "Upload a file to Feishu from a local file path. "
        "Supports: PDF, DOC, XLS, PPT, audio, video, etc. Max size: 30MB. "
        "Returns a file_key for sending."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Absolute path to the file (e.g. /Users/xxx/Downloads/report.pdf)",
            },
            "fileName": {
                "type": "string",
                "description": "Override file name (optional, extracted from path by default)",
            },
            "fileType": {
                "type": "string",
                "enum": list(FILE_TYPES),
                "description": "File type (auto-detected if omitted)",
            },
            "duration": {
                "type": "number",
                "description": "Duration in ms (audio/video only)",
            },
        },
        "required": ["path"],
    },
    "handler": upload_file_handler,
}

DOWNLOAD_IMAGE_TOOL = {
    "name": "feishu_download_image",
    "label": "Feishu Download Image",
    "description": "Download an image from Feishu by image_key.",
    "parameters": {
        "type": "object",
        "properties": {
            "imageKey": {"type": "string", "description": "The image_key"},
        },
        "required": ["imageKey"],
    },
    "handler": download_image_handler,
}

DOWNLOAD_FILE_TOOL = {
    "name": "feishu_download_file",
    "label": "Feishu Download File",
    "description": "Download a message attachment from Feishu by message_id + file_key.",
    "parameters": {
        "type": "object",
        "properties": {
            "messageId": {"type": "string", "description": "The message_id containing the file"},
            "fileKey": {"type": "string", "description": "The file_key"},
            "type": {
                "type": "string",
                "enum": list(RESOURCE_TYPES),
                "description": "Resource type (default: file)",
                "default": "file",
            },
        },
        "required": ["messageId", "fileKey"],
    },
    "handler": download_file_handler,
}

SEND_IMAGE_TOOL = {
    "name": "feishu_send_image",
    "label": "Feishu Send Image",
    "description": "Send an uploaded image to a Feishu chat.",
    "parameters": {
        "type": "object",
        "properties": {
            "to": {"type": "string", "description": "Chat ID (oc_xxx) or user open_id (ou_xxx)"},
            "imageKey": {"type": "string", "description": "image_key from feishu_upload_image"},
            "replyToMessageId": {"type": "string", "description": "Optional message ID to reply to"},
        },
        "required": ["to", "imageKey"],
    },
    "handler": send_image_handler,
}

SEND_FILE_TOOL = {
    "name": "feishu_send_file",
    "label": "Feishu Send File",
    "description": "Send an uploaded file to a Feishu chat.",
    "parameters": {
        "type": "object",
        "properties": {
            "to": {"type": "string", "description": "Chat ID (oc_xxx) or user open_id (ou_xxx)"},
            "fileKey": {"type": "string", "description": "file_key from feishu_upload_file"},
            "replyToMessageId": {"type": "string", "description": "Optional message ID to reply to"},
        },
        "required": ["to", "fileKey"],
    },
    "handler": send_file_handler,
}

MEDIA_TOOLS = [
    UPLOAD_IMAGE_TOOL,
    UPLOAD_FILE_TOOL,
    DOWNLOAD_IMAGE_TOOL,
    DOWNLOAD_FILE_TOOL,
    SEND_IMAGE_TOOL,
    SEND_FILE_TOOL,
]
