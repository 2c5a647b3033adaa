"""File type detection and content-type defaults.

Module-level tables are read-only; nothing in the package mutates them.
"""

import os
from types import MappingProxyType
from typing import Literal

FileType = Literal["opus", "mp4", "pdf", "doc", "xls", "ppt", "stream"]

FILE_TYPES: tuple[str, ...] = ("opus", "mp4", "pdf", "doc", "xls", "ppt", "stream")

IMAGE_TYPES: tuple[str, ...] = ("message", "avatar")

RESOURCE_TYPES: tuple[str, ...] = ("image", "file")

_EXTENSION_TYPES = MappingProxyType({
    ".opus": "opus",
    ".ogg": "opus",
    ".mp4": "mp4",
    ".mov": "mp4",
    ".avi": "mp4",
    ".pdf": "pdf",
    ".doc": "doc",
    ".docx": "doc",
    ".xls": "xls",
    ".xlsx": "xls",
    ".ppt": "ppt",
    ".pptx": "ppt",
})

DEFAULT_IMAGE_CONTENT_TYPE = "image/png"
DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


def detect_file_type(file_name: str) -> FileType:
    """Infer the upload file type from a file name. Unknown → "stream"."""
    ext = os.path.splitext(file_name)[1].lower()
    return _EXTENSION_TYPES.get(ext, "stream")
