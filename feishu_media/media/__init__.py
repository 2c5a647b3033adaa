"""Media transfer: path resolution, type detection, remote client, result envelopes."""

from .client import FeishuMediaClient, MediaClient
from .errors import (
    MediaError,
    MediaFileNotFoundError,
    MediaIOError,
    MissingParameterError,
    RemoteNotFoundError,
    RemoteRejectedError,
)
from .filetypes import FILE_TYPES, detect_file_type
from .paths import resolve_path
from .results import ToolFailure, ToolSuccess, build_data_url

__all__ = [
    "FeishuMediaClient",
    "MediaClient",
    "MediaError",
    "MediaFileNotFoundError",
    "MediaIOError",
    "MissingParameterError",
    "RemoteNotFoundError",
    "RemoteRejectedError",
    "FILE_TYPES",
    "detect_file_type",
    "resolve_path",
    "ToolFailure",
    "ToolSuccess",
    "build_data_url",
]
