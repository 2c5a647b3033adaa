"""Tool result envelopes.

Every media tool returns exactly one of two shapes:

    success: {"content": [{"type": "text", "text": ...}], "details": {...}}
    failure: {"content": [{"type": "text", "text": "Error: ..."}], "error": "..."}

``ToolSuccess`` and ``ToolFailure`` are the two variants; a handler
builds one and calls ``to_dict()`` at the boundary, so an envelope can
never carry both ``details`` and ``error``.
"""

import base64
import json
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class ToolSuccess:
    text: str
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "content": [{"type": "text", "text": self.text}],
            "details": self.details,
        }


@dataclass(frozen=True)
class ToolFailure:
    message: str

    def to_dict(self) -> dict:
        return {
            "content": [{"type": "text", "text": f"Error: {self.message}"}],
            "error": self.message,
        }


def json_result(data: dict) -> ToolSuccess:
    """Success whose summary is the pretty-printed details."""
    return ToolSuccess(text=json.dumps(data, indent=2, ensure_ascii=False), details=data)


def error_result(err: Union[BaseException, str]) -> ToolFailure:
    """Failure carrying the error's message text."""
    return ToolFailure(message=str(err))


def build_data_url(payload: bytes, content_type: Optional[str], default: str) -> str:
    """``data:<mime>;base64,<payload>``, falling back to ``default`` when no type was declared."""
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{content_type or default};base64,{encoded}"


def download_result(
    label: str,
    payload: bytes,
    content_type: Optional[str],
    default_content_type: str,
    file_name: Optional[str] = None,
    include_name: bool = False,
) -> ToolSuccess:
    """Success for a binary download, with the payload embedded as a data URL.

    Args:
        label: "image" or "file", used in the summary text
        include_name: append the attachment's file name to the summary
    """
    summary = f"Downloaded {label} ({len(payload)} bytes, type: {content_type or 'unknown'}"
    if include_name:
        summary += f", name: {file_name or 'unknown'}"
    summary += ")"

    details = {
        "contentType": content_type,
        "size": len(payload),
        "dataUrl": build_data_url(payload, content_type, default_content_type),
    }
    if include_name:
        details["fileName"] = file_name
    return ToolSuccess(text=summary, details=details)
