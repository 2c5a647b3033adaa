"""Media commands — thin wrappers over the feishu_* tools."""

import asyncio
from typing import Optional

import click

from . import cli
from .shared import _print_envelope


def _run_tool(name: str, arguments: dict, output: Optional[str] = None):
    """Register the media tools, execute one, print the result."""
    async def _run() -> dict:
        from feishu_media.config import load_settings
        from feishu_media.tools import ToolRegistry, register_media_tools

        settings = load_settings()
        registry = ToolRegistry()
        if not register_media_tools(registry, settings):
            raise click.ClickException(
                "Media tools unavailable: set FEISHU_APP_ID / FEISHU_APP_SECRET "
                "and make sure FEISHU_MEDIA_TOOLS is not disabled."
            )
        return await registry.execute(name, arguments)

    envelope = asyncio.run(_run())
    if not _print_envelope(envelope, output):
        raise SystemExit(1)


@cli.command("upload-image")
@click.argument("path")
@click.option("--image-type", type=click.Choice(["message", "avatar"]), default="message", show_default=True)
def upload_image(path, image_type):
    """Upload a local image."""
    _run_tool("feishu_upload_image", {"path": path, "imageType": image_type})


@cli.command("upload-file")
@click.argument("path")
@click.option("--file-name", default=None, help="Override the file name")
@click.option(
    "--file-type",
    type=click.Choice(["opus", "mp4", "pdf", "doc", "xls", "ppt", "stream"]),
    default=None,
    help="File type (auto-detected if omitted)",
)
@click.option("--duration", type=int, default=None, help="Duration in ms (audio/video only)")
def upload_file(path, file_name, file_type, duration):
    """Upload a local file."""
    arguments = {"path": path}
    if file_name:
        arguments["fileName"] = file_name
    if file_type:
        arguments["fileType"] = file_type
    if duration is not None:
        arguments["duration"] = duration
    _run_tool("feishu_upload_file", arguments)


@cli.command("download-image")
@click.argument("image_key")
@click.option("--output", "-o", default=None, help="Write the image bytes to this file")
def download_image(image_key, output):
    """Download an image by image_key."""
    _run_tool("feishu_download_image", {"imageKey": image_key}, output=output)


@cli.command("download-file")
@click.argument("message_id")
@click.argument("file_key")
@click.option("--type", "resource_type", type=click.Choice(["image", "file"]), default="file", show_default=True)
@click.option("--output", "-o", default=None, help="Write the file bytes to this file")
def download_file(message_id, file_key, resource_type, output):
    """Download a message attachment."""
    _run_tool(
        "feishu_download_file",
        {"messageId": message_id, "fileKey": file_key, "type": resource_type},
        output=output,
    )


@cli.command("send-image")
@click.argument("to")
@click.argument("image_key")
@click.option("--reply-to", default=None, help="Message ID to reply to")
def send_image(to, image_key, reply_to):
    """Send an uploaded image to a chat (oc_xxx) or user (ou_xxx)."""
    arguments = {"to": to, "imageKey": image_key}
    if reply_to:
        arguments["replyToMessageId"] = reply_to
    _run_tool("feishu_send_image", arguments)


@cli.command("send-file")
@click.argument("to")
@click.argument("file_key")
@click.option("--reply-to", default=None, help="Message ID to reply to")
def send_file(to, file_key, reply_to):
    """Send an uploaded file to a chat (oc_xxx) or user (ou_xxx)."""
    arguments = {"to": to, "fileKey": file_key}
    if reply_to:
        arguments["replyToMessageId"] = reply_to
    _run_tool("feishu_send_file", arguments)
