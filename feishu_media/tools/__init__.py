"""Agent tool registration."""

import functools
import logging
from typing import Optional

from ..config import FeishuSettings
from ..media.client import FeishuMediaClient, MediaClient
from .media import MEDIA_TOOLS
from .registry import Tool, ToolRegistry

logger = logging.getLogger("feishu_media.tools")

__all__ = ["Tool", "ToolRegistry", "register_media_tools"]


def register_media_tools(
    registry: ToolRegistry,
    settings: FeishuSettings,
    client: Optional[MediaClient] = None,
) -> int:
    """Register the six Feishu media tools.

    Skipped when credentials are missing or media tools are disabled.

    Args:
        client: MediaClient to bind; defaults to a FeishuMediaClient built
            from the settings' credentials

    Returns:
        Number of tools registered (0 when skipped)
    """
    credentials = settings.credentials()
    if credentials is None:
        logger.debug("feishu_media: Feishu credentials not configured, skipping media tools")
        return 0

    if not settings.media_tools:
        logger.debug("feishu_media: media tool disabled in config")
        return 0

    if client is None:
        client = FeishuMediaClient(credentials, timeout=settings.http_timeout)

    for tool in MEDIA_TOOLS:
        registry.register(
            name=tool["name"],
            description=tool["description"],
            parameters=tool["parameters"],
            handler=functools.partial(tool["handler"], client),
            label=tool["label"],
        )

    logger.info("feishu_media: Media tools registered successfully")
    return len(MEDIA_TOOLS)
