"""feishu-media configuration management."""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger("feishu_media.config")

Domain = Literal["feishu", "lark"]

# Open Platform base URLs, one per region
DOMAIN_BASE_URLS: dict[str, str] = {
    "feishu": "https://open.feishu.cn",
    "lark": "https://open.larksuite.com",
}


class FeishuCredentials(BaseModel):
    """Resolved app identity. Read-only once constructed."""

    model_config = ConfigDict(frozen=True)

    app_id: str
    app_secret: str
    domain: Domain = "feishu"

    @property
    def base_url(self) -> str:
        return DOMAIN_BASE_URLS[self.domain]


class FeishuSettings(BaseSettings):
    """Settings loaded from environment variables or .env file."""

    # App credentials (Open Platform → Credentials page)
    app_id: Optional[str] = Field(default=None, description="Feishu/Lark App ID")
    app_secret: Optional[str] = Field(default=None, description="Feishu/Lark App Secret")
    domain: Domain = Field(default="feishu", description="feishu (China) or lark (International)")

    # Tools
    media_tools: bool = Field(default=True, description="Register the media tools")

    # None = wait forever; callers needing bounded latency set this
    http_timeout: Optional[float] = Field(default=None, description="HTTP timeout in seconds")

    model_config = {"env_prefix": "FEISHU_", "env_file": ".env", "extra": "ignore"}

    def credentials(self) -> Optional[FeishuCredentials]:
        """Return the credential record, or None if app id/secret are missing."""
        app_id = (self.app_id or "").strip()
        app_secret = (self.app_secret or "").strip()
        if not app_id or not app_secret:
            return None
        return FeishuCredentials(app_id=app_id, app_secret=app_secret, domain=self.domain)


def load_settings() -> FeishuSettings:
    """Load settings from environment."""
    settings = FeishuSettings()
    if settings.credentials() is None:
        logger.debug("Feishu credentials not configured")
    return settings
