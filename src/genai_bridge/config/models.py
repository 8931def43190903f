"""
Configuration Models
====================

Type-safe Pydantic model for the bridge configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from genai_bridge.core import Default


class BridgeConfig(BaseModel):
    """Connection settings for the OpenAI-compatible provider."""

    base_url: str = Field(default=Default.BASE_URL, description="API base URL")
    model: str = Field(default=Default.MODEL, description="Provider model identifier")
    api_key: str | None = Field(default=None, description="Bearer token", repr=False)
    referer: str = Field(
        default=Default.REFERER, description="HTTP-Referer identification header"
    )
    title: str = Field(default=Default.TITLE, description="X-Title identification header")
    timeout: float = Field(default=Default.TIMEOUT, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(default=Default.MAX_CONNECTIONS, gt=0)
    max_keepalive: int = Field(default=Default.MAX_KEEPALIVE, ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
