"""
Configuration Loader
====================

Builds a validated ``BridgeConfig`` from environment variables, optionally
seeded from a ``.env`` file.

Environment variables:
    OPENROUTER_API_KEY   Bearer token
    OPENROUTER_BASE_URL  API base URL (default https://openrouter.ai/api/v1)
    OPENROUTER_MODEL     Model id (default google/gemini-2.0-flash-001)
    OPENROUTER_REFERER   HTTP-Referer identification header
    OPENROUTER_TITLE     X-Title identification header
    OPENROUTER_TIMEOUT   Request timeout in seconds
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from genai_bridge.core import ConfigurationError

from .models import BridgeConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "OPENROUTER_"

_ENV_FIELDS = {
    "API_KEY": "api_key",
    "BASE_URL": "base_url",
    "MODEL": "model",
    "REFERER": "referer",
    "TITLE": "title",
    "TIMEOUT": "timeout",
}


class ConfigLoader:
    """
    Configuration loader with Pydantic validation.

    Explicit overrides win over environment variables, which win over the
    model defaults. Empty environment values count as unset.
    """

    def __init__(
        self,
        env_file: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize config loader.

        Args:
            env_file: Optional ``.env`` file. If not provided, searches
                standard locations.
            environ: Mapping to read variables from (defaults to ``os.environ``)
        """
        self.env_file = Path(env_file) if env_file else None
        self._environ = environ
        self._config: BridgeConfig | None = None
        if environ is None:
            self._load_env()

    def _load_env(self) -> None:
        """Load environment variables from the first ``.env`` file found."""
        env_candidates: list[Path] = (
            [self.env_file]
            if self.env_file
            else [
                Path(".env"),
                Path(".env.local"),
                Path.home() / ".genai_bridge" / ".env",
            ]
        )

        for env_path in env_candidates:
            if env_path.exists():
                logger.info(f"Loading environment from {env_path}")
                load_dotenv(env_path, override=False)
                break

    def _read_environ(self) -> dict[str, Any]:
        environ = self._environ if self._environ is not None else os.environ
        values: dict[str, Any] = {}
        for suffix, field in _ENV_FIELDS.items():
            value = environ.get(f"{ENV_PREFIX}{suffix}")
            if value:
                values[field] = value
        return values

    def load(self, **overrides: Any) -> BridgeConfig:
        """
        Load and validate configuration.

        Args:
            **overrides: Field values taking precedence over the environment

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a value fails validation
        """
        values = self._read_environ()
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            self._config = BridgeConfig.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug(
            f"Configuration loaded: base_url={self._config.base_url}, "
            f"model={self._config.model}"
        )
        return self._config

    def get(self) -> BridgeConfig:
        """Get current configuration (loads if not loaded)."""
        if self._config is None:
            return self.load()
        return self._config


# Global config loader instance
_global_loader: ConfigLoader | None = None


def get_config() -> BridgeConfig:
    """
    Get current global configuration.

    Returns:
        Current configuration (loads if needed)
    """
    global _global_loader

    if _global_loader is None:
        _global_loader = ConfigLoader()

    return _global_loader.get()


def reset_config() -> None:
    """Forget the cached global configuration."""
    global _global_loader
    _global_loader = None
