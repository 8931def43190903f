# genai_bridge/__init__.py
"""
genai-bridge
============

Use Gemini-style content generation against any OpenAI-compatible
chat-completions API (OpenRouter by default).
"""

import logging
import os

from genai_bridge.clients import (
    AsyncContentGenerator,
    OpenRouterContentGenerator,
    create_content_generator,
)
from genai_bridge.config import BridgeConfig, ConfigLoader, get_config, reset_config
from genai_bridge.core import (
    APIStatusError,
    Content,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    LLMError,
    MissingBodyError,
    Part,
    UnsupportedOperationError,
)
from genai_bridge.streaming import DecoderState, SSEStreamDecoder

__version__ = "0.1.0"

# Honour LOGLEVEL env-var for quick local tweaks
if "LOGLEVEL" in os.environ:
    logging.getLogger(__name__).setLevel(os.environ["LOGLEVEL"].upper())


def get_version():
    """Get genai-bridge version"""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    # Generators
    "AsyncContentGenerator",
    "OpenRouterContentGenerator",
    "create_content_generator",
    # Configuration
    "BridgeConfig",
    "ConfigLoader",
    "get_config",
    "reset_config",
    # Models
    "Content",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "Part",
    # Streaming
    "DecoderState",
    "SSEStreamDecoder",
    # Errors
    "APIStatusError",
    "LLMError",
    "MissingBodyError",
    "UnsupportedOperationError",
]
