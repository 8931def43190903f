"""
OpenRouter Content Generator
============================

Serves Gemini-style content generation from an OpenAI-compatible
chat-completions endpoint (OpenRouter by default).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from genai_bridge.compat import build_completion_body, completion_to_response
from genai_bridge.config import BridgeConfig, ConfigLoader
from genai_bridge.core import (
    ConfigurationError,
    CountTokensParameters,
    CountTokensResponse,
    Default,
    EmbedContentParameters,
    GenerateContentParameters,
    GenerateContentResponse,
    HttpHeader,
    OpenRouterEndpoint,
    UnsupportedOperationError,
    count_tokens_for,
)
from genai_bridge.streaming import SSEStreamDecoder

from .base import AsyncContentGenerator

logger = logging.getLogger(__name__)


class OpenRouterContentGenerator(AsyncContentGenerator):
    """
    Content generator backed by an OpenAI-compatible API.

    Features:
    - Turn/part contents translated to flat chat messages
    - Server-sent event streaming decoded incrementally
    - Heuristic token counting without a network round trip
    - Embeddings rejected up front
    """

    def __init__(
        self,
        api_key: str,
        model: str = Default.MODEL,
        base_url: str = Default.BASE_URL,
        referer: str = Default.REFERER,
        title: str = Default.TITLE,
        **kwargs: Any,
    ):
        """
        Initialize OpenRouter generator.

        Args:
            api_key: Provider API key
            model: Model identifier sent with every request
            base_url: API base URL
            referer: Value of the HTTP-Referer identification header
            title: Value of the X-Title identification header
            **kwargs: Additional client options (timeout, transport, etc.)
        """
        self.referer = referer
        self.title = title
        super().__init__(api_key=api_key, base_url=base_url, **kwargs)
        self.model = model

        logger.info(f"Initialized OpenRouter generator: model={model}, base_url={self.base_url}")

    @classmethod
    def from_config(
        cls, config: BridgeConfig, **kwargs: Any
    ) -> OpenRouterContentGenerator:
        if not config.api_key:
            raise ConfigurationError(
                "No API key configured. Set OPENROUTER_API_KEY or pass api_key."
            )
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            referer=config.referer,
            title=config.title,
            timeout=config.timeout,
            max_connections=config.max_connections,
            max_keepalive=config.max_keepalive,
            **kwargs,
        )

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers[HttpHeader.REFERER.value] = self.referer
        headers[HttpHeader.TITLE.value] = self.title
        return headers

    def _prepare_body(
        self, request: GenerateContentParameters, stream: bool
    ) -> dict[str, Any]:
        body = build_completion_body(
            self.model, request.contents, request.config, stream=stream
        )
        return body.to_payload()

    async def generate_content(
        self, request: GenerateContentParameters, user_prompt_id: str = ""
    ) -> GenerateContentResponse:
        """
        Create a non-streaming completion.

        Args:
            request: Contents and generation config
            user_prompt_id: Caller's prompt id (not sent to the provider)

        Returns:
            Response with one model candidate
        """
        body = self._prepare_body(request, stream=False)

        logger.debug(
            f"Creating completion: model={body['model']}, "
            f"messages={len(body['messages'])}, prompt_id={user_prompt_id}"
        )

        data = await self._post_json(OpenRouterEndpoint.CHAT_COMPLETIONS.value, body)
        return completion_to_response(data)

    async def generate_content_stream(  # type: ignore[override]
        self, request: GenerateContentParameters, user_prompt_id: str = ""
    ) -> SSEStreamDecoder:
        """
        Create a streaming completion.

        The request is sent and its status checked here; the returned decoder
        reads the body lazily and releases the connection when it stops.

        Args:
            request: Contents and generation config
            user_prompt_id: Caller's prompt id (not sent to the provider)

        Returns:
            Async iterator of partial responses
        """
        body = self._prepare_body(request, stream=True)

        logger.debug(
            f"Starting stream: model={body['model']}, "
            f"messages={len(body['messages'])}, prompt_id={user_prompt_id}"
        )

        response = await self._open_stream(
            OpenRouterEndpoint.CHAT_COMPLETIONS.value, body
        )
        return SSEStreamDecoder(response.aiter_bytes(), release=response.aclose)

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Estimate tokens locally at four characters per token."""
        return count_tokens_for(request.contents)

    async def embed_content(self, request: EmbedContentParameters) -> Any:
        raise UnsupportedOperationError("Embed content not supported via OpenRouter yet.")


def create_content_generator(
    api_key: str | None = None,
    config: BridgeConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OpenRouterContentGenerator:
    """
    Build a generator from explicit arguments and the environment.

    Args:
        api_key: API key; overrides the configured one
        config: Pre-built configuration; loaded from the environment if omitted
        transport: Optional httpx transport

    Raises:
        ConfigurationError: If no API key is available
    """
    if config is None:
        config = ConfigLoader().load(api_key=api_key)
    elif api_key:
        config = config.model_copy(update={"api_key": api_key})

    return OpenRouterContentGenerator.from_config(config, transport=transport)
