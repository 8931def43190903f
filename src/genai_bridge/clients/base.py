"""
Async-Native Base Content Generator
===================================

Abstract content-generation interface plus the httpx plumbing shared by
every provider implementation: connection pooling, JSON POST, streamed
POST, and mapping of HTTP failures to structured errors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Any

import httpx

from genai_bridge.core import (
    APIStatusError,
    ContentTypeValue,
    CountTokensParameters,
    CountTokensResponse,
    Default,
    EmbedContentParameters,
    ErrorType,
    GenerateContentParameters,
    GenerateContentResponse,
    HttpHeader,
    HttpMethod,
    HttpStatus,
    JSONDecodeError,
    LLMError,
    MissingBodyError,
    loads,
)

logger = logging.getLogger(__name__)


class AsyncContentGenerator(ABC):
    """
    Async-native content generator with connection pooling.

    All provider generators should inherit from this for consistent behavior.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = Default.TIMEOUT,
        max_connections: int = Default.MAX_CONNECTIONS,
        max_keepalive: int = Default.MAX_KEEPALIVE,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize async generator with connection pool.

        Args:
            api_key: API authentication key
            base_url: Base URL for API
            timeout: Request timeout in seconds
            max_connections: Maximum number of connections in pool
            max_keepalive: Maximum number of keep-alive connections
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive,
        )

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            limits=limits,
            headers=self._get_default_headers(),
            transport=transport,
        )

        self._closed = False
        logger.debug(
            f"Initialized async generator: base_url={self.base_url}, "
            f"max_connections={max_connections}"
        )

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for all requests."""
        return {
            HttpHeader.AUTHORIZATION.value: f"Bearer {self.api_key}",
            HttpHeader.CONTENT_TYPE.value: ContentTypeValue.JSON.value,
        }

    # ------------------------------------------------------------------
    # Content generation interface
    # ------------------------------------------------------------------

    @abstractmethod
    async def generate_content(
        self, request: GenerateContentParameters, user_prompt_id: str = ""
    ) -> GenerateContentResponse:
        """
        Generate a single response.

        Raises:
            LLMError: On API errors
        """
        ...

    @abstractmethod
    async def generate_content_stream(
        self, request: GenerateContentParameters, user_prompt_id: str = ""
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Start a streamed generation.

        Awaiting this performs the request and validates the status; the
        returned iterator then yields partial responses.

        Raises:
            LLMError: On API errors
        """
        ...

    @abstractmethod
    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        ...

    @abstractmethod
    async def embed_content(self, request: EmbedContentParameters) -> Any:
        ...

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    async def _post_json(
        self, endpoint: str, data: dict[str, Any], **kwargs: Any
    ) -> dict[str, Any]:
        """
        Helper for JSON POST requests.

        Args:
            endpoint: API endpoint (relative to base_url)
            data: JSON request body
            **kwargs: Additional httpx request options

        Returns:
            JSON response

        Raises:
            LLMError: On API errors
        """
        try:
            response = await self._client.post(endpoint, json=data, **kwargs)
        except httpx.RequestError as e:
            raise LLMError(
                error_type=ErrorType.NETWORK_ERROR.value,
                error_message=f"Network error: {str(e)}",
            ) from e

        await self._raise_for_status(response)

        try:
            return loads(response.content)
        except JSONDecodeError as e:
            raise LLMError(
                error_type=ErrorType.API_ERROR.value,
                error_message=f"Invalid JSON in response: {str(e)}",
            ) from e

    async def _open_stream(
        self, endpoint: str, data: dict[str, Any], **kwargs: Any
    ) -> httpx.Response:
        """
        Helper for streaming POST requests.

        Sends the request and checks the status without touching the body.
        The caller owns the returned response and must ``aclose()`` it.

        Raises:
            LLMError: On API errors, before any body bytes are read
            MissingBodyError: On 204 or a declared empty body
        """
        request = self._client.build_request(
            HttpMethod.POST.value, endpoint, json=data, **kwargs
        )
        try:
            response = await self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise LLMError(
                error_type=ErrorType.NETWORK_ERROR.value,
                error_message=f"Network error: {str(e)}",
            ) from e

        await self._raise_for_status(response)

        if (
            response.status_code == HttpStatus.NO_CONTENT
            or response.headers.get(HttpHeader.CONTENT_LENGTH.value) == "0"
        ):
            await response.aclose()
            raise MissingBodyError()

        return response

    async def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            await response.aread()
        finally:
            await response.aclose()
        raise self._handle_http_error(response)

    def _handle_http_error(self, response: httpx.Response) -> APIStatusError:
        """
        Convert a failed HTTP response to APIStatusError.

        Args:
            response: httpx response with a non-success status (body read)

        Returns:
            Structured status error
        """
        status = response.status_code
        retry_after = None

        if status == HttpStatus.UNAUTHORIZED:
            error_type = ErrorType.AUTHENTICATION_ERROR
        elif status == HttpStatus.FORBIDDEN:
            error_type = ErrorType.PERMISSION_ERROR
        elif status == HttpStatus.NOT_FOUND:
            error_type = ErrorType.NOT_FOUND_ERROR
        elif status == HttpStatus.RATE_LIMIT:
            error_type = ErrorType.RATE_LIMIT_ERROR
            header = response.headers.get(HttpHeader.RETRY_AFTER.value)
            try:
                retry_after = float(header) if header else None
            except ValueError:
                retry_after = None
        elif HttpStatus.SERVER_ERROR <= status < 600:
            error_type = ErrorType.SERVER_ERROR
        else:
            error_type = ErrorType.API_ERROR

        logger.debug(f"HTTP {status} from {response.request.url}")

        return APIStatusError(
            status_code=status,
            status_text=response.reason_phrase,
            body=response.text,
            error_type=error_type.value,
            retry_after=retry_after,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if not self._closed:
            await self._client.aclose()
            self._closed = True
            logger.debug("Closed async generator")

    async def __aenter__(self) -> AsyncContentGenerator:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()

    def __del__(self) -> None:
        """Cleanup on deletion."""
        if not getattr(self, "_closed", True) and hasattr(self, "_client"):
            logger.warning(
                "AsyncContentGenerator was not properly closed. Use 'async with' or call close()"
            )
