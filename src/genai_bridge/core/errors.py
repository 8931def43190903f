"""
Error Types
===========

Structured exceptions raised by the bridge. Everything derives from
``LLMError`` so callers can catch one type and branch on ``error_type``.
"""

from __future__ import annotations

from typing import Any

from .enums import ErrorType


class LLMError(Exception):
    """Base error carrying a category and a human readable message."""

    def __init__(
        self,
        error_type: str = ErrorType.API_ERROR.value,
        error_message: str = "",
        retry_after: float | None = None,
        **metadata: Any,
    ):
        super().__init__(error_message)
        self.error_type = error_type
        self.error_message = error_message
        self.retry_after = retry_after
        self.metadata = metadata

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_type={self.error_type!r}, error_message={self.error_message!r})"


class APIStatusError(LLMError):
    """Non-success HTTP status from the provider."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        body: str,
        error_type: str = ErrorType.API_ERROR.value,
        retry_after: float | None = None,
    ):
        super().__init__(
            error_type=error_type,
            error_message=f"OpenRouter API Error: {status_code} {status_text} - {body}",
            retry_after=retry_after,
        )
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class MissingBodyError(LLMError):
    """Successful streaming response without a readable body."""

    def __init__(self, error_message: str = "No response body"):
        super().__init__(
            error_type=ErrorType.MISSING_BODY.value, error_message=error_message
        )


class FrameParseError(LLMError):
    """
    A single server-sent event frame could not be parsed.

    Non-fatal: the decoder logs it and moves on to the next line.
    """

    def __init__(self, payload: str, cause: Exception):
        super().__init__(
            error_type=ErrorType.FRAME_PARSE_ERROR.value,
            error_message=f"Could not parse SSE frame: {cause}",
        )
        self.payload = payload
        self.cause = cause


class UnsupportedOperationError(LLMError):
    """Operation the provider cannot serve."""

    def __init__(self, error_message: str):
        super().__init__(
            error_type=ErrorType.UNSUPPORTED_OPERATION.value,
            error_message=error_message,
        )


class ConfigurationError(LLMError):
    """Missing or invalid configuration."""

    def __init__(self, error_message: str):
        super().__init__(
            error_type=ErrorType.CONFIGURATION_ERROR.value,
            error_message=error_message,
        )
