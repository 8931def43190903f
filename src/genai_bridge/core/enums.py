"""
Core Enumerations
=================

Type-safe enums for roles, SSE framing, HTTP constants and error kinds.
No more magic strings!
"""

from enum import Enum, IntEnum


class ContentRole(str, Enum):
    """Turn role on the Gemini-style side."""

    USER = "user"
    MODEL = "model"


class MessageRole(str, Enum):
    """Chat message role on the OpenAI-compatible side."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class SSEPrefix(str, Enum):
    """Server-sent event line prefixes."""

    DATA = "data: "


class SSEEvent(str, Enum):
    """Reserved server-sent event payloads."""

    DONE = "[DONE]"


class OpenRouterEndpoint(str, Enum):
    """Endpoints relative to the provider base URL."""

    CHAT_COMPLETIONS = "/chat/completions"


class HttpMethod(str, Enum):
    POST = "POST"


class HttpHeader(str, Enum):
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    CONTENT_LENGTH = "Content-Length"
    RETRY_AFTER = "Retry-After"
    REFERER = "HTTP-Referer"
    TITLE = "X-Title"


class ContentTypeValue(str, Enum):
    JSON = "application/json"


class HttpStatus(IntEnum):
    """HTTP status codes the error mapper cares about."""

    NO_CONTENT = 204
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    RATE_LIMIT = 429
    SERVER_ERROR = 500


class ErrorType(str, Enum):
    """Categories carried on LLMError.error_type."""

    API_ERROR = "api_error"
    AUTHENTICATION_ERROR = "authentication_error"
    PERMISSION_ERROR = "permission_error"
    NOT_FOUND_ERROR = "not_found_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    STREAMING_ERROR = "streaming_error"
    MISSING_BODY = "missing_body"
    FRAME_PARSE_ERROR = "frame_parse_error"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    CONFIGURATION_ERROR = "configuration_error"


class Default:
    """Default values shared by the client and the config layer."""

    BASE_URL = "https://openrouter.ai/api/v1"
    MODEL = "google/gemini-2.0-flash-001"
    REFERER = "https://github.com/google/gemini-cli"
    TITLE = "Gemini CLI"
    TEMPERATURE = 0.7
    TOP_P = 1.0
    TIMEOUT = 60.0
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    CHARS_PER_TOKEN = 4
