"""
Core Types
==========

Enums, models, errors and JSON helpers shared by every layer of the bridge.
"""

from .enums import (
    ContentRole,
    ContentTypeValue,
    Default,
    ErrorType,
    HttpHeader,
    HttpMethod,
    HttpStatus,
    MessageRole,
    OpenRouterEndpoint,
    SSEEvent,
    SSEPrefix,
)
from .errors import (
    APIStatusError,
    ConfigurationError,
    FrameParseError,
    LLMError,
    MissingBodyError,
    UnsupportedOperationError,
)
from .json_utils import JSONDecodeError, loads
from .models import (
    Blob,
    Candidate,
    Content,
    ContentsType,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    FileData,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    UsageMetadata,
)
from .tokens import count_tokens_for, estimate_tokens, extract_text
from .wire_models import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    ChunkChoice,
    ChunkDelta,
    CompletionChoice,
    CompletionMessage,
    CompletionRequestBody,
    CompletionUsage,
)

__all__ = [
    # Enums
    "ContentRole",
    "ContentTypeValue",
    "Default",
    "ErrorType",
    "HttpHeader",
    "HttpMethod",
    "HttpStatus",
    "MessageRole",
    "OpenRouterEndpoint",
    "SSEEvent",
    "SSEPrefix",
    # Errors
    "APIStatusError",
    "ConfigurationError",
    "FrameParseError",
    "LLMError",
    "MissingBodyError",
    "UnsupportedOperationError",
    # JSON
    "JSONDecodeError",
    "loads",
    # Caller-side models
    "Blob",
    "Candidate",
    "Content",
    "ContentsType",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "FileData",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "Part",
    "UsageMetadata",
    # Token estimation
    "count_tokens_for",
    "estimate_tokens",
    "extract_text",
    # Wire models
    "ChatCompletion",
    "ChatCompletionChunk",
    "ChatMessage",
    "ChunkChoice",
    "ChunkDelta",
    "CompletionChoice",
    "CompletionMessage",
    "CompletionRequestBody",
    "CompletionUsage",
]
