"""
Schema Converters
=================

Convert between the caller-facing content models and the OpenAI-compatible
chat-completion wire format.

Handles:
- Turn → chat message conversion (text parts only)
- Generation config → request body parameters
- One-shot completion → content response
- Stream chunk → partial content response
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from genai_bridge.core import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    CompletionRequestBody,
    Content,
    ContentRole,
    Default,
    GenerateContentConfig,
    GenerateContentResponse,
    MessageRole,
    UsageMetadata,
)

logger = logging.getLogger(__name__)

# ================================================================
# Inbound Converters (caller schema → wire)
# ================================================================


def convert_content(turn: Content | dict[str, Any]) -> Content:
    """
    Coerce one turn into a ``Content`` model.

    A dict that does not validate becomes an empty turn rather than an error.
    """
    if isinstance(turn, Content):
        return turn
    try:
        return Content.model_validate(turn)
    except ValidationError as e:
        logger.debug(f"Treating malformed turn as empty: {e}")
        return Content()


def content_to_message(turn: Content | dict[str, Any]) -> ChatMessage:
    """
    Map a single turn to a chat message.

    ``model`` becomes ``assistant``; any other or missing role becomes
    ``user``. Content is the in-order concatenation of the text parts.
    """
    content = convert_content(turn)
    role = (
        MessageRole.ASSISTANT
        if content.role == ContentRole.MODEL.value
        else MessageRole.USER
    )
    return ChatMessage(role=role, content=content.text)


def contents_to_messages(contents: Any) -> list[ChatMessage]:
    """
    Convert caller contents to the chat message list.

    Args:
        contents: A plain string or a sequence of turns

    Returns:
        One message per turn, in order. A string yields a single user
        message; any other shape yields an empty list.
    """
    if isinstance(contents, str):
        return [ChatMessage(role=MessageRole.USER, content=contents)]

    if not isinstance(contents, (list, tuple)):
        return []

    return [content_to_message(turn) for turn in contents]


def convert_config(
    config: GenerateContentConfig | dict[str, Any] | None,
) -> GenerateContentConfig:
    """Coerce a generation config, falling back to an empty one."""
    if isinstance(config, GenerateContentConfig):
        return config
    if isinstance(config, dict):
        try:
            return GenerateContentConfig.model_validate(config)
        except ValidationError as e:
            logger.debug(f"Ignoring unusable generation config: {e}")
    return GenerateContentConfig()


def build_completion_body(
    model: str,
    contents: Any,
    config: GenerateContentConfig | dict[str, Any] | None = None,
    stream: bool = False,
) -> CompletionRequestBody:
    """
    Build the chat-completion request body.

    Args:
        model: Provider model identifier
        contents: A plain string or a sequence of turns
        config: Optional generation parameters
        stream: Whether to request a server-sent event stream

    Returns:
        Request body with temperature/top_p defaults applied and
        ``max_tokens`` left unset when not given
    """
    cfg = convert_config(config)

    return CompletionRequestBody(
        model=model,
        messages=contents_to_messages(contents),
        stream=True if stream else None,
        temperature=(
            cfg.temperature if cfg.temperature is not None else Default.TEMPERATURE
        ),
        top_p=cfg.top_p if cfg.top_p is not None else Default.TOP_P,
        max_tokens=cfg.max_output_tokens,
    )


# ================================================================
# Outbound Converters (wire → caller schema)
# ================================================================


def _usage_metadata(completion: ChatCompletion) -> UsageMetadata | None:
    if completion.usage is None:
        return None
    return UsageMetadata(
        prompt_token_count=completion.usage.prompt_tokens,
        candidates_token_count=completion.usage.completion_tokens,
        total_token_count=completion.usage.total_tokens,
    )


def completion_to_response(data: dict[str, Any]) -> GenerateContentResponse:
    """
    Convert a one-shot chat completion to a content response.

    Args:
        data: Decoded JSON body of the completion

    Returns:
        Response whose single model candidate carries the first choice's
        text and verbatim finish reason; the raw JSON is kept on ``data``
    """
    raw = data if isinstance(data, dict) else {}
    completion = ChatCompletion.model_validate(raw)
    choice = completion.first_choice

    return GenerateContentResponse.from_text(
        completion.content,
        finish_reason=choice.finish_reason if choice else None,
        index=0,
        usage_metadata=_usage_metadata(completion),
        model_version=completion.model,
        response_id=completion.id,
        data=raw,
    )


def chunk_to_partial_response(
    chunk: ChatCompletionChunk,
) -> GenerateContentResponse | None:
    """
    Convert one stream chunk to a partial response.

    Returns ``None`` when the chunk carries no delta text.
    """
    text = chunk.delta_text
    if not text:
        return None

    choice = chunk.first_choice
    finish_reason = choice.finish_reason if choice else None

    return GenerateContentResponse.from_text(text, finish_reason=finish_reason or None)
