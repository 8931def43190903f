"""
Compatibility Layer
===================

Two-way conversion between Gemini-style content and OpenAI-compatible
chat completions.

- **Inbound**: turns and generation config → chat-completion request body
- **Outbound**: completion / stream chunk → content response

Usage:
    body = build_completion_body("google/gemini-2.0-flash-001", "Hello")
    response = completion_to_response(
        {"choices": [{"message": {"content": "Hi!"}, "finish_reason": "stop"}]}
    )
"""

from .converters import (
    build_completion_body,
    chunk_to_partial_response,
    completion_to_response,
    content_to_message,
    contents_to_messages,
    convert_config,
    convert_content,
)

__all__ = [
    # Inbound converters
    "build_completion_body",
    "content_to_message",
    "contents_to_messages",
    "convert_config",
    "convert_content",
    # Outbound converters
    "chunk_to_partial_response",
    "completion_to_response",
]
