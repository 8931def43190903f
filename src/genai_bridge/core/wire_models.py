"""
Chat-Completion Wire Models
===========================

Pydantic models for the OpenAI-compatible request body and for the
responses the provider sends back.

Response models are deliberately partial: every field is optional, unknown
fields are kept, and values of the wrong shape collapse to their default.
A provider leaving a field out therefore reads as empty/absent rather than
raising.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Default, MessageRole

# ================================================================
# Request side
# ================================================================


class ChatMessage(BaseModel):
    role: MessageRole
    content: str


class CompletionRequestBody(BaseModel):
    model: str
    messages: list[ChatMessage]
    stream: bool | None = None
    temperature: float = Default.TEMPERATURE
    top_p: float = Default.TOP_P
    max_tokens: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body; unset optional keys are left out."""
        return self.model_dump(mode="json", exclude_none=True)


# ================================================================
# Response side
# ================================================================


def _as_text(v: Any) -> str | None:
    return v if isinstance(v, str) else None


def _as_dict(v: Any) -> dict[str, Any] | None:
    return v if isinstance(v, dict) else None


def _as_list_of_dicts(v: Any) -> list[dict[str, Any]]:
    if not isinstance(v, list):
        return []
    return [item if isinstance(item, dict) else {} for item in v]


def _as_int(v: Any) -> int | None:
    if isinstance(v, bool) or not isinstance(v, int):
        return None
    return v


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())


class CompletionMessage(_WireModel):
    role: str | None = None
    content: str | None = None

    @field_validator("role", "content", mode="before")
    @classmethod
    def _text_fields(cls, v: Any) -> Any:
        return _as_text(v)


class ChunkDelta(_WireModel):
    role: str | None = None
    content: str | None = None

    @field_validator("role", "content", mode="before")
    @classmethod
    def _text_fields(cls, v: Any) -> Any:
        return _as_text(v)


class CompletionUsage(_WireModel):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None

    @field_validator(
        "prompt_tokens", "completion_tokens", "total_tokens", mode="before"
    )
    @classmethod
    def _counts(cls, v: Any) -> Any:
        return _as_int(v)


class CompletionChoice(_WireModel):
    index: int | None = None
    message: CompletionMessage | None = None
    finish_reason: str | None = None

    @field_validator("index", mode="before")
    @classmethod
    def _index(cls, v: Any) -> Any:
        return _as_int(v)

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, v: Any) -> Any:
        return _as_dict(v)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def _finish_reason(cls, v: Any) -> Any:
        return _as_text(v)


class ChunkChoice(_WireModel):
    index: int | None = None
    delta: ChunkDelta | None = None
    finish_reason: str | None = None

    @field_validator("index", mode="before")
    @classmethod
    def _index(cls, v: Any) -> Any:
        return _as_int(v)

    @field_validator("delta", mode="before")
    @classmethod
    def _delta(cls, v: Any) -> Any:
        return _as_dict(v)

    @field_validator("finish_reason", mode="before")
    @classmethod
    def _finish_reason(cls, v: Any) -> Any:
        return _as_text(v)


class _CompletionEnvelope(_WireModel):
    id: str | None = None
    model: str | None = None
    usage: CompletionUsage | None = None

    @field_validator("id", "model", mode="before")
    @classmethod
    def _text_fields(cls, v: Any) -> Any:
        return _as_text(v)

    @field_validator("usage", mode="before")
    @classmethod
    def _usage(cls, v: Any) -> Any:
        return _as_dict(v)


class ChatCompletion(_CompletionEnvelope):
    """One-shot ``chat.completion`` response."""

    choices: list[CompletionChoice] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def _choices(cls, v: Any) -> Any:
        return _as_list_of_dicts(v)

    @property
    def first_choice(self) -> CompletionChoice | None:
        return self.choices[0] if self.choices else None

    @property
    def content(self) -> str:
        choice = self.first_choice
        if choice is None or choice.message is None:
            return ""
        return choice.message.content or ""


class ChatCompletionChunk(_CompletionEnvelope):
    """One ``chat.completion.chunk`` frame of a streamed response."""

    choices: list[ChunkChoice] = Field(default_factory=list)

    @field_validator("choices", mode="before")
    @classmethod
    def _choices(cls, v: Any) -> Any:
        return _as_list_of_dicts(v)

    @property
    def first_choice(self) -> ChunkChoice | None:
        return self.choices[0] if self.choices else None

    @property
    def delta_text(self) -> str:
        choice = self.first_choice
        if choice is None or choice.delta is None:
            return ""
        return choice.delta.content or ""
