"""
Content Models
==============

Pydantic V2 models for the Gemini-style request/response surface the bridge
presents to its callers: role-tagged turns made of parts, generation config,
and typed response objects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import ContentRole

_CAMEL = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
)


class Blob(BaseModel):
    model_config = _CAMEL

    mime_type: str | None = None
    data: str | bytes | None = None


class FileData(BaseModel):
    model_config = _CAMEL

    mime_type: str | None = None
    file_uri: str | None = None


class Part(BaseModel):
    """
    One piece of a turn.

    Only text parts are forwarded; inline data, file references and any
    other part kinds are accepted but carry no text.
    """

    model_config = _CAMEL

    text: str | None = None
    inline_data: Blob | None = None
    file_data: FileData | None = None

    @property
    def is_text(self) -> bool:
        return bool(self.text)


class Content(BaseModel):
    """A role-tagged turn."""

    role: str | None = None
    parts: list[Part] = Field(default_factory=list)

    @field_validator("parts", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def text(self) -> str:
        """Concatenated text of all text parts, in order."""
        return "".join(p.text for p in self.parts if p.text)


def _number_or_none(v: Any) -> Any:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return v


class GenerateContentConfig(BaseModel):
    """
    Generation parameters.

    Unknown keys are ignored and values of the wrong type are dropped, so a
    sloppy config degrades to the provider defaults instead of failing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    temperature: float | None = None
    top_p: float | None = None
    max_output_tokens: int | None = None

    @field_validator("temperature", "top_p", mode="before")
    @classmethod
    def _drop_non_numeric(cls, v: Any) -> Any:
        return _number_or_none(v)

    @field_validator("max_output_tokens", mode="before")
    @classmethod
    def _drop_non_integer(cls, v: Any) -> Any:
        v = _number_or_none(v)
        if isinstance(v, float):
            return int(v) if v.is_integer() else None
        return v


ContentsType = str | list[Content]


class GenerateContentParameters(BaseModel):
    model: str | None = None
    contents: ContentsType
    config: GenerateContentConfig | None = None


class CountTokensParameters(BaseModel):
    model: str | None = None
    contents: ContentsType


class CountTokensResponse(BaseModel):
    model_config = _CAMEL

    total_tokens: int


class EmbedContentParameters(BaseModel):
    model: str | None = None
    contents: Any = None


class UsageMetadata(BaseModel):
    model_config = _CAMEL

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None


class Candidate(BaseModel):
    model_config = _CAMEL

    content: Content = Field(
        default_factory=lambda: Content(role=ContentRole.MODEL.value)
    )
    finish_reason: str | None = None
    index: int | None = None


class GenerateContentResponse(BaseModel):
    """
    Response in the caller's schema.

    ``data`` keeps the provider's raw JSON for callers that need fields the
    bridge does not map. Tool calls and code execution are never produced.
    """

    model_config = _CAMEL

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata | None = None
    model_version: str | None = None
    response_id: str | None = None
    data: dict[str, Any] | None = None

    @property
    def text(self) -> str:
        if not self.candidates:
            return ""
        return self.candidates[0].content.text

    @property
    def finish_reason(self) -> str | None:
        if not self.candidates:
            return None
        return self.candidates[0].finish_reason

    @property
    def function_calls(self) -> list[Any]:
        return []

    @property
    def executable_code(self) -> None:
        return None

    @property
    def code_execution_result(self) -> None:
        return None

    @classmethod
    def from_text(
        cls, text: str, finish_reason: str | None = None, **kwargs: Any
    ) -> GenerateContentResponse:
        """Single-candidate model response carrying one text part."""
        candidate = Candidate(
            content=Content(role=ContentRole.MODEL.value, parts=[Part(text=text)]),
            finish_reason=finish_reason,
            index=kwargs.pop("index", None),
        )
        return cls(candidates=[candidate], **kwargs)
