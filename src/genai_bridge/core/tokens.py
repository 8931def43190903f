"""
Token Estimation
================

Character-length heuristic used by ``count_tokens``. This is not a
tokenizer: it assumes roughly four characters per token and never calls
out to the provider.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from .enums import Default
from .models import Content, CountTokensResponse


def extract_text(contents: Any) -> str:
    """
    Concatenate every text part of ``contents``.

    Args:
        contents: A plain string, or a sequence of turns (``Content`` models
            or their dict form). Anything else yields ``""``.

    Returns:
        The text of all text parts in order; non-text parts contribute nothing.
    """
    if isinstance(contents, str):
        return contents
    if not isinstance(contents, (list, tuple)):
        return ""

    chunks: list[str] = []
    for turn in contents:
        if isinstance(turn, Content):
            chunks.append(turn.text)
        elif isinstance(turn, dict):
            try:
                chunks.append(Content.model_validate(turn).text)
            except ValidationError:
                # Malformed turns count as empty, as in request conversion
                continue
    return "".join(chunks)


def estimate_tokens(contents: Any) -> int:
    """Ceiling of character count divided by four."""
    return math.ceil(len(extract_text(contents)) / Default.CHARS_PER_TOKEN)


def count_tokens_for(contents: Any) -> CountTokensResponse:
    return CountTokensResponse(total_tokens=estimate_tokens(contents))
