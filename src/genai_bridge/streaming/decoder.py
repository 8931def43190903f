"""
SSE Stream Decoder
==================

Turns the raw byte stream of a streamed chat completion into a lazy
sequence of partial content responses.

Wire format: newline-terminated ``data: <json>`` lines, ended by a
``data: [DONE]`` line. Anything else on the wire is ignored.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
from collections import deque
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable
from enum import Enum
from typing import Any

from pydantic import ValidationError

from genai_bridge.compat import chunk_to_partial_response
from genai_bridge.core import (
    ChatCompletionChunk,
    ErrorType,
    FrameParseError,
    GenerateContentResponse,
    JSONDecodeError,
    LLMError,
    SSEEvent,
    SSEPrefix,
    loads,
)

logger = logging.getLogger(__name__)

DONE_LINE = f"{SSEPrefix.DATA.value}{SSEEvent.DONE.value}"

ReleaseCallback = Callable[[], Awaitable[None]]


class DecoderState(str, Enum):
    AWAITING_BYTES = "awaiting_bytes"
    EMITTING = "emitting"
    DONE = "done"
    ERRORED = "errored"


_TERMINAL = (DecoderState.DONE, DecoderState.ERRORED)


class SSEStreamDecoder:
    """
    Pull-based decoder over an async byte stream.

    Each ``__anext__`` may suspend on the next read of the underlying
    stream. The decoder is single-pass: once it reaches ``DONE`` or
    ``ERRORED`` it only raises ``StopAsyncIteration``.

    The ``release`` callback (or, without one, the byte stream's own
    ``aclose``) runs exactly once, whichever way the stream ends: end of
    input, the ``[DONE]`` frame, a read or decode failure, or ``aclose()``
    by the consumer. Invalid UTF-8 is replaced with U+FFFD rather than
    failing the stream.

    Usage:
        async with SSEStreamDecoder(response.aiter_bytes(), response.aclose) as stream:
            async for partial in stream:
                print(partial.text, end="")
    """

    def __init__(
        self,
        byte_stream: AsyncIterable[bytes],
        release: ReleaseCallback | None = None,
        text_decoder: codecs.IncrementalDecoder | None = None,
    ):
        self._chunks: AsyncIterator[bytes] = byte_stream.__aiter__()
        self._release_callback = release
        self._released = False
        self._text_decoder = text_decoder or codecs.getincrementaldecoder("utf-8")(
            errors="replace"
        )

        self._buffer = ""
        self._lines: deque[str] = deque()

        self.state = DecoderState.AWAITING_BYTES
        self.skipped_frames = 0

    # ------------------------------------------------------------------
    # Async iterator protocol
    # ------------------------------------------------------------------

    def __aiter__(self) -> SSEStreamDecoder:
        return self

    async def __anext__(self) -> GenerateContentResponse:
        try:
            return await self._next_partial()
        except StopAsyncIteration:
            raise
        except LLMError:
            await self._finish(DecoderState.ERRORED)
            raise
        except asyncio.CancelledError:
            await self._finish(DecoderState.ERRORED)
            raise
        except Exception as e:
            await self._finish(DecoderState.ERRORED)
            raise LLMError(
                error_type=ErrorType.STREAMING_ERROR.value,
                error_message=f"Streaming failed: {str(e)}",
            ) from e

    async def _next_partial(self) -> GenerateContentResponse:
        while self.state not in _TERMINAL:
            while self._lines:
                line = self._lines.popleft().strip()
                if not line:
                    continue

                if line == DONE_LINE:
                    await self._finish(DecoderState.DONE)
                    raise StopAsyncIteration

                partial = self._decode_line(line)
                if partial is not None:
                    self.state = DecoderState.EMITTING
                    return partial

            await self._fill()

        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Stop early and release the underlying stream."""
        if self.state not in _TERMINAL:
            await self._finish(DecoderState.DONE)

    async def __aenter__(self) -> SSEStreamDecoder:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    @property
    def released(self) -> bool:
        return self._released

    def __del__(self) -> None:
        """Warn about streams dropped without being drained or closed."""
        if not getattr(self, "_released", True):
            logger.warning(
                "SSEStreamDecoder was not properly closed. Use 'async with' or call aclose()"
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fill(self) -> None:
        """Read one chunk and move its complete lines into the line queue."""
        self.state = DecoderState.AWAITING_BYTES

        try:
            chunk = await self._chunks.__anext__()
        except StopAsyncIteration:
            # Anything still buffered is an unterminated line; drop it.
            await self._finish(DecoderState.DONE)
            return

        self._buffer += self._text_decoder.decode(chunk)

        lines = self._buffer.split("\n")
        self._buffer = lines.pop()
        self._lines.extend(lines)

    def _decode_line(self, line: str) -> GenerateContentResponse | None:
        if not line.startswith(SSEPrefix.DATA.value):
            return None

        payload = line[len(SSEPrefix.DATA.value) :]
        try:
            chunk = ChatCompletionChunk.model_validate(loads(payload))
        except (JSONDecodeError, ValidationError, RecursionError) as e:
            self._skip_frame(FrameParseError(payload, e))
            return None

        return chunk_to_partial_response(chunk)

    def _skip_frame(self, error: FrameParseError) -> None:
        self.skipped_frames += 1
        logger.debug(
            f"{type(error).__name__}: {error.error_message}, data: {error.payload[:200]}"
        )

    async def _finish(self, state: DecoderState) -> None:
        self.state = state
        self._buffer = ""
        self._lines.clear()
        await self._release()

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True

        if self._release_callback is not None:
            await self._release_callback()
        else:
            aclose = getattr(self._chunks, "aclose", None)
            if aclose is not None:
                await aclose()
        logger.debug(f"Released SSE stream in state {self.state.value}")
