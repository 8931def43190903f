# tests/conftest.py
"""
Shared fixtures for genai-bridge tests.
Provides fake byte streams, SSE frame builders and httpx mock transports,
so no test touches the network.
"""

import json

import httpx
import pytest
import pytest_asyncio

from genai_bridge.clients import OpenRouterContentGenerator

# ---------------------------------------------------------------------------
# SSE helpers
# ---------------------------------------------------------------------------


def sse_frame(content=None, finish_reason=None, **extra):
    """Build one `data: {...}\\n` line carrying a chat-completion chunk."""
    delta = {} if content is None else {"content": content}
    choice = {"index": 0, "delta": delta}
    if finish_reason is not None:
        choice["finish_reason"] = finish_reason
    payload = {"object": "chat.completion.chunk", "choices": [choice], **extra}
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n".encode("utf-8")


DONE_FRAME = b"data: [DONE]\n"


def split_every(data, size):
    """Split bytes into fixed-size pieces (last one may be shorter)."""
    return [data[i : i + size] for i in range(0, len(data), size)]


class FakeByteStream:
    """Async byte iterator that records how far it was read and how often it was released."""

    def __init__(self, chunks, fail_after=None):
        self.chunks = list(chunks)
        self.fail_after = fail_after
        self.reads = 0
        self.release_count = 0

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.fail_after is not None and self.reads >= self.fail_after:
            raise ConnectionResetError("connection dropped")
        if self.reads >= len(self.chunks):
            raise StopAsyncIteration
        chunk = self.chunks[self.reads]
        self.reads += 1
        return chunk

    async def release(self):
        self.release_count += 1


@pytest.fixture
def sse():
    """Expose the SSE helpers to tests."""

    class _SSE:
        frame = staticmethod(sse_frame)
        done = DONE_FRAME
        split = staticmethod(split_every)
        stream = FakeByteStream

    return _SSE


# ---------------------------------------------------------------------------
# HTTP transport mocks
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def _record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest_asyncio.fixture
async def make_generator():
    """Factory: build a generator whose HTTP calls go to `handler`."""
    created = []

    def _make(handler, **kwargs):
        transport = RecordingTransport(handler)
        generator = OpenRouterContentGenerator(
            api_key="test-key", transport=transport, **kwargs
        )
        generator.transport = transport
        created.append(generator)
        return generator

    yield _make

    for generator in created:
        await generator.close()
