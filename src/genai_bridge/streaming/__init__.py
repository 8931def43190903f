"""
Streaming
=========

Incremental decoding of server-sent event chat-completion streams.
"""

from .decoder import DONE_LINE, DecoderState, SSEStreamDecoder

__all__ = ["DONE_LINE", "DecoderState", "SSEStreamDecoder"]
