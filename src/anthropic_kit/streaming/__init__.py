# src/anthropic_kit/streaming/__init__.py

"""Streaming layer for anthropic-kit.

Bytes from the connection go through three stages:

- SSEDecoder: byte chunks -> ServerSentEvent frames
- decode_event: frame -> typed event
- MessageStream: async iteration, cancellation and message accumulation
"""

from .accumulator import MessageAccumulator
from .decoder import DecoderState, ServerSentEvent, SSEDecoder
from .events import (
    CitationsDelta,
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    ContentBlockStopEvent,
    ContentDelta,
    ErrorDetail,
    ErrorEvent,
    InputJSONDelta,
    MessageDelta,
    MessageDeltaEvent,
    MessageDeltaUsage,
    MessageStartEvent,
    MessageStopEvent,
    PingEvent,
    SignatureDelta,
    StreamEvent,
    TextDelta,
    ThinkingDelta,
    UnknownDelta,
    UnknownEvent,
    decode_event,
)
from .stream import MessageStream

__all__ = [
    # Stream
    "MessageStream",
    "MessageAccumulator",
    # Frame decoder
    "SSEDecoder",
    "ServerSentEvent",
    "DecoderState",
    "decode_event",
    # Events
    "StreamEvent",
    "MessageStartEvent",
    "ContentBlockStartEvent",
    "ContentBlockDeltaEvent",
    "ContentBlockStopEvent",
    "MessageDeltaEvent",
    "MessageDelta",
    "MessageDeltaUsage",
    "MessageStopEvent",
    "PingEvent",
    "ErrorEvent",
    "ErrorDetail",
    "UnknownEvent",
    # Deltas
    "ContentDelta",
    "TextDelta",
    "InputJSONDelta",
    "ThinkingDelta",
    "SignatureDelta",
    "CitationsDelta",
    "UnknownDelta",
]
