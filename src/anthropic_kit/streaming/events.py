# src/anthropic_kit/streaming/events.py

"""Typed events of a streamed ``POST /messages`` response.

Each frame's event type selects the model its data is decoded into.
Types this version does not know become ``UnknownEvent`` instead of failing.
"""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field, ValidationError

from anthropic_kit.errors import MalformedFrameError
from anthropic_kit.types.common import ApiModel
from anthropic_kit.types.messages import ContentBlock, Message

from .decoder import ServerSentEvent

# ============================================================================
# Deltas
# ============================================================================


class TextDelta(ApiModel):
    type: Literal["text_delta"] = "text_delta"
    text: str


class InputJSONDelta(ApiModel):
    type: Literal["input_json_delta"] = "input_json_delta"
    partial_json: str


class ThinkingDelta(ApiModel):
    type: Literal["thinking_delta"] = "thinking_delta"
    thinking: str


class SignatureDelta(ApiModel):
    type: Literal["signature_delta"] = "signature_delta"
    signature: str


class CitationsDelta(ApiModel):
    type: Literal["citations_delta"] = "citations_delta"
    citation: dict[str, Any]


class UnknownDelta(ApiModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str


KnownDelta = Annotated[
    Union[TextDelta, InputJSONDelta, ThinkingDelta, SignatureDelta, CitationsDelta],
    Field(discriminator="type"),
]

ContentDelta = Annotated[
    Union[KnownDelta, UnknownDelta],
    Field(union_mode="left_to_right"),
]


# ============================================================================
# Events
# ============================================================================


class MessageStartEvent(ApiModel):
    type: Literal["message_start"] = "message_start"
    message: Message


class ContentBlockStartEvent(ApiModel):
    type: Literal["content_block_start"] = "content_block_start"
    index: int
    content_block: ContentBlock


class ContentBlockDeltaEvent(ApiModel):
    type: Literal["content_block_delta"] = "content_block_delta"
    index: int
    delta: ContentDelta


class ContentBlockStopEvent(ApiModel):
    type: Literal["content_block_stop"] = "content_block_stop"
    index: int


class MessageDelta(ApiModel):
    stop_reason: str | None = None
    stop_sequence: str | None = None


class MessageDeltaUsage(ApiModel):
    output_tokens: int
    input_tokens: int | None = None
    cache_creation_input_tokens: int | None = None
    cache_read_input_tokens: int | None = None


class MessageDeltaEvent(ApiModel):
    type: Literal["message_delta"] = "message_delta"
    delta: MessageDelta
    usage: MessageDeltaUsage | None = None


class MessageStopEvent(ApiModel):
    type: Literal["message_stop"] = "message_stop"


class PingEvent(ApiModel):
    type: Literal["ping"] = "ping"


class ErrorDetail(ApiModel):
    type: str
    message: str


class ErrorEvent(ApiModel):
    """The server aborted the stream, e.g. with ``overloaded_error``."""

    type: Literal["error"] = "error"
    error: ErrorDetail


class UnknownEvent(ApiModel):
    """An event type this version does not model."""

    type: Literal["unknown"] = "unknown"
    event_type: str
    data: Any = None


StreamEvent = Union[
    MessageStartEvent,
    ContentBlockStartEvent,
    ContentBlockDeltaEvent,
    ContentBlockStopEvent,
    MessageDeltaEvent,
    MessageStopEvent,
    PingEvent,
    ErrorEvent,
    UnknownEvent,
]

_EVENT_MODELS: dict[str, type[ApiModel]] = {
    "message_start": MessageStartEvent,
    "content_block_start": ContentBlockStartEvent,
    "content_block_delta": ContentBlockDeltaEvent,
    "content_block_stop": ContentBlockStopEvent,
    "message_delta": MessageDeltaEvent,
    "message_stop": MessageStopEvent,
    "ping": PingEvent,
    "error": ErrorEvent,
}

TERMINAL_EVENT_TYPES = frozenset({"message_stop", "error"})


def decode_event(sse: ServerSentEvent) -> StreamEvent:
    """Decode one frame into its typed event.

    The ``event:`` line picks the model; frames without one fall back to
    the ``type`` field of their data.

    Raises:
        MalformedFrameError: The data is not JSON, or does not fit the
            model of a known event type.
    """
    try:
        payload = json.loads(sse.data)
    except ValueError as e:
        raise MalformedFrameError(
            f"Event {sse.event or '<untyped>'} carries invalid JSON data: {e}"
        ) from e

    event_type = sse.event
    if event_type is None and isinstance(payload, dict):
        event_type = payload.get("type")
    if not isinstance(event_type, str):
        return UnknownEvent(event_type="message", data=payload)

    model = _EVENT_MODELS.get(event_type)
    if model is None:
        return UnknownEvent(event_type=event_type, data=payload)

    try:
        return model.model_validate(payload)  # type: ignore[return-value]
    except ValidationError as e:
        detail = e.errors(include_url=False)[0]["msg"]
        raise MalformedFrameError(
            f"Event {event_type} does not match its schema: {detail}"
        ) from e
