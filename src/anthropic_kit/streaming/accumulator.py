import json
from typing import Any

from anthropic_kit.decoding import validate_payload
from anthropic_kit.errors import StreamError
from anthropic_kit.types.messages import Message

from .events import (
    CitationsDelta,
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    ContentBlockStopEvent,
    ErrorEvent,
    InputJSONDelta,
    MessageDeltaEvent,
    MessageStartEvent,
    SignatureDelta,
    StreamEvent,
    TextDelta,
    ThinkingDelta,
)


class MessageAccumulator:
    """Folds stream events into the ``Message`` a non-streaming call would return."""

    def __init__(self) -> None:
        self._message: dict[str, Any] | None = None
        self._blocks: dict[int, dict[str, Any]] = {}
        self._partial_json: dict[int, list[str]] = {}
        self.error: ErrorEvent | None = None

    def add(self, event: StreamEvent) -> None:
        if isinstance(event, MessageStartEvent):
            self._message = event.message.model_dump()
            self._blocks = {}
            self._partial_json = {}
        elif isinstance(event, ContentBlockStartEvent):
            self._blocks[event.index] = event.content_block.model_dump()
        elif isinstance(event, ContentBlockDeltaEvent):
            self._apply_delta(event)
        elif isinstance(event, ContentBlockStopEvent):
            self._finish_block(event.index)
        elif isinstance(event, MessageDeltaEvent):
            self._apply_message_delta(event)
        elif isinstance(event, ErrorEvent):
            self.error = event

    def _apply_delta(self, event: ContentBlockDeltaEvent) -> None:
        block = self._blocks.get(event.index)
        if block is None:
            raise StreamError(f"Delta for content block {event.index} before its start")
        delta = event.delta
        if isinstance(delta, TextDelta):
            block["text"] = block.get("text", "") + delta.text
        elif isinstance(delta, InputJSONDelta):
            self._partial_json.setdefault(event.index, []).append(delta.partial_json)
        elif isinstance(delta, ThinkingDelta):
            block["thinking"] = block.get("thinking", "") + delta.thinking
        elif isinstance(delta, SignatureDelta):
            block["signature"] = delta.signature
        elif isinstance(delta, CitationsDelta):
            block["citations"] = (block.get("citations") or []) + [delta.citation]

    def _finish_block(self, index: int) -> None:
        parts = self._partial_json.pop(index, None)
        if not parts or index not in self._blocks:
            return
        try:
            self._blocks[index]["input"] = json.loads("".join(parts))
        except ValueError as e:
            raise StreamError(
                f"Tool input of content block {index} is not valid JSON"
            ) from e

    def _apply_message_delta(self, event: MessageDeltaEvent) -> None:
        if self._message is None:
            raise StreamError("message_delta received before message_start")
        self._message["stop_reason"] = event.delta.stop_reason
        self._message["stop_sequence"] = event.delta.stop_sequence
        if event.usage is not None:
            usage = self._message.setdefault("usage", {})
            for key, value in event.usage.model_dump(exclude_none=True).items():
                usage[key] = value

    def snapshot(self) -> Message:
        """The message as accumulated so far."""
        if self.error is not None:
            detail = self.error.error
            raise StreamError(f"Stream aborted by server: {detail.type}: {detail.message}")
        if self._message is None:
            raise StreamError("Stream carried no message_start event")
        message = dict(self._message)
        message["content"] = [self._blocks[i] for i in sorted(self._blocks)]
        return validate_payload(message, Message)
