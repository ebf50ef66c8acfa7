# src/anthropic_kit/streaming/stream.py

import logging
from collections import deque
from collections.abc import AsyncIterator
from time import monotonic
from types import TracebackType

import httpx

from anthropic_kit.errors import (
    AnthropicError,
    MalformedFrameError,
    StreamError,
    TransportError,
    TransportTimeoutError,
    TruncatedStreamError,
)
from anthropic_kit.observability import names
from anthropic_kit.observability.base import MetricsHook, NoOpMetricsHook
from anthropic_kit.types.messages import Message

from .accumulator import MessageAccumulator
from .decoder import ServerSentEvent, SSEDecoder
from .events import (
    TERMINAL_EVENT_TYPES,
    ContentBlockDeltaEvent,
    StreamEvent,
    TextDelta,
    UnknownEvent,
    decode_event,
)

logger = logging.getLogger(__name__)


class MessageStream:
    """Events of one streamed message, in the order the server sent them.

    Single pass. Ends after ``message_stop`` or ``error``; a connection that
    closes before either raises ``TruncatedStreamError``. Leaving the
    ``async with`` block (or calling ``aclose``) closes the connection at
    once; no further bytes are read.

    Example:
        >>> async with await client.stream_message(params) as stream:
        ...     async for text in stream.text_stream():
        ...         print(text, end="")
    """

    def __init__(
        self,
        response: httpx.Response,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._response = response
        self._chunks: AsyncIterator[bytes] = response.aiter_bytes()
        self._decoder = SSEDecoder()
        self._pending: deque[ServerSentEvent] = deque()
        self._accumulator = MessageAccumulator()
        self._failure: AnthropicError | None = None
        self._accumulate_error: StreamError | None = None
        self._eof = False
        self._terminated = False
        self._closed = False
        self._start = monotonic()
        self._events_seen = 0
        self.metrics_hook = metrics_hook

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "MessageStream":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __aiter__(self) -> "MessageStream":
        return self

    async def __anext__(self) -> StreamEvent:
        while True:
            if self._closed:
                raise StopAsyncIteration

            if self._pending:
                event = self._decode(self._pending.popleft())
                if event is not None:
                    return event
                continue

            if self._failure is not None:
                failure = self._failure
                await self.aclose()
                raise failure

            if self._eof:
                await self._finish_at_eof()
                continue

            await self._read_chunk()

    def _decode(self, sse: ServerSentEvent) -> StreamEvent | None:
        try:
            event = decode_event(sse)
        except MalformedFrameError as e:
            self._pending.clear()
            self._failure = e
            return None

        self._record(event)
        if self._accumulate_error is None:
            try:
                self._accumulator.add(event)
            except StreamError as e:
                # Iteration goes on; only get_final_message needs the fold
                self._accumulate_error = e
        if event.type in TERMINAL_EVENT_TYPES:
            # Nothing after a terminal event belongs to this message
            self._terminated = True
            self._pending.clear()
            self._failure = None
            self._eof = True
        return event

    async def _read_chunk(self) -> None:
        try:
            chunk = await self._chunks.__anext__()
        except StopAsyncIteration:
            self._eof = True
            self._pending.extend(self._decoder.close())
            if self._decoder.error is not None:
                self._failure = self._decoder.error
            return
        except httpx.TimeoutException as e:
            self._fail(TransportTimeoutError(f"Stream read timed out: {e}"), e)
            return
        except httpx.HTTPError as e:
            self._fail(TransportError(f"Stream read failed: {e}"), e)
            return

        self._pending.extend(self._decoder.feed(chunk))
        if self._decoder.error is not None:
            self._failure = self._decoder.error

    def _fail(self, failure: AnthropicError, cause: BaseException) -> None:
        failure.__cause__ = cause
        self._failure = failure

    async def _finish_at_eof(self) -> None:
        if self._terminated:
            await self.aclose()
            return
        logger.warning(
            "Stream closed after %d events without a terminal event",
            self._events_seen,
        )
        self.metrics_hook.increment(names.STREAM_TRUNCATIONS_TOTAL)
        self._failure = TruncatedStreamError(
            f"Connection closed after {self._events_seen} events without message_stop"
        )

    def _record(self, event: StreamEvent) -> None:
        if self._events_seen == 0:
            self.metrics_hook.record_latency(
                names.STREAM_FIRST_EVENT_DURATION, 1000 * (monotonic() - self._start)
            )
        self._events_seen += 1
        label = event.event_type if isinstance(event, UnknownEvent) else event.type
        self.metrics_hook.increment(names.STREAM_EVENTS_TOTAL, labels={"event": label})

    async def aclose(self) -> None:
        """Stop reading and release the connection. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._pending.clear()
        await self._response.aclose()

    async def text_stream(self) -> AsyncIterator[str]:
        """Yield only the text deltas of the remaining events."""
        async for event in self:
            if isinstance(event, ContentBlockDeltaEvent) and isinstance(
                event.delta, TextDelta
            ):
                yield event.delta.text

    async def get_final_message(self) -> Message:
        """Consume the rest of the stream and return the accumulated message."""
        async for _ in self:
            pass
        if self._accumulate_error is not None:
            raise self._accumulate_error
        return self._accumulator.snapshot()
