# src/anthropic_kit/streaming/decoder.py

"""Server-sent-event frame decoder.

Turns arbitrarily split byte chunks into whole frames:

- Lines end with ``\\n``, ``\\r\\n`` or ``\\r``; a trailing ``\\r`` is held
  until the next chunk shows whether ``\\n`` follows
- Bytes are decoded per complete line, so split UTF-8 sequences are safe
- A blank line ends a frame; ``data`` lines are joined with ``\\n``
- A frame with an ``event`` line but no ``data`` line is malformed
- A frame still open when the input closes is dropped
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from anthropic_kit.errors import MalformedFrameError, StreamError

logger = logging.getLogger(__name__)

_LINE_END = re.compile(rb"\r\n|\r|\n")
_BOM = b"\xef\xbb\xbf"


class DecoderState(str, Enum):
    AWAITING_FRAME = "awaiting_frame"
    FRAME_TYPE_READ = "frame_type_read"
    FRAME_EMITTED = "frame_emitted"
    DONE = "done"
    ERRORED = "errored"


@dataclass(frozen=True)
class ServerSentEvent:
    """One complete frame."""

    data: str
    event: str | None = None
    id: str | None = None
    retry: int | None = None


class SSEDecoder:
    """Incremental frame decoder.

    ``feed`` never raises for a malformed frame: it returns the frames that
    preceded it and records the failure in ``error``, so callers keep the
    server's order. Any later ``feed`` or ``close`` raises that error.
    """

    def __init__(self) -> None:
        self._buffer = b""
        self._started = False
        self._event: str | None = None
        self._data: list[str] = []
        self._id: str | None = None
        self._retry: int | None = None
        self.state = DecoderState.AWAITING_FRAME
        self.error: StreamError | None = None

    @property
    def has_partial_frame(self) -> bool:
        return bool(self._buffer) or self._event is not None or bool(self._data)

    def feed(self, chunk: bytes) -> list[ServerSentEvent]:
        self._check_open()
        if not chunk:
            return []

        if not self._started:
            self._buffer += chunk
            if len(self._buffer) < len(_BOM) and _BOM.startswith(self._buffer):
                return []
            self._started = True
            if self._buffer.startswith(_BOM):
                self._buffer = self._buffer[len(_BOM) :]
        else:
            self._buffer += chunk

        return self._process(self._take_lines())

    def close(self) -> list[ServerSentEvent]:
        """Signal end of input. Returns frames completed by a held line ending."""
        self._check_open()
        lines: list[bytes] = []
        if self._buffer.endswith(b"\r"):
            lines = self._take_lines(final=True)
        events = self._process(lines)
        if self.error is None:
            if self.has_partial_frame:
                logger.debug("Discarding unterminated frame at end of stream")
            self._buffer = b""
            self._reset_frame()
            self.state = DecoderState.DONE
        return events

    def _check_open(self) -> None:
        if self.state is DecoderState.ERRORED and self.error is not None:
            raise self.error
        if self.state is DecoderState.DONE:
            raise StreamError("Decoder is closed")

    def _take_lines(self, final: bool = False) -> list[bytes]:
        buf = self._buffer
        lines: list[bytes] = []
        pos = 0
        for match in _LINE_END.finditer(buf):
            # "\r" at the very end may be the first half of "\r\n"
            if not final and match.group() == b"\r" and match.end() == len(buf):
                break
            lines.append(buf[pos : match.start()])
            pos = match.end()
        self._buffer = buf[pos:]
        return lines

    def _process(self, lines: list[bytes]) -> list[ServerSentEvent]:
        events: list[ServerSentEvent] = []
        for raw in lines:
            try:
                event = self._process_line(raw)
            except MalformedFrameError as e:
                self.state = DecoderState.ERRORED
                self.error = e
                break
            if event is not None:
                events.append(event)
        return events

    def _process_line(self, raw: bytes) -> ServerSentEvent | None:
        if self.state is DecoderState.FRAME_EMITTED:
            self.state = DecoderState.AWAITING_FRAME

        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedFrameError(f"Frame line is not valid UTF-8: {e}") from e

        if not line:
            return self._dispatch()
        if line.startswith(":"):
            return None

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]

        if name == "event":
            self._event = value
            self.state = DecoderState.FRAME_TYPE_READ
        elif name == "data":
            self._data.append(value)
        elif name == "id":
            if "\0" not in value:
                self._id = value
        elif name == "retry":
            if value.isdigit():
                self._retry = int(value)
        return None

    def _dispatch(self) -> ServerSentEvent | None:
        if not self._data:
            if self._event is not None:
                raise MalformedFrameError(f"Frame '{self._event}' has no data line")
            self._reset_frame()
            return None

        event = ServerSentEvent(
            data="\n".join(self._data),
            event=self._event,
            id=self._id,
            retry=self._retry,
        )
        self._reset_frame()
        self.state = DecoderState.FRAME_EMITTED
        return event

    def _reset_frame(self) -> None:
        self._event = None
        self._data = []
        self._id = None
        self._retry = None
        if self.state is not DecoderState.ERRORED:
            self.state = DecoderState.AWAITING_FRAME
