# tests/unit/conftest.py

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest

from anthropic_kit import AnthropicClient

API_KEY = "sk-ant-test-key"


class ChunkedByteStream(httpx.AsyncByteStream):
    """Response body delivered chunk by chunk; records what was read."""

    def __init__(self, chunks: list[bytes | Exception]) -> None:
        self._chunks = chunks
        self.chunks_read = 0
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            if self.closed:
                return
            self.chunks_read += 1
            if isinstance(chunk, Exception):
                raise chunk
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


def sse(event: str, data: Any) -> bytes:
    payload = data if isinstance(data, str) else json.dumps(data)
    return f"event: {event}\ndata: {payload}\n\n".encode()


MESSAGE_START = {
    "type": "message_start",
    "message": {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "model": "claude-sonnet-4-20250514",
        "content": [],
        "stop_reason": None,
        "stop_sequence": None,
        "usage": {"input_tokens": 12, "output_tokens": 1},
    },
}


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def make_client() -> Callable[..., AnthropicClient]:
    """Build a client whose requests are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], Any], **kwargs: Any) -> AnthropicClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AnthropicClient(api_key=API_KEY, http_client=http_client, **kwargs)

    return _make


@pytest.fixture
def chunked_body() -> Callable[[list[bytes | Exception]], ChunkedByteStream]:
    return ChunkedByteStream


@pytest.fixture
def message_frames() -> list[bytes]:
    """A complete streamed text message, one frame per chunk."""
    return [
        sse("message_start", MESSAGE_START),
        sse(
            "content_block_start",
            {
                "type": "content_block_start",
                "index": 0,
                "content_block": {"type": "text", "text": ""},
            },
        ),
        sse("ping", {"type": "ping"}),
        sse(
            "content_block_delta",
            {
                "type": "content_block_delta",
                "index": 0,
                "delta": {"type": "text_delta", "text": "Hello"},
            },
        ),
        sse(
            "content_block_delta",
            {
                "type": "content_block_delta",
                "index": 0,
                "delta": {"type": "text_delta", "text": " world"},
            },
        ),
        sse("content_block_stop", {"type": "content_block_stop", "index": 0}),
        sse(
            "message_delta",
            {
                "type": "message_delta",
                "delta": {"stop_reason": "end_turn", "stop_sequence": None},
                "usage": {"output_tokens": 5},
            },
        ),
        sse("message_stop", {"type": "message_stop"}),
    ]


@pytest.fixture
def sse_frame() -> Callable[[str, Any], bytes]:
    return sse


@pytest.fixture
def message_start_payload() -> dict[str, Any]:
    return json.loads(json.dumps(MESSAGE_START))
