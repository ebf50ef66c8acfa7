# src/anthropic_kit/resources/messages.py

import logging

from anthropic_kit.decoding import decode_json
from anthropic_kit.errors import RequestValidationError
from anthropic_kit.streaming.stream import MessageStream
from anthropic_kit.types.messages import (
    CountMessageTokensParams,
    CreateMessageParams,
    Message,
    MessageTokensCount,
)

from .base import ResourceMixin

logger = logging.getLogger(__name__)


class MessagesMixin(ResourceMixin):
    """Messages API: ``POST /messages`` and ``POST /messages/count_tokens``."""

    async def create_message(self, params: CreateMessageParams) -> Message:
        """Send a conversation and return the complete response message.

        Raises:
            RequestValidationError: ``params`` asks for streaming (use
                ``stream_message``) or misses a required field.
            ParamsAlreadySentError: ``params`` was sent before.
        """
        if params.stream:
            raise RequestValidationError(
                "create_message does not stream; use stream_message", field="stream"
            )
        params.consume()
        response = await self._transport.send(
            "POST", "/messages", operation="create_message", json=params.to_body()
        )
        message = decode_json(response.content, Message)
        logger.debug(
            "Message %s: stop_reason=%s, output_tokens=%d",
            message.id,
            message.stop_reason,
            message.usage.output_tokens,
        )
        return message

    async def count_tokens(self, params: CountMessageTokensParams) -> MessageTokensCount:
        params.consume()
        response = await self._transport.send(
            "POST",
            "/messages/count_tokens",
            operation="count_tokens",
            json=params.to_body(),
        )
        return decode_json(response.content, MessageTokensCount)

    async def stream_message(self, params: CreateMessageParams) -> MessageStream:
        """Send a conversation and return its events as they arrive.

        ``params`` must have been built with ``with_stream()``. The returned
        stream owns the connection; use it as an async context manager.

        Raises:
            RequestValidationError: ``params.stream`` is not set.
        """
        if params.stream is not True:
            raise RequestValidationError(
                "stream_message requires params built with with_stream()",
                field="stream",
            )
        params.consume()
        response = await self._transport.open_stream(
            "POST", "/messages", operation="stream_message", json=params.to_body()
        )
        return MessageStream(response, self.metrics_hook)
