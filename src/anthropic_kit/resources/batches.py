# src/anthropic_kit/resources/batches.py

from anthropic_kit.decoding import decode_json, decode_jsonl
from anthropic_kit.types.batches import (
    CreateMessageBatchParams,
    ListMessageBatchesParams,
    MessageBatch,
    MessageBatchIndividualResponse,
)
from anthropic_kit.types.common import DeletedObject, Page

from .base import ResourceMixin, api_path, require_id


class MessageBatchesMixin(ResourceMixin):
    """Message Batches API under ``/messages/batches``."""

    async def create_message_batch(
        self, params: CreateMessageBatchParams
    ) -> MessageBatch:
        params.consume()
        response = await self._transport.send(
            "POST",
            "/messages/batches",
            operation="create_message_batch",
            json=params.to_body(),
        )
        return decode_json(response.content, MessageBatch)

    async def list_message_batches(
        self, params: ListMessageBatchesParams | None = None
    ) -> Page[MessageBatch]:
        params = params or ListMessageBatchesParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            "/messages/batches",
            operation="list_message_batches",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[MessageBatch])

    async def retrieve_message_batch(self, batch_id: str) -> MessageBatch:
        require_id(batch_id, "batch_id")
        response = await self._transport.send(
            "GET",
            api_path("messages", "batches", batch_id),
            operation="retrieve_message_batch",
        )
        return decode_json(response.content, MessageBatch)

    async def retrieve_message_batch_results(
        self, batch_id: str
    ) -> list[MessageBatchIndividualResponse]:
        """Results of an ended batch, one entry per request, in file order.

        Results are served as JSON Lines; order does not follow the
        requests, so match entries by ``custom_id``.
        """
        require_id(batch_id, "batch_id")
        response = await self._transport.send(
            "GET",
            api_path("messages", "batches", batch_id, "results"),
            operation="retrieve_message_batch_results",
        )
        return decode_jsonl(response.content, MessageBatchIndividualResponse)

    async def cancel_message_batch(self, batch_id: str) -> MessageBatch:
        """Ask the API to stop processing a batch. Cancellation is asynchronous."""
        require_id(batch_id, "batch_id")
        response = await self._transport.send(
            "POST",
            api_path("messages", "batches", batch_id, "cancel"),
            operation="cancel_message_batch",
        )
        return decode_json(response.content, MessageBatch)

    async def delete_message_batch(self, batch_id: str) -> DeletedObject:
        require_id(batch_id, "batch_id")
        response = await self._transport.send(
            "DELETE",
            api_path("messages", "batches", batch_id),
            operation="delete_message_batch",
        )
        return decode_json(response.content, DeletedObject)
