# src/anthropic_kit/types/batches.py

"""Types for the Message Batches API."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from anthropic_kit.errors import RequestValidationError
from anthropic_kit.params import ListParams, RequestParams

from .common import ApiModel
from .messages import CreateMessageParams, Message


@dataclass
class MessageBatchRequest:
    """One message request inside a batch, addressed by ``custom_id``."""

    custom_id: str
    params: CreateMessageParams


@dataclass
class CreateMessageBatchParams(RequestParams):
    requests: list[MessageBatchRequest]

    _required = ("requests",)

    def with_request(self, request: MessageBatchRequest) -> "CreateMessageBatchParams":
        self.requests.append(request)
        return self

    def validate(self) -> None:
        super().validate()
        seen: set[str] = set()
        for request in self.requests:
            if not request.custom_id:
                raise RequestValidationError(
                    "MessageBatchRequest.custom_id is required", field="custom_id"
                )
            if request.custom_id in seen:
                raise RequestValidationError(
                    f"Duplicate custom_id in batch: {request.custom_id}",
                    field="custom_id",
                )
            seen.add(request.custom_id)
            if request.params.stream:
                raise RequestValidationError(
                    "Batched message requests cannot stream", field="stream"
                )
            request.params.validate()


@dataclass
class ListMessageBatchesParams(ListParams):
    """Cursor parameters for ``GET /messages/batches``."""


class RequestCounts(ApiModel):
    processing: int = 0
    succeeded: int = 0
    errored: int = 0
    canceled: int = 0
    expired: int = 0


class MessageBatch(ApiModel):
    id: str
    type: str = "message_batch"
    processing_status: str
    request_counts: RequestCounts
    created_at: datetime
    expires_at: datetime
    ended_at: datetime | None = None
    archived_at: datetime | None = None
    cancel_initiated_at: datetime | None = None
    results_url: str | None = None

    @property
    def is_ended(self) -> bool:
        return self.processing_status == "ended"


class MessageBatchResult(ApiModel):
    """Outcome of one request: succeeded, errored, canceled or expired."""

    type: str
    message: Message | None = None
    error: dict[str, Any] | None = None


class MessageBatchIndividualResponse(ApiModel):
    """One line of a batch's ``.jsonl`` results."""

    custom_id: str
    result: MessageBatchResult
