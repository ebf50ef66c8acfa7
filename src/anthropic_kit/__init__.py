# src/anthropic_kit/__init__.py

"""Async client for the Anthropic API.

Typed request builders in, typed responses out. One HTTP request per call:

- No retries: wrap calls with ``anthropic_kit.retry.retrying`` if wanted
- No hidden I/O: credentials are passed in, never read from the environment
- Streams are single pass and release their connection when closed

Example:
    >>> from anthropic_kit import AnthropicClient, CreateMessageParams, MessageParam
    >>>
    >>> async with AnthropicClient(api_key="sk-ant-...") as client:
    ...     params = CreateMessageParams(
    ...         model="claude-sonnet-4-20250514",
    ...         messages=[MessageParam.user("Hello!")],
    ...         max_tokens=256,
    ...     ).with_stream()
    ...     async with await client.stream_message(params) as stream:
    ...         async for text in stream.text_stream():
    ...             print(text, end="")
"""

from .client import AnthropicClient
from .config import ClientConfig
from .errors import (
    AnthropicError,
    APIError,
    AuthenticationError,
    BadRequestError,
    DecodeError,
    InternalServerError,
    MalformedFrameError,
    MalformedJSONError,
    NotFoundError,
    OverloadedError,
    ParamsAlreadySentError,
    PermissionDeniedError,
    RateLimitError,
    RequestTooLargeError,
    RequestValidationError,
    SchemaMismatchError,
    StreamError,
    TransportError,
    TransportTimeoutError,
    TruncatedStreamError,
)
from .factory import create_client
from .pagination import iterate_items, paginate
from .resources import (
    AdminClient,
    FileClient,
    MessageBatchClient,
    MessageClient,
    ModelClient,
)
from .streaming import MessageStream, StreamEvent
from .types import (
    CountMessageTokensParams,
    CreateMessageBatchParams,
    CreateMessageParams,
    ListFilesParams,
    ListMessageBatchesParams,
    ListModelsParams,
    Message,
    MessageBatchRequest,
    MessageParam,
    Page,
    UploadFileParams,
)

__all__ = [
    # Factory
    "create_client",
    # Client
    "AnthropicClient",
    "MessageStream",
    # Protocols
    "MessageClient",
    "ModelClient",
    "MessageBatchClient",
    "FileClient",
    "AdminClient",
    # Config
    "ClientConfig",
    # Pagination
    "paginate",
    "iterate_items",
    # Types
    "CreateMessageParams",
    "CountMessageTokensParams",
    "MessageParam",
    "Message",
    "StreamEvent",
    "ListModelsParams",
    "CreateMessageBatchParams",
    "MessageBatchRequest",
    "ListMessageBatchesParams",
    "ListFilesParams",
    "UploadFileParams",
    "Page",
    # Errors
    "AnthropicError",
    "TransportError",
    "TransportTimeoutError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RequestTooLargeError",
    "RateLimitError",
    "InternalServerError",
    "OverloadedError",
    "DecodeError",
    "MalformedJSONError",
    "SchemaMismatchError",
    "StreamError",
    "MalformedFrameError",
    "TruncatedStreamError",
    "RequestValidationError",
    "ParamsAlreadySentError",
]
