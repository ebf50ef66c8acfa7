# src/anthropic_kit/resources/base.py

"""Capability protocols, one per API family.

``AnthropicClient`` implements all of them. Code that only needs one
family should depend on the narrowest protocol, e.g. ``ModelClient``.
"""

from typing import Protocol
from urllib.parse import quote

from anthropic_kit.errors import RequestValidationError
from anthropic_kit.observability.base import MetricsHook
from anthropic_kit.streaming.stream import MessageStream
from anthropic_kit.transport import Transport
from anthropic_kit.types.admin import (
    AddWorkspaceMemberParams,
    ApiKey,
    CreateInviteParams,
    CreateWorkspaceParams,
    Invite,
    ListApiKeysParams,
    ListInvitesParams,
    ListUsersParams,
    ListWorkspaceMembersParams,
    ListWorkspacesParams,
    OrganizationUser,
    UpdateApiKeyParams,
    UpdateUserParams,
    UpdateWorkspaceMemberParams,
    UpdateWorkspaceParams,
    Workspace,
    WorkspaceMember,
)
from anthropic_kit.types.batches import (
    CreateMessageBatchParams,
    ListMessageBatchesParams,
    MessageBatch,
    MessageBatchIndividualResponse,
)
from anthropic_kit.types.common import DeletedObject, Page
from anthropic_kit.types.files import FileMetadata, ListFilesParams, UploadFileParams
from anthropic_kit.types.messages import (
    CountMessageTokensParams,
    CreateMessageParams,
    Message,
    MessageTokensCount,
)
from anthropic_kit.types.models import ListModelsParams, ModelInfo


def require_id(value: str, name: str) -> str:
    """Reject empty path identifiers before they collapse the URL."""
    if not value or not value.strip():
        raise RequestValidationError(f"{name} must be a non-empty string", field=name)
    return value


def api_path(*segments: str) -> str:
    """Join path segments, percent-encoding each one."""
    return "/" + "/".join(quote(segment, safe="") for segment in segments)


class ResourceMixin:
    """Shared state of every operations mixin."""

    _transport: Transport
    metrics_hook: MetricsHook


# ============================================================================
# Capability protocols
# ============================================================================


class MessageClient(Protocol):
    async def create_message(self, params: CreateMessageParams) -> Message: ...

    async def count_tokens(
        self, params: CountMessageTokensParams
    ) -> MessageTokensCount: ...

    async def stream_message(self, params: CreateMessageParams) -> MessageStream: ...


class ModelClient(Protocol):
    async def list_models(
        self, params: ListModelsParams | None = None
    ) -> Page[ModelInfo]: ...

    async def get_model(self, model_id: str) -> ModelInfo: ...


class MessageBatchClient(Protocol):
    async def create_message_batch(
        self, params: CreateMessageBatchParams
    ) -> MessageBatch: ...

    async def list_message_batches(
        self, params: ListMessageBatchesParams | None = None
    ) -> Page[MessageBatch]: ...

    async def retrieve_message_batch(self, batch_id: str) -> MessageBatch: ...

    async def retrieve_message_batch_results(
        self, batch_id: str
    ) -> list[MessageBatchIndividualResponse]: ...

    async def cancel_message_batch(self, batch_id: str) -> MessageBatch: ...

    async def delete_message_batch(self, batch_id: str) -> DeletedObject: ...


class FileClient(Protocol):
    async def list_files(
        self, params: ListFilesParams | None = None
    ) -> Page[FileMetadata]: ...

    async def get_file_metadata(self, file_id: str) -> FileMetadata: ...

    async def upload_file(self, params: UploadFileParams) -> FileMetadata: ...

    async def download_file(self, file_id: str) -> bytes: ...

    async def delete_file(self, file_id: str) -> DeletedObject: ...


class AdminClient(Protocol):
    """Organization administration. Requires an admin API key."""

    async def list_api_keys(
        self, params: ListApiKeysParams | None = None
    ) -> Page[ApiKey]: ...

    async def get_api_key(self, api_key_id: str) -> ApiKey: ...

    async def update_api_key(
        self, api_key_id: str, params: UpdateApiKeyParams
    ) -> ApiKey: ...

    async def list_users(
        self, params: ListUsersParams | None = None
    ) -> Page[OrganizationUser]: ...

    async def get_user(self, user_id: str) -> OrganizationUser: ...

    async def update_user(
        self, user_id: str, params: UpdateUserParams
    ) -> OrganizationUser: ...

    async def delete_user(self, user_id: str) -> DeletedObject: ...

    async def list_workspaces(
        self, params: ListWorkspacesParams | None = None
    ) -> Page[Workspace]: ...

    async def get_workspace(self, workspace_id: str) -> Workspace: ...

    async def create_workspace(self, params: CreateWorkspaceParams) -> Workspace: ...

    async def update_workspace(
        self, workspace_id: str, params: UpdateWorkspaceParams
    ) -> Workspace: ...

    async def archive_workspace(self, workspace_id: str) -> Workspace: ...

    async def list_workspace_members(
        self, workspace_id: str, params: ListWorkspaceMembersParams | None = None
    ) -> Page[WorkspaceMember]: ...

    async def get_workspace_member(
        self, workspace_id: str, user_id: str
    ) -> WorkspaceMember: ...

    async def add_workspace_member(
        self, workspace_id: str, params: AddWorkspaceMemberParams
    ) -> WorkspaceMember: ...

    async def update_workspace_member(
        self, workspace_id: str, user_id: str, params: UpdateWorkspaceMemberParams
    ) -> WorkspaceMember: ...

    async def delete_workspace_member(
        self, workspace_id: str, user_id: str
    ) -> DeletedObject: ...

    async def list_invites(
        self, params: ListInvitesParams | None = None
    ) -> Page[Invite]: ...

    async def get_invite(self, invite_id: str) -> Invite: ...

    async def create_invite(self, params: CreateInviteParams) -> Invite: ...

    async def delete_invite(self, invite_id: str) -> DeletedObject: ...
