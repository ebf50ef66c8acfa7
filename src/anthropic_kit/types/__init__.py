# src/anthropic_kit/types/__init__.py

"""Request parameters and response entities, one module per API family."""

from .admin import (
    Actor,
    AddWorkspaceMemberParams,
    ApiKey,
    ApiKeyStatus,
    CreateInviteParams,
    CreateWorkspaceParams,
    Invite,
    InviteStatus,
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
    UserRole,
    Workspace,
    WorkspaceMember,
    WorkspaceRole,
)
from .batches import (
    CreateMessageBatchParams,
    ListMessageBatchesParams,
    MessageBatch,
    MessageBatchIndividualResponse,
    MessageBatchRequest,
    MessageBatchResult,
    RequestCounts,
)
from .common import ApiModel, DeletedObject, Page
from .files import FileMetadata, ListFilesParams, UploadFileParams
from .messages import (
    ContentBlock,
    ContentBlockParam,
    CountMessageTokensParams,
    CreateMessageParams,
    DocumentBlockParam,
    ImageBlockParam,
    Message,
    MessageParam,
    MessageTokensCount,
    Metadata,
    RedactedThinkingBlock,
    Role,
    TextBlock,
    TextBlockParam,
    ThinkingBlock,
    ThinkingConfig,
    ToolChoice,
    ToolParam,
    ToolResultBlockParam,
    ToolUseBlock,
    ToolUseBlockParam,
    UnknownBlock,
    Usage,
)
from .models import ListModelsParams, ModelInfo

__all__ = [
    # Common
    "ApiModel",
    "Page",
    "DeletedObject",
    # Messages
    "Role",
    "MessageParam",
    "ContentBlockParam",
    "TextBlockParam",
    "ImageBlockParam",
    "DocumentBlockParam",
    "ToolUseBlockParam",
    "ToolResultBlockParam",
    "ToolParam",
    "ToolChoice",
    "ThinkingConfig",
    "Metadata",
    "CreateMessageParams",
    "CountMessageTokensParams",
    "Message",
    "MessageTokensCount",
    "ContentBlock",
    "TextBlock",
    "ToolUseBlock",
    "ThinkingBlock",
    "RedactedThinkingBlock",
    "UnknownBlock",
    "Usage",
    # Models
    "ModelInfo",
    "ListModelsParams",
    # Batches
    "MessageBatchRequest",
    "CreateMessageBatchParams",
    "ListMessageBatchesParams",
    "MessageBatch",
    "RequestCounts",
    "MessageBatchResult",
    "MessageBatchIndividualResponse",
    # Files
    "FileMetadata",
    "ListFilesParams",
    "UploadFileParams",
    # Admin
    "Actor",
    "ApiKey",
    "ApiKeyStatus",
    "ListApiKeysParams",
    "UpdateApiKeyParams",
    "OrganizationUser",
    "UserRole",
    "ListUsersParams",
    "UpdateUserParams",
    "Workspace",
    "ListWorkspacesParams",
    "CreateWorkspaceParams",
    "UpdateWorkspaceParams",
    "WorkspaceMember",
    "WorkspaceRole",
    "ListWorkspaceMembersParams",
    "AddWorkspaceMemberParams",
    "UpdateWorkspaceMemberParams",
    "Invite",
    "InviteStatus",
    "ListInvitesParams",
    "CreateInviteParams",
]
