# src/anthropic_kit/types/admin.py

"""Types for the Admin API: API keys, users, workspaces, members and invites.

Admin endpoints require an admin API key.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import Field

from anthropic_kit.params import ListParams, RequestParams

from .common import ApiModel


class UserRole(str, Enum):
    USER = "user"
    DEVELOPER = "developer"
    BILLING = "billing"
    ADMIN = "admin"
    CLAUDE_CODE_USER = "claude_code_user"


class WorkspaceRole(str, Enum):
    WORKSPACE_USER = "workspace_user"
    WORKSPACE_DEVELOPER = "workspace_developer"
    WORKSPACE_ADMIN = "workspace_admin"
    WORKSPACE_BILLING = "workspace_billing"


class InviteStatus(str, Enum):
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    DELETED = "deleted"
    PENDING = "pending"


class ApiKeyStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ARCHIVED = "archived"


# Values the server adds later decode as plain strings
OpenUserRole = Annotated[UserRole | str, Field(union_mode="left_to_right")]
OpenWorkspaceRole = Annotated[WorkspaceRole | str, Field(union_mode="left_to_right")]
OpenInviteStatus = Annotated[InviteStatus | str, Field(union_mode="left_to_right")]
OpenApiKeyStatus = Annotated[ApiKeyStatus | str, Field(union_mode="left_to_right")]


# ============================================================================
# Entities
# ============================================================================


class Actor(ApiModel):
    id: str
    type: str


class ApiKey(ApiModel):
    id: str
    type: str = "api_key"
    name: str
    status: OpenApiKeyStatus
    created_at: datetime
    created_by: Actor
    partial_key_hint: str | None = None
    workspace_id: str | None = None


class OrganizationUser(ApiModel):
    id: str
    type: str = "user"
    email: str
    name: str
    role: OpenUserRole
    added_at: datetime


class Workspace(ApiModel):
    id: str
    type: str = "workspace"
    name: str
    display_color: str | None = None
    created_at: datetime
    archived_at: datetime | None = None


class WorkspaceMember(ApiModel):
    type: str = "workspace_member"
    user_id: str
    workspace_id: str
    workspace_role: OpenWorkspaceRole


class Invite(ApiModel):
    id: str
    type: str = "invite"
    email: str
    role: OpenUserRole
    status: OpenInviteStatus
    invited_at: datetime
    expires_at: datetime


# ============================================================================
# API keys
# ============================================================================


@dataclass
class ListApiKeysParams(ListParams):
    status: ApiKeyStatus | None = None
    workspace_id: str | None = None
    created_by_user_id: str | None = None

    def with_status(self, status: ApiKeyStatus) -> "ListApiKeysParams":
        self.status = status
        return self

    def with_workspace_id(self, workspace_id: str) -> "ListApiKeysParams":
        self.workspace_id = workspace_id
        return self

    def with_created_by_user_id(self, user_id: str) -> "ListApiKeysParams":
        self.created_by_user_id = user_id
        return self


@dataclass
class UpdateApiKeyParams(RequestParams):
    name: str | None = None
    status: ApiKeyStatus | None = None

    def with_name(self, name: str) -> "UpdateApiKeyParams":
        self.name = name
        return self

    def with_status(self, status: ApiKeyStatus) -> "UpdateApiKeyParams":
        self.status = status
        return self


# ============================================================================
# Users
# ============================================================================


@dataclass
class ListUsersParams(ListParams):
    email: str | None = None

    def with_email(self, email: str) -> "ListUsersParams":
        self.email = email
        return self


@dataclass
class UpdateUserParams(RequestParams):
    role: UserRole

    _required = ("role",)


# ============================================================================
# Workspaces
# ============================================================================


@dataclass
class ListWorkspacesParams(ListParams):
    include_archived: bool | None = None

    def with_include_archived(self, include: bool = True) -> "ListWorkspacesParams":
        self.include_archived = include
        return self


@dataclass
class CreateWorkspaceParams(RequestParams):
    name: str

    _required = ("name",)


@dataclass
class UpdateWorkspaceParams(RequestParams):
    name: str

    _required = ("name",)


# ============================================================================
# Workspace members
# ============================================================================


@dataclass
class ListWorkspaceMembersParams(ListParams):
    pass


@dataclass
class AddWorkspaceMemberParams(RequestParams):
    user_id: str
    workspace_role: WorkspaceRole

    _required = ("user_id", "workspace_role")


@dataclass
class UpdateWorkspaceMemberParams(RequestParams):
    workspace_role: WorkspaceRole

    _required = ("workspace_role",)


# ============================================================================
# Invites
# ============================================================================


@dataclass
class ListInvitesParams(ListParams):
    pass


@dataclass
class CreateInviteParams(RequestParams):
    email: str
    role: UserRole

    _required = ("email", "role")
