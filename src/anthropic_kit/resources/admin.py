# src/anthropic_kit/resources/admin.py

"""Admin API under ``/organizations``.

Updates are ``POST`` requests carrying only the fields being changed.
"""

from anthropic_kit.decoding import decode_json
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
from anthropic_kit.types.common import DeletedObject, Page

from .base import ResourceMixin, api_path, require_id

_ORG = "organizations"


class AdminMixin(ResourceMixin):
    # ------------------------------------------------------------------
    # API keys
    # ------------------------------------------------------------------

    async def list_api_keys(
        self, params: ListApiKeysParams | None = None
    ) -> Page[ApiKey]:
        params = params or ListApiKeysParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "api_keys"),
            operation="list_api_keys",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[ApiKey])

    async def get_api_key(self, api_key_id: str) -> ApiKey:
        require_id(api_key_id, "api_key_id")
        response = await self._transport.send(
            "GET", api_path(_ORG, "api_keys", api_key_id), operation="get_api_key"
        )
        return decode_json(response.content, ApiKey)

    async def update_api_key(
        self, api_key_id: str, params: UpdateApiKeyParams
    ) -> ApiKey:
        require_id(api_key_id, "api_key_id")
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "api_keys", api_key_id),
            operation="update_api_key",
            json=params.to_body(),
        )
        return decode_json(response.content, ApiKey)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def list_users(
        self, params: ListUsersParams | None = None
    ) -> Page[OrganizationUser]:
        params = params or ListUsersParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "users"),
            operation="list_users",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[OrganizationUser])

    async def get_user(self, user_id: str) -> OrganizationUser:
        require_id(user_id, "user_id")
        response = await self._transport.send(
            "GET", api_path(_ORG, "users", user_id), operation="get_user"
        )
        return decode_json(response.content, OrganizationUser)

    async def update_user(
        self, user_id: str, params: UpdateUserParams
    ) -> OrganizationUser:
        require_id(user_id, "user_id")
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "users", user_id),
            operation="update_user",
            json=params.to_body(),
        )
        return decode_json(response.content, OrganizationUser)

    async def delete_user(self, user_id: str) -> DeletedObject:
        """Remove a user from the organization."""
        require_id(user_id, "user_id")
        response = await self._transport.send(
            "DELETE", api_path(_ORG, "users", user_id), operation="delete_user"
        )
        return decode_json(response.content, DeletedObject)

    # ------------------------------------------------------------------
    # Workspaces
    # ------------------------------------------------------------------

    async def list_workspaces(
        self, params: ListWorkspacesParams | None = None
    ) -> Page[Workspace]:
        params = params or ListWorkspacesParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "workspaces"),
            operation="list_workspaces",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[Workspace])

    async def get_workspace(self, workspace_id: str) -> Workspace:
        require_id(workspace_id, "workspace_id")
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "workspaces", workspace_id),
            operation="get_workspace",
        )
        return decode_json(response.content, Workspace)

    async def create_workspace(self, params: CreateWorkspaceParams) -> Workspace:
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "workspaces"),
            operation="create_workspace",
            json=params.to_body(),
        )
        return decode_json(response.content, Workspace)

    async def update_workspace(
        self, workspace_id: str, params: UpdateWorkspaceParams
    ) -> Workspace:
        require_id(workspace_id, "workspace_id")
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "workspaces", workspace_id),
            operation="update_workspace",
            json=params.to_body(),
        )
        return decode_json(response.content, Workspace)

    async def archive_workspace(self, workspace_id: str) -> Workspace:
        """Archive a workspace. Its API keys are deactivated by the API."""
        require_id(workspace_id, "workspace_id")
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "workspaces", workspace_id, "archive"),
            operation="archive_workspace",
        )
        return decode_json(response.content, Workspace)

    # ------------------------------------------------------------------
    # Workspace members
    # ------------------------------------------------------------------

    async def list_workspace_members(
        self, workspace_id: str, params: ListWorkspaceMembersParams | None = None
    ) -> Page[WorkspaceMember]:
        require_id(workspace_id, "workspace_id")
        params = params or ListWorkspaceMembersParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "workspaces", workspace_id, "members"),
            operation="list_workspace_members",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[WorkspaceMember])

    async def get_workspace_member(
        self, workspace_id: str, user_id: str
    ) -> WorkspaceMember:
        require_id(workspace_id, "workspace_id")
        require_id(user_id, "user_id")
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "workspaces", workspace_id, "members", user_id),
            operation="get_workspace_member",
        )
        return decode_json(response.content, WorkspaceMember)

    async def add_workspace_member(
        self, workspace_id: str, params: AddWorkspaceMemberParams
    ) -> WorkspaceMember:
        require_id(workspace_id, "workspace_id")
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "workspaces", workspace_id, "members"),
            operation="add_workspace_member",
            json=params.to_body(),
        )
        return decode_json(response.content, WorkspaceMember)

    async def update_workspace_member(
        self, workspace_id: str, user_id: str, params: UpdateWorkspaceMemberParams
    ) -> WorkspaceMember:
        require_id(workspace_id, "workspace_id")
        require_id(user_id, "user_id")
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "workspaces", workspace_id, "members", user_id),
            operation="update_workspace_member",
            json=params.to_body(),
        )
        return decode_json(response.content, WorkspaceMember)

    async def delete_workspace_member(
        self, workspace_id: str, user_id: str
    ) -> DeletedObject:
        require_id(workspace_id, "workspace_id")
        require_id(user_id, "user_id")
        response = await self._transport.send(
            "DELETE",
            api_path(_ORG, "workspaces", workspace_id, "members", user_id),
            operation="delete_workspace_member",
        )
        return decode_json(response.content, DeletedObject)

    # ------------------------------------------------------------------
    # Invites
    # ------------------------------------------------------------------

    async def list_invites(
        self, params: ListInvitesParams | None = None
    ) -> Page[Invite]:
        params = params or ListInvitesParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            api_path(_ORG, "invites"),
            operation="list_invites",
            params=params.to_query(),
        )
        return decode_json(response.content, Page[Invite])

    async def get_invite(self, invite_id: str) -> Invite:
        require_id(invite_id, "invite_id")
        response = await self._transport.send(
            "GET", api_path(_ORG, "invites", invite_id), operation="get_invite"
        )
        return decode_json(response.content, Invite)

    async def create_invite(self, params: CreateInviteParams) -> Invite:
        params.consume()
        response = await self._transport.send(
            "POST",
            api_path(_ORG, "invites"),
            operation="create_invite",
            json=params.to_body(),
        )
        return decode_json(response.content, Invite)

    async def delete_invite(self, invite_id: str) -> DeletedObject:
        require_id(invite_id, "invite_id")
        response = await self._transport.send(
            "DELETE", api_path(_ORG, "invites", invite_id), operation="delete_invite"
        )
        return decode_json(response.content, DeletedObject)
