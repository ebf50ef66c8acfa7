# tests/unit/client/test_client.py

import json
from typing import Any

import httpx
import pytest

from anthropic_kit import (
    AdminClient,
    AnthropicClient,
    ClientConfig,
    FileClient,
    MessageBatchClient,
    MessageClient,
    ModelClient,
    create_client,
)
from anthropic_kit.config import FILES_API_BETA
from anthropic_kit.errors import (
    InternalServerError,
    NotFoundError,
    ParamsAlreadySentError,
    RequestValidationError,
)
from anthropic_kit.types import (
    AddWorkspaceMemberParams,
    CountMessageTokensParams,
    CreateInviteParams,
    CreateMessageBatchParams,
    CreateMessageParams,
    CreateWorkspaceParams,
    ListApiKeysParams,
    ListFilesParams,
    ListWorkspaceMembersParams,
    MessageBatchRequest,
    MessageParam,
    UpdateApiKeyParams,
    UpdateUserParams,
    UpdateWorkspaceMemberParams,
    UpdateWorkspaceParams,
    UploadFileParams,
    UserRole,
    WorkspaceRole,
)

MODEL = "claude-sonnet-4-20250514"

MESSAGE = {
    "id": "msg_01",
    "type": "message",
    "role": "assistant",
    "model": MODEL,
    "content": [{"type": "text", "text": "Hello!"}],
    "stop_reason": "end_turn",
    "stop_sequence": None,
    "usage": {"input_tokens": 9, "output_tokens": 2},
}

BATCH = {
    "id": "msgbatch_01",
    "type": "message_batch",
    "processing_status": "in_progress",
    "request_counts": {"processing": 1},
    "created_at": "2025-01-01T00:00:00Z",
    "expires_at": "2025-01-02T00:00:00Z",
}

FILE = {
    "id": "file_01",
    "type": "file",
    "filename": "notes.txt",
    "mime_type": "text/plain",
    "size_bytes": 5,
    "created_at": "2025-01-01T00:00:00Z",
}

WORKSPACE = {
    "id": "wrkspc_01",
    "type": "workspace",
    "name": "Research",
    "display_color": "#6C5BB9",
    "created_at": "2025-01-01T00:00:00Z",
    "archived_at": None,
}

MEMBER = {
    "type": "workspace_member",
    "user_id": "user_01",
    "workspace_id": "wrkspc_01",
    "workspace_role": "workspace_developer",
}

USER = {
    "id": "user_01",
    "type": "user",
    "email": "dev@example.com",
    "name": "Dev",
    "role": "developer",
    "added_at": "2025-01-01T00:00:00Z",
}

INVITE = {
    "id": "invite_01",
    "type": "invite",
    "email": "new@example.com",
    "role": "user",
    "status": "pending",
    "invited_at": "2025-01-01T00:00:00Z",
    "expires_at": "2025-01-22T00:00:00Z",
}

API_KEY = {
    "id": "apikey_01",
    "type": "api_key",
    "name": "ci",
    "status": "active",
    "created_at": "2025-01-01T00:00:00Z",
    "created_by": {"id": "user_01", "type": "user"},
    "partial_key_hint": "sk-ant-api03-R2D...igAA",
    "workspace_id": None,
}


def page_of(*items: dict[str, Any]) -> dict[str, Any]:
    return {
        "data": list(items),
        "has_more": False,
        "first_id": None,
        "last_id": None,
    }


class Recorder:
    """MockTransport handler that answers by (method, path) and keeps requests."""

    def __init__(self, routes: dict[tuple[str, str], Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(
                404,
                json={"type": "error", "error": {"type": "not_found_error", "message": str(key)}},
            )
        payload = self.routes[key]
        if isinstance(payload, bytes):
            return httpx.Response(200, content=payload)
        return httpx.Response(200, json=payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def message_params() -> CreateMessageParams:
    return CreateMessageParams(
        model=MODEL, messages=[MessageParam.user("Hi")], max_tokens=64
    )


class TestMessages:
    @pytest.mark.asyncio
    async def test_create_message(self, make_client) -> None:
        recorder = Recorder({("POST", "/v1/messages"): MESSAGE})
        client = make_client(recorder)

        message = await client.create_message(message_params().with_temperature(0.0))

        assert message.text == "Hello!"
        assert recorder.last_json() == {
            "model": MODEL,
            "messages": [{"role": "user", "content": "Hi"}],
            "max_tokens": 64,
            "temperature": 0.0,
        }

    @pytest.mark.asyncio
    async def test_create_message_rejects_stream(self, make_client) -> None:
        recorder = Recorder({})
        client = make_client(recorder)

        with pytest.raises(RequestValidationError, match="stream_message"):
            await client.create_message(message_params().with_stream())

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_params_sent_once(self, make_client) -> None:
        client = make_client(Recorder({("POST", "/v1/messages"): MESSAGE}))
        params = message_params()
        await client.create_message(params)

        with pytest.raises(ParamsAlreadySentError):
            await client.create_message(params)

    @pytest.mark.asyncio
    async def test_count_tokens(self, make_client) -> None:
        recorder = Recorder({("POST", "/v1/messages/count_tokens"): {"input_tokens": 14}})
        client = make_client(recorder)

        result = await client.count_tokens(
            CountMessageTokensParams(model=MODEL, messages=[MessageParam.user("Hi")])
        )

        assert result.input_tokens == 14
        assert "max_tokens" not in recorder.last_json()

    @pytest.mark.asyncio
    async def test_stream_message(self, make_client, chunked_body, message_frames) -> None:
        """Test that streaming asks for SSE and yields typed events."""
        seen: list[httpx.Request] = []
        body = chunked_body(message_frames)

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, headers={"content-type": "text/event-stream"}, stream=body
            )

        client = make_client(handler)
        async with await client.stream_message(message_params().with_stream()) as stream:
            message = await stream.get_final_message()

        assert message.text == "Hello world"
        assert seen[0].headers["accept"] == "text/event-stream"
        assert json.loads(seen[0].content)["stream"] is True
        assert body.closed

    @pytest.mark.asyncio
    async def test_stream_message_requires_stream_flag(self, make_client) -> None:
        client = make_client(Recorder({}))

        with pytest.raises(RequestValidationError, match="with_stream"):
            await client.stream_message(message_params())

    @pytest.mark.asyncio
    async def test_failed_call_leaves_client_usable(self, make_client) -> None:
        """Test that an API error does not poison later calls."""
        responses = iter(
            [
                httpx.Response(
                    500,
                    json={"type": "error", "error": {"type": "api_error", "message": "oops"}},
                ),
                httpx.Response(200, json=MESSAGE),
            ]
        )
        client = make_client(lambda request: next(responses))

        with pytest.raises(InternalServerError, match="oops"):
            await client.create_message(message_params())
        message = await client.create_message(message_params())

        assert message.id == "msg_01"


class TestModels:
    @pytest.mark.asyncio
    async def test_list_and_get(self, make_client) -> None:
        info = {
            "id": MODEL,
            "display_name": "Claude Sonnet 4",
            "created_at": "2025-05-14T00:00:00Z",
            "type": "model",
        }
        recorder = Recorder(
            {("GET", "/v1/models"): page_of(info), ("GET", f"/v1/models/{MODEL}"): info}
        )
        client = make_client(recorder)

        page = await client.list_models()
        model = await client.get_model(MODEL)

        assert page.data[0].id == MODEL
        assert model.display_name == "Claude Sonnet 4"

    @pytest.mark.asyncio
    async def test_get_model_not_found(self, make_client) -> None:
        client = make_client(Recorder({}))

        with pytest.raises(NotFoundError):
            await client.get_model("claude-unknown")

    @pytest.mark.asyncio
    async def test_empty_id_rejected(self, make_client) -> None:
        recorder = Recorder({})
        client = make_client(recorder)

        with pytest.raises(RequestValidationError):
            await client.get_model("")

        assert recorder.requests == []


class TestMessageBatches:
    @pytest.mark.asyncio
    async def test_batch_lifecycle(self, make_client) -> None:
        results = (
            json.dumps(
                {"custom_id": "r1", "result": {"type": "succeeded", "message": MESSAGE}}
            )
            + "\n"
        ).encode()
        recorder = Recorder(
            {
                ("POST", "/v1/messages/batches"): BATCH,
                ("GET", "/v1/messages/batches"): page_of(BATCH),
                ("GET", "/v1/messages/batches/msgbatch_01"): BATCH,
                ("GET", "/v1/messages/batches/msgbatch_01/results"): results,
                ("POST", "/v1/messages/batches/msgbatch_01/cancel"): {
                    **BATCH,
                    "processing_status": "canceling",
                },
                ("DELETE", "/v1/messages/batches/msgbatch_01"): {
                    "id": "msgbatch_01",
                    "type": "message_batch_deleted",
                },
            }
        )
        client = make_client(recorder)

        created = await client.create_message_batch(
            CreateMessageBatchParams(
                requests=[MessageBatchRequest(custom_id="r1", params=message_params())]
            )
        )
        assert recorder.last_json()["requests"][0]["custom_id"] == "r1"
        assert created.request_counts.processing == 1

        listed = await client.list_message_batches()
        retrieved = await client.retrieve_message_batch("msgbatch_01")
        entries = await client.retrieve_message_batch_results("msgbatch_01")
        canceled = await client.cancel_message_batch("msgbatch_01")
        deleted = await client.delete_message_batch("msgbatch_01")

        assert listed.data[0].id == "msgbatch_01"
        assert not retrieved.is_ended
        assert entries[0].result.message is not None
        assert entries[0].result.message.text == "Hello!"
        assert canceled.processing_status == "canceling"
        assert deleted.type == "message_batch_deleted"


class TestFiles:
    @pytest.mark.asyncio
    async def test_files_carry_beta_header(self, make_client) -> None:
        recorder = Recorder(
            {
                ("GET", "/v1/files"): page_of(FILE),
                ("GET", "/v1/files/file_01"): FILE,
                ("POST", "/v1/files"): FILE,
                ("GET", "/v1/files/file_01/content"): b"hello",
                ("DELETE", "/v1/files/file_01"): {"id": "file_01", "type": "file_deleted"},
            }
        )
        client = make_client(recorder)

        listed = await client.list_files(ListFilesParams().with_limit(5))
        metadata = await client.get_file_metadata("file_01")
        content = await client.download_file("file_01")
        deleted = await client.delete_file("file_01")

        assert listed.data[0].filename == "notes.txt"
        assert metadata.size_bytes == 5
        assert content == b"hello"
        assert deleted.id == "file_01"
        assert all(r.headers["anthropic-beta"] == FILES_API_BETA for r in recorder.requests)

    @pytest.mark.asyncio
    async def test_upload_is_multipart(self, make_client) -> None:
        recorder = Recorder({("POST", "/v1/files"): FILE})
        client = make_client(recorder)

        uploaded = await client.upload_file(
            UploadFileParams(filename="notes.txt", content=b"hello")
        )

        request = recorder.last
        assert uploaded.id == "file_01"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="notes.txt"' in request.content
        assert b"hello" in request.content

    @pytest.mark.asyncio
    async def test_list_files_rejects_both_cursors(self, make_client) -> None:
        recorder = Recorder({})
        client = make_client(recorder)

        with pytest.raises(RequestValidationError):
            await client.list_files(ListFilesParams(before_id="a", after_id="b"))

        assert recorder.requests == []


class TestAdmin:
    @pytest.mark.asyncio
    async def test_api_keys(self, make_client) -> None:
        recorder = Recorder(
            {
                ("GET", "/v1/organizations/api_keys"): page_of(API_KEY),
                ("GET", "/v1/organizations/api_keys/apikey_01"): API_KEY,
                ("POST", "/v1/organizations/api_keys/apikey_01"): {**API_KEY, "name": "ci-2"},
            }
        )
        client = make_client(recorder)

        listed = await client.list_api_keys(ListApiKeysParams().with_workspace_id("wrkspc_01"))
        assert recorder.last.url.params["workspace_id"] == "wrkspc_01"
        key = await client.get_api_key("apikey_01")
        updated = await client.update_api_key(
            "apikey_01", UpdateApiKeyParams().with_name("ci-2")
        )

        assert listed.data[0].created_by.id == "user_01"
        assert key.status.value == "active"
        assert updated.name == "ci-2"
        assert recorder.last_json() == {"name": "ci-2"}

    @pytest.mark.asyncio
    async def test_users(self, make_client) -> None:
        recorder = Recorder(
            {
                ("GET", "/v1/organizations/users"): page_of(USER),
                ("GET", "/v1/organizations/users/user_01"): USER,
                ("POST", "/v1/organizations/users/user_01"): {**USER, "role": "admin"},
                ("DELETE", "/v1/organizations/users/user_01"): {
                    "id": "user_01",
                    "type": "user_deleted",
                },
            }
        )
        client = make_client(recorder)

        listed = await client.list_users()
        user = await client.get_user("user_01")
        updated = await client.update_user("user_01", UpdateUserParams(role=UserRole.ADMIN))
        assert recorder.last_json() == {"role": "admin"}
        deleted = await client.delete_user("user_01")

        assert listed.data[0].email == "dev@example.com"
        assert user.role is UserRole.DEVELOPER
        assert updated.role is UserRole.ADMIN
        assert deleted.type == "user_deleted"

    @pytest.mark.asyncio
    async def test_workspaces(self, make_client) -> None:
        archived = {**WORKSPACE, "archived_at": "2025-02-01T00:00:00Z"}
        recorder = Recorder(
            {
                ("GET", "/v1/organizations/workspaces"): page_of(WORKSPACE),
                ("GET", "/v1/organizations/workspaces/wrkspc_01"): WORKSPACE,
                ("POST", "/v1/organizations/workspaces"): WORKSPACE,
                ("POST", "/v1/organizations/workspaces/wrkspc_01"): {
                    **WORKSPACE,
                    "name": "Research v2",
                },
                ("POST", "/v1/organizations/workspaces/wrkspc_01/archive"): archived,
            }
        )
        client = make_client(recorder)

        listed = await client.list_workspaces()
        fetched = await client.get_workspace("wrkspc_01")
        created = await client.create_workspace(CreateWorkspaceParams(name="Research"))
        assert recorder.last_json() == {"name": "Research"}
        renamed = await client.update_workspace(
            "wrkspc_01", UpdateWorkspaceParams(name="Research v2")
        )
        archived_ws = await client.archive_workspace("wrkspc_01")

        assert listed.data[0].id == fetched.id == created.id
        assert renamed.name == "Research v2"
        assert archived_ws.archived_at is not None

    @pytest.mark.asyncio
    async def test_workspace_members(self, make_client) -> None:
        base = "/v1/organizations/workspaces/wrkspc_01/members"
        recorder = Recorder(
            {
                ("GET", base): page_of(MEMBER),
                ("GET", f"{base}/user_01"): MEMBER,
                ("POST", base): MEMBER,
                ("POST", f"{base}/user_01"): {**MEMBER, "workspace_role": "workspace_admin"},
                ("DELETE", f"{base}/user_01"): {
                    "id": "user_01",
                    "type": "workspace_member_deleted",
                },
            }
        )
        client = make_client(recorder)

        listed = await client.list_workspace_members(
            "wrkspc_01", ListWorkspaceMembersParams().with_limit(10)
        )
        assert recorder.last.url.params["limit"] == "10"
        member = await client.get_workspace_member("wrkspc_01", "user_01")
        added = await client.add_workspace_member(
            "wrkspc_01",
            AddWorkspaceMemberParams(
                user_id="user_01", workspace_role=WorkspaceRole.WORKSPACE_DEVELOPER
            ),
        )
        assert recorder.last_json() == {
            "user_id": "user_01",
            "workspace_role": "workspace_developer",
        }
        promoted = await client.update_workspace_member(
            "wrkspc_01",
            "user_01",
            UpdateWorkspaceMemberParams(workspace_role=WorkspaceRole.WORKSPACE_ADMIN),
        )
        removed = await client.delete_workspace_member("wrkspc_01", "user_01")

        assert listed.data[0].user_id == member.user_id == added.user_id
        assert promoted.workspace_role is WorkspaceRole.WORKSPACE_ADMIN
        assert removed.type == "workspace_member_deleted"

    @pytest.mark.asyncio
    async def test_invites(self, make_client) -> None:
        recorder = Recorder(
            {
                ("GET", "/v1/organizations/invites"): page_of(INVITE),
                ("GET", "/v1/organizations/invites/invite_01"): INVITE,
                ("POST", "/v1/organizations/invites"): INVITE,
                ("DELETE", "/v1/organizations/invites/invite_01"): {
                    "id": "invite_01",
                    "type": "invite_deleted",
                },
            }
        )
        client = make_client(recorder)

        listed = await client.list_invites()
        invite = await client.get_invite("invite_01")
        created = await client.create_invite(
            CreateInviteParams(email="new@example.com", role=UserRole.USER)
        )
        deleted = await client.delete_invite("invite_01")

        assert listed.data[0].status.value == "pending"
        assert invite.email == created.email == "new@example.com"
        assert deleted.type == "invite_deleted"

    @pytest.mark.asyncio
    async def test_ids_are_path_encoded(self, make_client) -> None:
        recorder = Recorder({})
        client = make_client(recorder)

        with pytest.raises(NotFoundError):
            await client.get_user("../api_keys")

        assert recorder.last.url.raw_path == b"/v1/organizations/users/..%2Fapi_keys"


class TestClientLifecycle:
    def test_satisfies_capability_protocols(self, make_client) -> None:
        client: Any = make_client(Recorder({}))

        narrow: list[Any] = [MessageClient, ModelClient, MessageBatchClient, FileClient, AdminClient]
        for protocol in narrow:
            for name in vars(protocol):
                if not name.startswith("_"):
                    assert callable(getattr(client, name)), name

    @pytest.mark.asyncio
    async def test_async_context_closes_owned_client(self) -> None:
        async with AnthropicClient(api_key="sk-ant-test-key") as client:
            transport_client = client._transport._client

        assert transport_client.is_closed

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self) -> None:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200))
        )

        async with AnthropicClient(api_key="k", http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    def test_create_client_from_config(self) -> None:
        config = ClientConfig(api_key="sk-ant-test-key", base_url="http://proxy/v1")

        client = create_client(config)

        assert isinstance(client, AnthropicClient)
        assert client.config == config

    def test_empty_api_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="api_key"):
            AnthropicClient(api_key="")
