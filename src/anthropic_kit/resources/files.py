# src/anthropic_kit/resources/files.py

from anthropic_kit.config import FILES_API_BETA
from anthropic_kit.decoding import decode_json
from anthropic_kit.types.common import DeletedObject, Page
from anthropic_kit.types.files import (
    FileMetadata,
    ListFilesParams,
    UploadFileParams,
)

from .base import ResourceMixin, api_path, require_id


class FilesMixin(ResourceMixin):
    """Files API (beta). Every request carries the files beta header."""

    async def list_files(
        self, params: ListFilesParams | None = None
    ) -> Page[FileMetadata]:
        params = params or ListFilesParams()
        params.consume()
        response = await self._transport.send(
            "GET",
            "/files",
            operation="list_files",
            params=params.to_query(),
            beta=FILES_API_BETA,
        )
        return decode_json(response.content, Page[FileMetadata])

    async def get_file_metadata(self, file_id: str) -> FileMetadata:
        require_id(file_id, "file_id")
        response = await self._transport.send(
            "GET",
            api_path("files", file_id),
            operation="get_file_metadata",
            beta=FILES_API_BETA,
        )
        return decode_json(response.content, FileMetadata)

    async def upload_file(self, params: UploadFileParams) -> FileMetadata:
        """Upload as ``multipart/form-data``; the file is sent under ``file``."""
        params.consume()
        response = await self._transport.send(
            "POST",
            "/files",
            operation="upload_file",
            files=params.to_files(),
            beta=FILES_API_BETA,
        )
        return decode_json(response.content, FileMetadata)

    async def download_file(self, file_id: str) -> bytes:
        """Raw content of a downloadable file (files created by tools or skills)."""
        require_id(file_id, "file_id")
        response = await self._transport.send(
            "GET",
            api_path("files", file_id, "content"),
            operation="download_file",
            beta=FILES_API_BETA,
        )
        return response.content

    async def delete_file(self, file_id: str) -> DeletedObject:
        require_id(file_id, "file_id")
        response = await self._transport.send(
            "DELETE",
            api_path("files", file_id),
            operation="delete_file",
            beta=FILES_API_BETA,
        )
        return decode_json(response.content, DeletedObject)
