# src/anthropic_kit/types/files.py

"""Types for the Files API (beta)."""

import mimetypes
from dataclasses import dataclass
from datetime import datetime

from anthropic_kit.errors import RequestValidationError
from anthropic_kit.params import ListParams, RequestParams

from .common import ApiModel

DEFAULT_MIME_TYPE = "application/octet-stream"


class FileMetadata(ApiModel):
    """File object as returned by the Files API."""

    id: str
    type: str = "file"
    filename: str
    mime_type: str
    size_bytes: int
    created_at: datetime
    downloadable: bool = False


@dataclass
class ListFilesParams(ListParams):
    """Cursor parameters for ``GET /files``. Only one direction per request."""

    def validate(self) -> None:
        super().validate()
        if self.before_id is not None and self.after_id is not None:
            raise RequestValidationError(
                "ListFilesParams accepts before_id or after_id, not both",
                field="before_id",
            )


@dataclass
class UploadFileParams(RequestParams):
    """A file to upload. The MIME type is guessed from the filename unless set."""

    filename: str
    content: bytes
    mime_type: str | None = None

    _required = ("filename", "content")

    def with_mime_type(self, mime_type: str) -> "UploadFileParams":
        self.mime_type = mime_type
        return self

    def to_files(self) -> dict[str, tuple[str, bytes, str]]:
        mime_type = (
            self.mime_type
            or mimetypes.guess_type(self.filename)[0]
            or DEFAULT_MIME_TYPE
        )
        return {"file": (self.filename, self.content, mime_type)}
