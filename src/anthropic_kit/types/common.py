from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for response entities.

    Immutable. Unknown fields are ignored so newer API revisions still decode.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


class Page(ApiModel, Generic[T]):
    """One page of a list endpoint.

    ``last_id`` is the cursor for the next page (``after_id``),
    ``first_id`` the cursor for the previous one (``before_id``).
    """

    data: list[T]
    has_more: bool
    first_id: str | None = None
    last_id: str | None = None


class DeletedObject(ApiModel):
    """Acknowledgement returned by delete endpoints."""

    id: str
    type: str
