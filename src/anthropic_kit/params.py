# src/anthropic_kit/params.py

"""Base classes for request parameter builders.

A params value is built from its required fields, refined with chained
``with_*`` setters (each mutates and returns the same value), and consumed
by exactly one send on the client.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from anthropic_kit.errors import ParamsAlreadySentError, RequestValidationError

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 1000

_L = TypeVar("_L", bound="ListParams")


def to_wire(value: Any) -> Any:
    """Convert params values to JSON-ready data, dropping unset (None) fields."""
    if isinstance(value, RequestParams):
        return value.to_body()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_wire(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items() if v is not None}
    return value


@dataclass
class RequestParams:
    """Base for every request parameter builder.

    Subclasses list their mandatory fields in ``_required``; ``validate``
    only checks those are present. Value ranges are left to the API.
    """

    _required: ClassVar[tuple[str, ...]] = ()

    def validate(self) -> None:
        for name in self._required:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise RequestValidationError(
                    f"{type(self).__name__}.{name} is required", field=name
                )

    def consume(self) -> None:
        """Validate and mark as sent. A second call raises."""
        if getattr(self, "_sent", False):
            raise ParamsAlreadySentError(
                f"{type(self).__name__} was already sent; build a new value"
            )
        self.validate()
        self._sent = True

    @property
    def sent(self) -> bool:
        return getattr(self, "_sent", False)

    def to_body(self) -> dict[str, Any]:
        return {
            f.name: to_wire(getattr(self, f.name))
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class ListParams(RequestParams):
    """Cursor parameters shared by every list endpoint."""

    before_id: str | None = None
    after_id: str | None = None
    limit: int | None = None

    def with_before_id(self: _L, before_id: str) -> _L:
        self.before_id = before_id
        return self

    def with_after_id(self: _L, after_id: str) -> _L:
        self.after_id = after_id
        return self

    def with_limit(self: _L, limit: int) -> _L:
        """Set the page size, clamped to the API's 1-1000 range."""
        self.limit = max(MIN_PAGE_LIMIT, min(limit, MAX_PAGE_LIMIT))
        return self

    def to_query(self) -> dict[str, Any]:
        return self.to_body()

    def next_page(
        self: _L, *, after_id: str | None = None, before_id: str | None = None
    ) -> _L:
        """Fresh, unsent copy positioned at another cursor."""
        return dataclasses.replace(self, after_id=after_id, before_id=before_id)
