# src/anthropic_kit/decoding.py

"""Response decoders.

Lenient by design of the models (unknown fields ignored, optional fields
defaulted); strict about JSON syntax and required fields.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from anthropic_kit.errors import MalformedJSONError, SchemaMismatchError

T = TypeVar("T", bound=BaseModel)


def decode_json(body: bytes | str, model: type[T]) -> T:
    """Decode a JSON response body into ``model``.

    Raises:
        MalformedJSONError: The body is not valid JSON.
        SchemaMismatchError: The JSON does not fit ``model``; ``field`` names
            the first offending location.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raw = body.encode() if isinstance(body, str) else body
        raise MalformedJSONError(
            f"{model.__name__}: response is not valid JSON: {e}", body=raw
        ) from e
    return validate_payload(payload, model)


def decode_jsonl(body: bytes | str, model: type[T]) -> list[T]:
    """Decode a newline-delimited JSON body, one ``model`` per non-empty line."""
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedJSONError(
                f"{model.__name__}: response is not valid UTF-8: {e}", body=body
            ) from e
    else:
        text = body
    return [decode_json(line, model) for line in text.splitlines() if line.strip()]


def validate_payload(payload: Any, model: type[T]) -> T:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise _schema_mismatch(e, model.__name__) from e


def _schema_mismatch(error: ValidationError, model_name: str) -> SchemaMismatchError:
    details = error.errors(include_url=False)
    first = details[0]
    field = ".".join(str(part) for part in first["loc"]) or "<root>"
    if first["type"] == "missing":
        message = f"{model_name}: missing required field '{field}'"
    else:
        message = f"{model_name}: invalid field '{field}': {first['msg']}"
    return SchemaMismatchError(message, field=field, errors=details)
