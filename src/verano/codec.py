"""Body codecs.

A codec turns a structured payload into body text and back. Codecs are
plain values handed to the body inputs that need them; nothing here holds
process-wide configuration.
"""

from __future__ import annotations

import json
import types
from typing import Any, Protocol, Union, get_args, get_origin

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import SerializationError


def _runtime_types(shape: Any) -> tuple[type, ...]:
    # list[int] checks as list, int | None as (int, NoneType)
    origin = get_origin(shape)
    if origin is Union or origin is types.UnionType:
        return tuple(t for arg in get_args(shape) for t in _runtime_types(arg))
    return (origin or shape,)


class BodyCodec(Protocol):
    content_type: str

    def serialize(self, payload: Any) -> str: ...

    def deserialize(self, text: str, shape: Any = None) -> Any: ...


class JsonCodec:
    """Compact JSON via the standard library."""

    content_type = "application/json; charset=utf-8"

    def serialize(self, payload: Any) -> str:
        try:
            return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"cannot encode {type(payload).__name__} as JSON: {e}") from e

    def deserialize(self, text: str, shape: Any = None) -> Any:
        try:
            value = json.loads(text)
        except ValueError as e:
            raise SerializationError(f"malformed JSON body: {e}") from e
        if shape is not None and not isinstance(value, _runtime_types(shape)):
            raise SerializationError(
                f"expected JSON {getattr(shape, '__name__', shape)}, got {type(value).__name__}"
            )
        return value


class PydanticCodec:
    """JSON for dataclasses, pydantic models and typed containers.

    Unknown fields in incoming bodies are ignored.
    """

    content_type = "application/json; charset=utf-8"

    def serialize(self, payload: Any) -> str:
        try:
            return TypeAdapter(type(payload)).dump_json(payload).decode("utf-8")
        except (PydanticSerializationError, PydanticUserError) as e:
            raise SerializationError(f"cannot serialize {type(payload).__name__}: {e}") from e

    def deserialize(self, text: str, shape: Any = None) -> Any:
        if shape is None:
            shape = Any
        try:
            return TypeAdapter(shape).validate_json(text)
        except ValidationError as e:
            raise SerializationError(f"body does not match {shape!r}: {e}") from e
        except PydanticUserError as e:
            raise SerializationError(f"unsupported target shape {shape!r}: {e}") from e
