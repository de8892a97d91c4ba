"""Message body inputs: raw text, JSON, typed DTOs and urlencoded forms."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

from typing_extensions import override

from .. import fields
from ..codec import BodyCodec, JsonCodec, PydanticCodec
from ..primitives import Dict, DictInput, Entry, Kvp, KvpInput, build
from ..primitives.dict import _items
from .headers import ContentType


class Body(KvpInput):
    """Set the body text as-is."""

    def __init__(self, text: str):
        super().__init__(Kvp(fields.BODY, text))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> str:
        return message.get(fields.BODY, "")


class JsonBody(DictInput):
    """Serialize ``payload`` as the body and set its Content-Type.

    Serialization happens when the input is applied, so codec failures
    surface from the fold that applies it.
    """

    default_codec = JsonCodec

    def __init__(self, payload: Any, codec: BodyCodec | None = None):
        self._payload = payload
        self._codec = codec

    def _resolve(self) -> BodyCodec:
        return self._codec if self._codec is not None else self.default_codec()

    @override
    def apply(self, base: Dict) -> Dict:
        codec = self._resolve()
        return build(
            Body(codec.serialize(self._payload)),
            ContentType(codec.content_type),
            base=base,
        )

    @classmethod
    def of(cls, message: Mapping[str, str], codec: BodyCodec | None = None) -> Any:
        codec = codec if codec is not None else cls.default_codec()
        return codec.deserialize(Body.of(message))


class DtoBody(JsonBody):
    """Body from a dataclass, pydantic model or typed container."""

    default_codec = PydanticCodec

    @classmethod
    def of(cls, message: Mapping[str, str], shape: Any = None, codec: BodyCodec | None = None) -> Any:
        codec = codec if codec is not None else cls.default_codec()
        return codec.deserialize(Body.of(message), shape)


class FormParams(DictInput):
    """``application/x-www-form-urlencoded`` body."""

    def __init__(self, *kvps: Entry):
        self._pairs = tuple(_items(kvps))

    @override
    def apply(self, base: Dict) -> Dict:
        return build(
            Body(urlencode([tuple(kvp) for kvp in self._pairs])),
            ContentType("application/x-www-form-urlencoded"),
            base=base,
        )

    @classmethod
    def of(cls, message: Mapping[str, str]) -> list[Kvp]:
        return [Kvp(k, v) for k, v in parse_qsl(Body.of(message), keep_blank_values=True)]
