"""HTTP method input and shortcuts."""

from __future__ import annotations

from collections.abc import Mapping

from .. import fields
from ..primitives import DictInput, Inputs, Kvp, KvpInput
from .path import Path


class Method(KvpInput):
    """Set the request method (upper-cased)."""

    def __init__(self, name: str):
        super().__init__(Kvp(fields.METHOD, name.upper()))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> str:
        return message.get(fields.METHOD, "GET")


class _MethodShortcut(Inputs):
    method = "GET"

    def __init__(self, path: str | DictInput | None = None, *inputs: DictInput):
        parts: list[DictInput] = [Method(self.method)]
        if isinstance(path, DictInput):
            parts.append(path)
        elif path is not None:
            parts.append(Path(path))
        parts.extend(inputs)
        super().__init__(*parts)


class Get(_MethodShortcut):
    method = "GET"


class Post(_MethodShortcut):
    method = "POST"


class Put(_MethodShortcut):
    method = "PUT"


class Patch(_MethodShortcut):
    method = "PATCH"


class Delete(_MethodShortcut):
    method = "DELETE"


class Head(_MethodShortcut):
    method = "HEAD"


class Options(_MethodShortcut):
    method = "OPTIONS"
