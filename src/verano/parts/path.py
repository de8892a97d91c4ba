from __future__ import annotations

from collections.abc import Mapping

from .. import fields
from ..primitives import Kvp, KvpInput


class Path(KvpInput):
    """Set the request path, e.g. ``/users``."""

    def __init__(self, path: str):
        super().__init__(Kvp(fields.PATH, path))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> str:
        return message.get(fields.PATH, "")
