from __future__ import annotations

from collections.abc import Mapping

from .. import fields
from ..errors import FormatError
from ..primitives import Kvp, KvpInput


class Status(KvpInput):
    """Response status code."""

    def __init__(self, code: int):
        super().__init__(Kvp(fields.STATUS, str(int(code))))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> int:
        raw = message.get(fields.STATUS)
        if raw is None:
            raise FormatError("message has no status")
        try:
            return int(raw)
        except ValueError as e:
            raise FormatError(f"status is not an integer: {raw!r}") from e


class ReasonPhrase(KvpInput):
    def __init__(self, text: str):
        super().__init__(Kvp(fields.REASON_PHRASE, text))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> str:
        return message.get(fields.REASON_PHRASE, "")
