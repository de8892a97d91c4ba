"""Headers, stored under the ``h.`` namespace, and common header helpers."""

from __future__ import annotations

import base64
from collections.abc import Mapping

from typing_extensions import override

from .. import fields
from ..primitives import Dict, Entry, Kvp, KvpInput, Namespace, NamespaceView, joined

HEADERS = Namespace(fields.HEADERS_PREFIX, "headers")


class Headers(KvpInput):
    """Add headers to a message.

    Names are matched case-insensitively: a header already present keeps
    its spelling and position and takes the new value. New names keep the
    case they are given in.
    """

    def __init__(self, *kvps: Entry):
        self._headers = tuple(Kvp(*kvp) for kvp in kvps)
        super().__init__(*HEADERS.prefixed(self._headers))

    @override
    def apply(self, base: Dict) -> Dict:
        spelling = {kvp.key.lower(): kvp.key for kvp in HEADERS.view(base)}
        renamed = [Kvp(spelling.setdefault(kvp.key.lower(), kvp.key), kvp.value) for kvp in self._headers]
        return joined(base, HEADERS.prefixed(renamed))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> NamespaceView:
        return HEADERS.view(message)


class Header(Headers):
    def __init__(self, name: str, value: str):
        super().__init__(Kvp(name, value))

    @classmethod
    def value_of(cls, message: Mapping[str, str], name: str, default: str | None = None) -> str | None:
        """Case-insensitive lookup of a single header value."""
        wanted = name.lower()
        for kvp in HEADERS.view(message):
            if kvp.key.lower() == wanted:
                return kvp.value
        return default


class ContentType(Header):
    def __init__(self, value: str):
        super().__init__("Content-Type", value)


class Accept(Header):
    def __init__(self, value: str):
        super().__init__("Accept", value)


class UserAgent(Header):
    def __init__(self, value: str):
        super().__init__("User-Agent", value)


class Cookie(Header):
    def __init__(self, value: str):
        super().__init__("Cookie", value)


class Authorization(Header):
    def __init__(self, value: str):
        super().__init__("Authorization", value)


class Bearer(Authorization):
    def __init__(self, token: str):
        super().__init__(f"Bearer {token}")


class BasicAuth(Authorization):
    def __init__(self, user: str, password: str):
        token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
        super().__init__(f"Basic {token}")
