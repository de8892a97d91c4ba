"""Query parameters, stored under the ``q.`` namespace."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode

from .. import fields
from ..primitives import Entry, Kvp, KvpInput, Namespace, NamespaceView


class QueryView(NamespaceView):
    def as_string(self) -> str:
        """``""`` when empty, otherwise ``"?name=value&..."`` URL-encoded."""
        pairs = [tuple(kvp) for kvp in self]
        if not pairs:
            return ""
        return "?" + urlencode(pairs)


QUERY = Namespace(fields.QUERY_PREFIX, "query", view_class=QueryView)


class QueryParams(KvpInput):
    def __init__(self, *kvps: Entry):
        super().__init__(*QUERY.prefixed(kvps))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> QueryView:
        return QUERY.view(message)


class QueryParam(QueryParams):
    def __init__(self, name: str, value: str):
        super().__init__(Kvp(name, value))
