"""Base URI input and full request URI reconstruction."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import SplitResult, urlsplit

from .. import fields
from ..errors import FormatError
from ..primitives import Kvp, KvpInput
from .path import Path
from .query import QueryParams


class RequestUri(KvpInput):
    """Set the base URI, e.g. ``https://example.com``."""

    def __init__(self, uri: str):
        super().__init__(Kvp(fields.URI, uri))

    @classmethod
    def of(cls, message: Mapping[str, str]) -> str:
        """Base URI + path + query string."""
        return "{}{}{}".format(
            message.get(fields.URI, ""),
            Path.of(message),
            QueryParams.of(message).as_string(),
        )

    @classmethod
    def parsed(cls, message: Mapping[str, str]) -> SplitResult:
        """The reconstructed URI as an absolute, well-formed URL.

        Raises FormatError if it is relative or malformed.
        """
        text = cls.of(message)
        try:
            uri = urlsplit(text)
            uri.port  # raises ValueError on a bad port
        except ValueError as e:
            raise FormatError(f"invalid uri {text!r}: {e}") from e
        if not uri.scheme or not uri.hostname:
            raise FormatError(f"invalid uri {text!r}: scheme and host required")
        if any(c.isspace() for c in text):
            raise FormatError(f"invalid uri {text!r}: contains whitespace")
        return uri
