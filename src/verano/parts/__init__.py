"""Request and response parts.

Each part is a :class:`~verano.primitives.DictInput` (the write side) with
classmethod views such as ``Status.of(message)`` (the read side).
"""

from .body import Body, DtoBody, FormParams, JsonBody
from .headers import (
    HEADERS,
    Accept,
    Authorization,
    BasicAuth,
    Bearer,
    ContentType,
    Cookie,
    Header,
    Headers,
    UserAgent,
)
from .method import Delete, Get, Head, Method, Options, Patch, Post, Put
from .path import Path
from .query import QUERY, QueryParam, QueryParams, QueryView
from .status import ReasonPhrase, Status
from .uri import RequestUri

__all__ = [
    "Body",
    "DtoBody",
    "FormParams",
    "JsonBody",
    "HEADERS",
    "Accept",
    "Authorization",
    "BasicAuth",
    "Bearer",
    "ContentType",
    "Cookie",
    "Header",
    "Headers",
    "UserAgent",
    "Method",
    "Get",
    "Post",
    "Put",
    "Patch",
    "Delete",
    "Head",
    "Options",
    "Path",
    "QUERY",
    "QueryParam",
    "QueryParams",
    "QueryView",
    "ReasonPhrase",
    "Status",
    "RequestUri",
]
