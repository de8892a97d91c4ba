"""Composable, immutable HTTP messages for Python async.

Requests are built by folding small ``Dict -> Dict`` inputs into one flat,
immutable dictionary; a wire turns it into a response dictionary read back
through typed views.
"""

from .errors import (
    FormatError,
    PrefixCollisionError,
    SerializationError,
    TransportError,
    TransportTimeout,
    UnexpectedStatusError,
    VeranoError,
)
from .primitives import (
    EMPTY,
    Dict,
    DictInput,
    FnInput,
    Inputs,
    Kvp,
    KvpInput,
    Namespace,
    NamespaceRegistry,
    NamespaceView,
    build,
    joined,
)
from .codec import BodyCodec, JsonCodec, PydanticCodec
from .settings import WireSettings
from .parts import (
    Accept,
    Authorization,
    BasicAuth,
    Bearer,
    Body,
    ContentType,
    Cookie,
    Delete,
    DtoBody,
    FormParams,
    Get,
    Head,
    Header,
    Headers,
    JsonBody,
    Method,
    Options,
    Patch,
    Path,
    Post,
    Put,
    QueryParam,
    QueryParams,
    ReasonPhrase,
    RequestUri,
    Status,
    UserAgent,
)
from .wire import (
    Answer,
    BodyMatch,
    HeaderMatch,
    Match,
    MethodMatch,
    MockWire,
    PathMatch,
    QueryParamMatch,
    TcpWire,
    Wire,
)
from .http import WireServer
from .response import Response

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VeranoError",
    "TransportError",
    "TransportTimeout",
    "SerializationError",
    "FormatError",
    "PrefixCollisionError",
    "UnexpectedStatusError",
    # Dictionary algebra
    "Kvp",
    "Dict",
    "EMPTY",
    "joined",
    "DictInput",
    "KvpInput",
    "FnInput",
    "Inputs",
    "build",
    "Namespace",
    "NamespaceRegistry",
    "NamespaceView",
    # Codecs and settings
    "BodyCodec",
    "JsonCodec",
    "PydanticCodec",
    "WireSettings",
    # Parts
    "Method",
    "Get",
    "Post",
    "Put",
    "Patch",
    "Delete",
    "Head",
    "Options",
    "Path",
    "RequestUri",
    "QueryParam",
    "QueryParams",
    "Header",
    "Headers",
    "ContentType",
    "Accept",
    "Authorization",
    "Bearer",
    "BasicAuth",
    "Cookie",
    "UserAgent",
    "Status",
    "ReasonPhrase",
    "Body",
    "JsonBody",
    "DtoBody",
    "FormParams",
    # Wires
    "Wire",
    "TcpWire",
    "MockWire",
    "Answer",
    "Match",
    "PathMatch",
    "MethodMatch",
    "HeaderMatch",
    "BodyMatch",
    "QueryParamMatch",
    "WireServer",
    "Response",
]
