"""HTTP/1.1 framing and a loopback server built on AnyIO."""

from .server import WireServer, encode_response, request_dict

__all__ = [
    "WireServer",
    "encode_response",
    "request_dict",
]
