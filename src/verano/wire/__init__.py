"""Wires: the boundary where a request dictionary becomes a response."""

from .base import Wire
from .matchers import BodyMatch, HeaderMatch, Match, MethodMatch, PathMatch, QueryParamMatch
from .mock import Answer, MockWire
from .tcp import TcpWire

__all__ = [
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
]
