"""Request matchers for :class:`~verano.wire.mock.MockWire`.

A matcher reports what is wrong with a request: ``apply`` returns a list of
mismatch descriptions, empty when the request matches. Expected values are
either literals (compared for equality) or predicates.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Union

from typing_extensions import override

from .. import fields
from ..parts import Body, Header, Method, QueryParams

Expected = Union[str, Callable[[str], Any]]


def _describe(expected: Expected) -> str:
    if callable(expected):
        return getattr(expected, "__name__", repr(expected))
    return repr(expected)


class Match:
    def apply(self, request: Mapping[str, str]) -> list[str]:
        raise NotImplementedError(f"{self.__class__.__name__}.apply not implemented")


class _ValueMatch(Match):
    label = "value"

    def __init__(self, expected: Expected):
        self._expected = expected

    def _actual(self, request: Mapping[str, str]) -> str | None:
        raise NotImplementedError

    def _satisfied(self, actual: str) -> bool:
        if callable(self._expected):
            return bool(self._expected(actual))
        return actual == self._expected

    @override
    def apply(self, request: Mapping[str, str]) -> list[str]:
        actual = self._actual(request)
        if actual is not None and self._satisfied(actual):
            return []
        return [f"{self.label}: expected {_describe(self._expected)}, got {actual!r}"]


class PathMatch(_ValueMatch):
    label = "path"

    @override
    def _actual(self, request: Mapping[str, str]) -> str | None:
        return request.get(fields.PATH)


class MethodMatch(_ValueMatch):
    label = "method"

    def __init__(self, expected: Expected):
        if isinstance(expected, str):
            expected = expected.upper()
        super().__init__(expected)

    @override
    def _actual(self, request: Mapping[str, str]) -> str | None:
        return Method.of(request)


class BodyMatch(_ValueMatch):
    label = "body"

    @override
    def _actual(self, request: Mapping[str, str]) -> str | None:
        return Body.of(request)


class HeaderMatch(_ValueMatch):
    def __init__(self, name: str, expected: Expected):
        super().__init__(expected)
        self._name = name
        self.label = f"header {name}"

    @override
    def _actual(self, request: Mapping[str, str]) -> str | None:
        return Header.value_of(request, self._name)


class QueryParamMatch(_ValueMatch):
    def __init__(self, name: str, expected: Expected):
        super().__init__(expected)
        self._name = name
        self.label = f"query {name}"

    @override
    def _actual(self, request: Mapping[str, str]) -> str | None:
        return QueryParams.of(request).get(self._name)
