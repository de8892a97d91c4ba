"""Embedding structured sub-records into a flat :class:`Dict`.

A sub-record (headers, query parameters, ...) is written by prefixing each
of its keys with a fixed literal and read back by filtering on that prefix.
Each kind of sub-record owns one prefix; prefixes are checked against each
other and against the reserved scalar keys when assertions are enabled.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .. import fields
from ..errors import PrefixCollisionError
from .dict import Entry, _items
from .input import KvpInput
from .kvp import Kvp


class NamespaceRegistry:
    """
    Thread-safe registry of namespace prefixes.

    Maps prefixes to the kind of sub-record that owns them.
    """

    def __init__(self, reserved: Iterable[str] = fields.RESERVED_KEYS):
        self._prefixes: dict[str, str] = {}
        self._reserved = tuple(reserved)
        self._lock = threading.Lock()

    def register(self, prefix: str, kind: str) -> bool:
        """
        Register ``prefix`` for ``kind``.

        Returns True if newly registered, False if the same kind already owns
        it. Raises PrefixCollisionError if it overlaps anything else.
        """
        if not prefix:
            raise PrefixCollisionError(prefix, "", "empty prefix")

        with self._lock:
            owner = self._prefixes.get(prefix)
            if owner == kind:
                return False
            if owner is not None:
                raise PrefixCollisionError(prefix, prefix, owner)

            for other, other_kind in self._prefixes.items():
                if other.startswith(prefix) or prefix.startswith(other):
                    raise PrefixCollisionError(prefix, other, other_kind)

            for key in self._reserved:
                if key.startswith(prefix) or prefix.startswith(key):
                    raise PrefixCollisionError(prefix, key, "reserved key")

            self._prefixes[prefix] = kind
            return True

    def unregister(self, prefix: str) -> bool:
        """
        Unregister a prefix.

        Returns True if successful, False if prefix not found.
        """
        with self._lock:
            if prefix not in self._prefixes:
                return False
            del self._prefixes[prefix]
            return True

    def lookup(self, prefix: str) -> Optional[str]:
        """Return the kind owning ``prefix``, or None."""
        with self._lock:
            return self._prefixes.get(prefix)

    def registered(self) -> list[str]:
        """Return list of all registered prefixes."""
        with self._lock:
            return list(self._prefixes.keys())


# Global registry instance
_global_registry = NamespaceRegistry()


def registered() -> list[str]:
    """Get list of all globally registered prefixes."""
    return _global_registry.registered()


class NamespaceView(Iterable[Kvp]):
    """Lazy, restartable view of one namespace inside a dictionary.

    Every iteration rescans the source in its own order and strips the
    prefix from each matching key.
    """

    def __init__(self, source: Mapping[str, str], prefix: str):
        self._source = source
        self._prefix = prefix

    def __iter__(self) -> Iterator[Kvp]:
        prefix = self._prefix
        size = len(prefix)
        for key, value in self._source.items():
            if key.startswith(prefix):
                yield Kvp(key[size:], value)

    def get(self, name: str, default=None):
        return self._source.get(self._prefix + name, default)

    def as_map(self) -> dict[str, str]:
        return {kvp.key: kvp.value for kvp in self}

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({[tuple(kvp) for kvp in self]!r})"


class Namespace:
    """A fixed key prefix reserved for one kind of sub-record."""

    __slots__ = ("prefix", "kind", "view_class")

    def __init__(
        self,
        prefix: str,
        kind: str,
        *,
        view_class: type[NamespaceView] = NamespaceView,
        registry: NamespaceRegistry | None = None,
    ):
        if __debug__:
            (registry or _global_registry).register(prefix, kind)
        self.prefix = prefix
        self.kind = kind
        self.view_class = view_class

    def key(self, name: str) -> str:
        return self.prefix + name

    def prefixed(self, kvps: Iterable[Entry]) -> tuple[Kvp, ...]:
        return tuple(Kvp(self.prefix + kvp.key, kvp.value) for kvp in _items(kvps))

    def embed(self, kvps: Iterable[Entry]) -> KvpInput:
        """Input that merges ``kvps`` under this prefix into the accumulator."""
        return KvpInput(*self.prefixed(kvps))

    def view(self, source: Mapping[str, str]) -> NamespaceView:
        return self.view_class(source, self.prefix)

    def __repr__(self) -> str:
        return f"Namespace({self.prefix!r}, {self.kind!r})"
