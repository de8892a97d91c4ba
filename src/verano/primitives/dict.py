"""Immutable ordered string dictionary and the merge law that combines them.

Every HTTP message is a single flat :class:`Dict`. Partial dictionaries built
independently are combined with :func:`joined`:

- values: the last source that defines a key wins
- order: a key keeps the position of its first occurrence

Python's ``dict`` assignment already has exactly these semantics (overwriting
an existing key keeps its slot), so the merge is a single linear scan.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Union

from .kvp import Kvp

if TYPE_CHECKING:
    from .input import DictInput


Entry = Union[Kvp, tuple[str, str]]
Source = Union[Mapping[str, str], Iterable[Entry]]


def _items(source: Source) -> Iterator[Kvp]:
    if isinstance(source, Mapping):
        pairs: Iterable[Entry] = source.items()
    else:
        pairs = source
    for pair in pairs:
        yield pair if isinstance(pair, Kvp) else Kvp(*pair)


class Dict(Mapping[str, str]):
    """Immutable ordered mapping of ``str`` keys to ``str`` values.

    Construct from a mapping (including another :class:`Dict`), or from an
    iterable of :class:`Kvp` / ``(key, value)`` tuples. Repeated keys follow
    the merge law: first position, last value.
    """

    __slots__ = ("_entries",)

    def __init__(self, source: Source = ()):
        entries: dict[str, str] = {}
        for kvp in _items(source):
            entries[kvp.key] = kvp.value
        self._entries = entries

    @classmethod
    def of(cls, *kvps: Entry) -> "Dict":
        return cls(kvps)

    @classmethod
    def from_inputs(cls, *inputs: "DictInput", base: "Dict | None" = None) -> "Dict":
        """Fold ``inputs`` left to right, starting from ``base`` (or empty)."""
        from .input import build

        return build(*inputs, base=base)

    @classmethod
    def joined(cls, *sources: Source) -> "Dict":
        return joined(*sources)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str, default=None):
        return self._entries.get(key, default)

    def kvps(self) -> Iterator[Kvp]:
        for key, value in self._entries.items():
            yield Kvp(key, value)

    def as_map(self) -> dict[str, str]:
        """Return a fresh ordered ``dict`` copy of the contents."""
        return dict(self._entries)

    def __eq__(self, other: object) -> bool:
        # Order is part of a Dict's value; plain mappings compare as mappings.
        if isinstance(other, Dict):
            return list(self._entries.items()) == list(other._entries.items())
        if isinstance(other, Mapping):
            return self._entries == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"Dict({self._entries!r})"


EMPTY = Dict()


def joined(*sources: Source) -> Dict:
    """Merge ``sources`` in argument order.

    Not commutative: argument order decides which value wins on collision.
    """

    def _chain() -> Iterator[Kvp]:
        for source in sources:
            yield from _items(source)

    return Dict(_chain())
