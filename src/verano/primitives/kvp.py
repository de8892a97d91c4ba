"""Single key/value pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Kvp:
    key: str
    value: str

    def __post_init__(self):
        if not isinstance(self.key, str):
            raise TypeError(f"key must be str, got {type(self.key).__name__}")
        if not isinstance(self.value, str):
            raise TypeError(f"value for {self.key!r} must be str, got {type(self.value).__name__}")

    def __iter__(self) -> Iterator[str]:
        # Allows `key, value = kvp` and `dict(kvps)`.
        yield self.key
        yield self.value
