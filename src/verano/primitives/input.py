"""Composable ``Dict -> Dict`` edits and the left fold that applies them."""

from __future__ import annotations

import functools
from typing import Callable

from typing_extensions import override

from .dict import EMPTY, Dict, Entry, joined


class DictInput:
    """One pure edit to a dictionary.

    Subclasses either override :meth:`apply`, or override :meth:`entries` and
    let the default :meth:`apply` merge them into the accumulator.
    """

    def apply(self, base: Dict) -> Dict:
        return joined(base, self.entries())

    def entries(self) -> Dict:
        raise NotImplementedError(f"{self.__class__.__name__}.entries not implemented")

    def __call__(self, base: Dict | None = None) -> Dict:
        return self.apply(EMPTY if base is None else base)


class KvpInput(DictInput):
    """Merge a fixed set of pairs into the accumulator."""

    def __init__(self, *kvps: Entry):
        self._dict = Dict(kvps)

    @override
    def entries(self) -> Dict:
        return self._dict

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._dict.items())!r})"


class FnInput(DictInput):
    """Wrap an arbitrary pure ``Dict -> Dict`` function."""

    def __init__(self, fn: Callable[[Dict], Dict]):
        self._fn = fn

    @override
    def apply(self, base: Dict) -> Dict:
        return self._fn(base)


class Inputs(DictInput):
    """Several inputs applied in order as one."""

    def __init__(self, *inputs: DictInput):
        self._inputs = inputs

    @override
    def apply(self, base: Dict) -> Dict:
        return build(*self._inputs, base=base)

    def __iter__(self):
        return iter(self._inputs)


def build(*inputs: DictInput, base: Dict | None = None) -> Dict:
    """Apply ``inputs`` left to right starting from ``base`` (empty by default).

    Later inputs override earlier ones on key collision, so the order given
    here is the order applied.
    """
    return functools.reduce(
        lambda acc, item: item.apply(acc),
        inputs,
        EMPTY if base is None else base,
    )
