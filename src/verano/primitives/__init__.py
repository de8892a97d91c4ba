"""Dictionary algebra: pairs, immutable dictionaries, merges, inputs, namespaces."""

from .kvp import Kvp
from .dict import Dict, EMPTY, Entry, joined
from .input import DictInput, KvpInput, FnInput, Inputs, build
from .namespace import Namespace, NamespaceRegistry, NamespaceView, registered

__all__ = [
    "Kvp",
    "Dict",
    "EMPTY",
    "Entry",
    "joined",
    "DictInput",
    "KvpInput",
    "FnInput",
    "Inputs",
    "build",
    "Namespace",
    "NamespaceRegistry",
    "NamespaceView",
    "registered",
]
