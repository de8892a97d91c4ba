"""Tests for namespaces and the prefix registry."""

import pytest

from verano import Dict, Kvp, Namespace, NamespaceRegistry, PrefixCollisionError, build
from verano.parts import HEADERS, QUERY
from verano.primitives import registered


class TestNamespaceRegistry:
    """Test prefix registration and collision checks."""

    def setup_method(self):
        self.registry = NamespaceRegistry()

    def test_register_prefix(self):
        assert self.registry.register("h.", "headers") is True
        assert self.registry.lookup("h.") == "headers"

        # Same kind again is a no-op
        assert self.registry.register("h.", "headers") is False

    def test_same_prefix_other_kind(self):
        self.registry.register("h.", "headers")
        with pytest.raises(PrefixCollisionError):
            self.registry.register("h.", "cookies")

    def test_prefix_of_another_prefix(self):
        self.registry.register("h.", "headers")
        with pytest.raises(PrefixCollisionError):
            self.registry.register("h.x.", "extended")
        with pytest.raises(PrefixCollisionError):
            self.registry.register("h", "short")

    def test_reserved_keys(self):
        for prefix in ("m", "met", "body", "body.", "reason-"):
            with pytest.raises(PrefixCollisionError):
                self.registry.register(prefix, "bad")

    def test_empty_prefix(self):
        with pytest.raises(PrefixCollisionError):
            self.registry.register("", "everything")

    def test_disjoint_prefixes(self):
        assert self.registry.register("h.", "headers")
        assert self.registry.register("q.", "query")
        assert self.registry.register("c.", "cookies")
        assert self.registry.registered() == ["h.", "q.", "c."]

    def test_unregister(self):
        self.registry.register("x.", "x")
        assert self.registry.unregister("x.") is True
        assert self.registry.lookup("x.") is None
        assert self.registry.unregister("x.") is False

    def test_namespace_registers_itself(self):
        Namespace("f.", "form", registry=self.registry)
        with pytest.raises(PrefixCollisionError):
            Namespace("f.", "fragment", registry=self.registry)


def test_builtin_namespaces_are_registered():
    assert "h." in registered()
    assert "q." in registered()
    assert HEADERS.prefix == "h."
    assert QUERY.prefix == "q."


def test_embed_then_view_round_trip():
    ns = Namespace("x.", "extra", registry=NamespaceRegistry())
    pairs = [Kvp("b", "2"), Kvp("a", "1"), Kvp("c", "3")]
    d = build(ns.embed(pairs), base=Dict.of(("method", "GET")))

    assert list(d) == ["method", "x.b", "x.a", "x.c"]
    assert list(ns.view(d)) == pairs


def test_view_skips_other_keys_and_strips_prefix():
    d = Dict.of(("h.A", "1"), ("path", "/"), ("q.A", "2"), ("h.B", "3"))
    assert [tuple(kvp) for kvp in HEADERS.view(d)] == [("A", "1"), ("B", "3")]


def test_view_is_restartable():
    d = Dict.of(("h.A", "1"), ("h.B", "2"))
    view = HEADERS.view(d)
    assert list(view) == list(view)
    assert view.as_map() == {"A": "1", "B": "2"}
    assert view.get("B") == "2"
    assert view.get("C", "none") == "none"


def test_empty_view_is_falsy():
    assert not HEADERS.view(Dict())
    assert HEADERS.view(Dict.of(("h.X", "1")))


def test_key_helper():
    assert HEADERS.key("Accept") == "h.Accept"
