"""Tests for Kvp, Dict and the merge law."""

import pytest

from verano import EMPTY, Dict, Kvp, joined


def order(d):
    return list(d.items())


class TestKvp:
    """Test the key/value pair."""

    def test_fields_and_unpacking(self):
        kvp = Kvp("method", "GET")
        key, value = kvp
        assert (key, value) == ("method", "GET")
        assert kvp == Kvp("method", "GET")

    def test_rejects_non_strings(self):
        with pytest.raises(TypeError):
            Kvp("status", 404)
        with pytest.raises(TypeError):
            Kvp(1, "x")

    def test_is_frozen(self):
        kvp = Kvp("a", "b")
        with pytest.raises(AttributeError):
            kvp.value = "c"


class TestDict:
    """Test construction and the read API."""

    def test_get_returns_default_for_missing_key(self):
        d = Dict.of(("method", "GET"))
        assert d.get("method", "") == "GET"
        assert d.get("path", "/fallback") == "/fallback"
        assert d.get("path") is None

    def test_construct_from_kvps_mapping_and_copy(self):
        from_kvps = Dict.of(Kvp("a", "1"), Kvp("b", "2"))
        from_map = Dict({"a": "1", "b": "2"})
        copy = Dict(from_kvps)
        assert order(from_kvps) == order(from_map) == order(copy) == [("a", "1"), ("b", "2")]

    def test_repeated_keys_keep_first_position_last_value(self):
        d = Dict.of(("a", "1"), ("b", "2"), ("a", "3"))
        assert order(d) == [("a", "3"), ("b", "2")]

    def test_as_map_is_an_ordered_copy(self):
        d = Dict.of(("z", "1"), ("a", "2"))
        view = d.as_map()
        assert list(view) == ["z", "a"]
        view["z"] = "changed"
        assert d["z"] == "1"

    def test_has_no_mutation_api(self):
        d = Dict.of(("a", "1"))
        with pytest.raises(TypeError):
            d["a"] = "2"
        with pytest.raises(AttributeError):
            d.update({"a": "2"})

    def test_kvps_preserve_order(self):
        d = Dict.of(("b", "2"), ("a", "1"))
        assert list(d.kvps()) == [Kvp("b", "2"), Kvp("a", "1")]

    def test_equal_dicts_hash_equal(self):
        assert hash(Dict.of(("a", "1"))) == hash(Dict({"a": "1"}))
        assert len({Dict.of(("a", "1")), Dict({"a": "1"})}) == 1

    def test_equality_includes_order(self):
        ab = Dict.of(("a", "1"), ("b", "2"))
        ba = Dict.of(("b", "2"), ("a", "1"))
        assert ab != ba
        assert ab == Dict({"a": "1", "b": "2"})
        assert ab == {"b": "2", "a": "1"}

    def test_non_string_values_are_rejected(self):
        with pytest.raises(TypeError):
            Dict({"status": 200})


class TestJoined:
    """Test merging dictionaries."""

    def test_last_source_wins(self):
        a = Dict.of(("k", "a"), ("x", "1"))
        b = Dict.of(("k", "b"))
        assert joined(a, b).get("k", "") == "b"

    def test_first_occurrence_decides_position(self):
        a = Dict.of(("one", "1"), ("two", "2"))
        b = Dict.of(("three", "3"), ("one", "uno"))
        assert order(joined(a, b)) == [("one", "uno"), ("two", "2"), ("three", "3")]

    def test_not_last_occurrence_position(self):
        merged = joined(Dict.of(("a", "1"), ("b", "2")), Dict.of(("a", "x")))
        assert list(merged) == ["a", "b"]

    def test_empty_is_identity(self):
        a = Dict.of(("b", "2"), ("a", "1"))
        assert order(joined(a, EMPTY)) == order(a)
        assert order(joined(EMPTY, a)) == order(a)

    def test_zero_sources(self):
        assert order(joined()) == []

    def test_self_join_is_idempotent(self):
        a = Dict.of(("a", "1"), ("b", "2"))
        assert order(joined(a, a)) == order(a)

    def test_not_commutative(self):
        a = Dict.of(("method", "GET"))
        b = Dict.of(("method", "POST"))
        assert joined(a, b).get("method", "") == "POST"
        assert joined(b, a).get("method", "") == "GET"

    def test_associative_in_values_and_order(self):
        a = Dict.of(("x", "1"), ("y", "1"))
        b = Dict.of(("y", "2"), ("z", "2"))
        c = Dict.of(("x", "3"), ("w", "3"))
        assert order(joined(joined(a, b), c)) == order(joined(a, joined(b, c)))

    def test_accepts_plain_maps(self):
        merged = Dict.joined({"a": "1"}, Dict.of(("b", "2")), {"a": "3"})
        assert order(merged) == [("a", "3"), ("b", "2")]
