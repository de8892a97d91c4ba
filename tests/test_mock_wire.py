"""Tests for the in-memory wire, matchers and the Response facade."""

import pytest

from verano import (
    Answer,
    Body,
    BodyMatch,
    Dict,
    Get,
    Header,
    HeaderMatch,
    Headers,
    Kvp,
    MethodMatch,
    MockWire,
    PathMatch,
    Post,
    QueryParam,
    QueryParamMatch,
    ReasonPhrase,
    Response,
    Status,
    UnexpectedStatusError,
    build,
)


class TestMatchers:
    """Test request matchers."""

    def test_matches_path(self):
        path = "some path"
        assert PathMatch(path).apply(Dict.of(Kvp("path", path))) == []

    def test_path_mismatch(self):
        assert len(PathMatch("text").apply(Dict())) == 1

    def test_predicate(self):
        match = PathMatch(lambda p: p.startswith("/users"))
        assert match.apply(build(Get("/users/7"))) == []
        assert match.apply(build(Get("/teams"))) != []

    def test_method_match_ignores_case(self):
        assert MethodMatch("post").apply(build(Post())) == []
        assert MethodMatch("POST").apply(build(Get())) == ["method: expected 'POST', got 'GET'"]

    def test_header_match(self):
        request = build(Header("Content-Type", "text/plain"))
        assert HeaderMatch("content-type", "text/plain").apply(request) == []
        assert len(HeaderMatch("Accept", "text/plain").apply(request)) == 1

    def test_body_and_query_match(self):
        request = build(Post("/", QueryParam("id", "7"), Body("hi")))
        assert BodyMatch("hi").apply(request) == []
        assert QueryParamMatch("id", "7").apply(request) == []
        assert QueryParamMatch("id", "8").apply(request) != []


class TestMockWire:
    """Test canned answers."""

    @pytest.mark.anyio
    async def test_first_matching_answer_wins(self):
        wire = MockWire(
            Answer(Status(201), matches=[MethodMatch("POST")]),
            Answer(Body("fallback")),
        )
        assert Status.of(await wire.send(build(Post("/")))) == 201

        response = await wire.send(build(Get("/")))
        assert Status.of(response) == 200
        assert ReasonPhrase.of(response) == "OK"
        assert Body.of(response) == "fallback"

    @pytest.mark.anyio
    async def test_unmatched_request_is_not_found(self):
        wire = MockWire(Answer(matches=[PathMatch("/users")]))
        response = await wire.send(build(Get("/teams")))
        assert Status.of(response) == 404
        assert ReasonPhrase.of(response) == "Not Found"
        assert "path" in Body.of(response)

    @pytest.mark.anyio
    async def test_records_requests(self):
        wire = MockWire(Answer())
        assert wire.last is None
        await wire.send(build(Get("/a")))
        await wire.send(build(Get("/b")))
        assert [r["path"] for r in wire.requests] == ["/a", "/b"]
        assert wire.last["path"] == "/b"

    @pytest.mark.anyio
    async def test_answer_headers(self):
        wire = MockWire(Answer(Header("X-Trace", "abc")))
        response = await wire.send(build(Get()))
        assert list(Headers.of(response)) == [Kvp("X-Trace", "abc")]


class TestResponse:
    """Test the Response facade."""

    @pytest.mark.anyio
    async def test_touch_sends_folded_inputs(self):
        wire = MockWire(Answer(Body("ok")))
        response = await Response(wire, Get("/x"), Header("A", "1")).touch()
        assert Body.of(response) == "ok"
        assert list(wire.last.items()) == [("method", "GET"), ("path", "/x"), ("h.A", "1")]

    @pytest.mark.anyio
    async def test_expect_status(self):
        wire = MockWire(Answer(Status(204), ReasonPhrase("No Content")))
        response = await Response(wire, Get()).expect_status(200, 204)
        assert Status.of(response) == 204

        with pytest.raises(UnexpectedStatusError) as info:
            await Response(wire, Get()).expect_status(200)
        assert info.value.status == 204
        assert "No Content" in str(info.value)

    def test_request_is_built_without_sending(self):
        wire = MockWire()
        assert Response(wire, Get("/p")).request()["path"] == "/p"
        assert wire.requests == ()
