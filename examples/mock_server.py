"""
Loopback example

Runs a WireServer backed by a MockWire and talks to it through TcpWire.

Run:
  uv run python examples/mock_server.py

While it runs, try:
  curl -i http://127.0.0.1:8080/health
  curl -i -X POST http://127.0.0.1:8080/users -d '{"name": "ana"}'
"""

from __future__ import annotations

import logging

import anyio

from verano import (
    Answer,
    Body,
    Get,
    JsonBody,
    MethodMatch,
    MockWire,
    PathMatch,
    Post,
    ReasonPhrase,
    Response,
    Status,
    TcpWire,
    WireServer,
)


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    mock = MockWire(
        Answer(JsonBody({"ok": True}), matches=[MethodMatch("GET"), PathMatch("/health")]),
        Answer(Status(201), ReasonPhrase("Created"), matches=[MethodMatch("POST"), PathMatch("/users")]),
    )

    async with anyio.create_task_group() as tg:
        port = await tg.start(WireServer(mock, port=8080).serve)
        wire = TcpWire(f"http://127.0.0.1:{port}")

        health = await Response(wire, Get("/health")).expect_status(200)
        print("health:", JsonBody.of(health))

        created = await Response(wire, Post("/users", JsonBody({"name": "ana"}))).touch()
        print("create:", Status.of(created), ReasonPhrase.of(created), repr(Body.of(created)))

        print("Listening on http://127.0.0.1:8080")
        print("Press Ctrl-C to stop.")

        # Keep the server alive.
        await anyio.sleep_forever()


if __name__ == "__main__":
    anyio.run(main)
