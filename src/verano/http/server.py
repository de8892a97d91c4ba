"""Tiny HTTP/1.1 server that fronts any :class:`~verano.wire.base.Wire`.

Each incoming request is turned into a request dictionary, handed to the
wire, and the response dictionary is written back. Paired with a
:class:`~verano.wire.mock.MockWire` this gives a real socket endpoint for
exercising :class:`~verano.wire.tcp.TcpWire`.

Features:
- HTTP/1.1 request line + headers parsing
- Content-Length and chunked request bodies
- One request per connection (Connection: close)
- Fully AnyIO; started with ``await task_group.start(server.serve)``
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl

import anyio
from anyio.abc import SocketAttribute, SocketStream, TaskStatus

from ..errors import TransportError, VeranoError
from ..parts import Body, Headers, Method, Path, QueryParams, ReasonPhrase, Status
from ..primitives import Dict, build
from ..settings import WireSettings
from ..wire.base import Wire
from .framing import (
    StreamReader,
    decode_body,
    encode_head,
    header_value,
    parse_request_head,
    read_body,
)

logger = logging.getLogger(__name__)


_STATUS_TEXT: dict[int, str] = {
    200: "OK",
    201: "Created",
    202: "Accepted",
    204: "No Content",
    301: "Moved Permanently",
    302: "Found",
    304: "Not Modified",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    413: "Payload Too Large",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def _status_line(status: int, reason: str) -> str:
    text = reason or _STATUS_TEXT.get(status, "Unknown")
    return f"HTTP/1.1 {status} {text}"


def _error(status: int, text: str) -> Dict:
    return build(
        Status(status),
        ReasonPhrase(_STATUS_TEXT.get(status, "")),
        Headers(("Content-Type", "text/plain; charset=utf-8")),
        Body(text),
    )


def request_dict(method: str, target: str, headers: list[tuple[str, str]], body: bytes) -> Dict:
    """Decode one parsed HTTP request into a request dictionary."""
    path, _, query = target.partition("?")
    return build(
        Method(method),
        Path(path),
        QueryParams(*parse_qsl(query, keep_blank_values=True)),
        Headers(*headers),
        Body(decode_body(body, headers)),
    )


def encode_response(response: Dict) -> bytes:
    """Encode a response dictionary as an HTTP/1.1 message."""
    status = Status.of(response)
    body = Body.of(response).encode("utf-8")
    headers = [
        (kvp.key, kvp.value)
        for kvp in Headers.of(response)
        if kvp.key.lower() not in ("content-length", "transfer-encoding", "connection")
    ]
    headers.append(("Content-Length", str(len(body))))
    headers.append(("Connection", "close"))
    return encode_head(_status_line(status, ReasonPhrase.of(response)), headers) + body


class WireServer:
    """
    HTTP server forwarding every request to a wire.

    - Binds a TCP listener in serve() and reports the bound port
    - Handles each connection in the listener's task group
    """

    def __init__(
        self,
        wire: Wire,
        *,
        host: str = "127.0.0.1",
        port: int = 0,
        settings: WireSettings | None = None,
    ):
        self._wire = wire
        self._host = host
        self._port = port
        self._settings = settings if settings is not None else WireSettings()
        self.port: int | None = None

    async def serve(self, *, task_status: TaskStatus[int] = anyio.TASK_STATUS_IGNORED) -> None:
        """
        Serve incoming connections until cancelled.

        Reports the bound port through ``task_status`` so port=0 works.
        """
        listener = await anyio.create_tcp_listener(local_host=self._host, local_port=self._port)
        self.port = listener.extra(SocketAttribute.local_port)
        logger.info("serving on %s:%s", self._host, self.port)

        async with listener:
            task_status.started(self.port)
            await listener.serve(self._handle_client)

    async def _handle_client(self, stream: SocketStream) -> None:
        async with stream:
            try:
                response = await self._exchange(StreamReader(stream))
                if response is None:
                    return
            except ValueError as e:
                response = _error(400, f"bad request: {e}")
            except TransportError as e:
                response = _error(502, f"upstream error: {e}")
            except Exception as e:  # pragma: no cover
                logger.exception("unhandled error while serving a request")
                response = _error(500, f"server error: {e!r}")

            try:
                payload = encode_response(response)
            except (VeranoError, ValueError) as e:
                # UnicodeEncodeError is a ValueError: header text must be latin-1
                logger.warning("cannot encode response: %s", e)
                payload = encode_response(_error(500, f"invalid response: {type(e).__name__}"))
            await stream.send(payload)

    async def _exchange(self, reader: StreamReader) -> Dict | None:
        limits = self._settings
        block = await reader.read_until(b"\r\n\r\n", limits.max_header_bytes)
        if not block:
            return None

        method, target, _version, headers = parse_request_head(block)
        length = header_value(headers, "content-length", "0") or "0"
        if length.isdigit() and int(length) > limits.max_body_bytes:
            return _error(413, "payload too large")

        body = await read_body(reader, headers, limits.max_body_bytes)
        request = request_dict(method, target, headers, body)
        logger.debug("serving %s %s", method, target)
        return await self._wire.send(request)
