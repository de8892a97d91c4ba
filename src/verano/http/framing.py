"""HTTP/1.1 request framing over AnyIO byte streams.

Used by :class:`~verano.http.server.WireServer` to read one request per
connection and write the response back.

Features:
- request line + headers parsing
- Content-Length and chunked request bodies
- one message per connection (Connection: close)

Malformed input raises ValueError; callers decide how to report it.
"""

from __future__ import annotations

from collections.abc import Iterable

import anyio
from anyio.abc import ByteStream

HeaderList = list[tuple[str, str]]

_CRLF = b"\r\n"
_HEAD_END = b"\r\n\r\n"


class StreamReader:
    """Buffered reads from a byte stream.

    Bytes received past a requested boundary are kept for the next read.
    """

    def __init__(self, stream: ByteStream, chunk_size: int = 4096):
        self._stream = stream
        self._chunk_size = chunk_size
        self._buf = bytearray()
        self._eof = False

    async def _fill(self) -> bool:
        if self._eof:
            return False
        try:
            chunk = await self._stream.receive(self._chunk_size)
        except anyio.EndOfStream:
            chunk = b""
        if not chunk:
            self._eof = True
            return False
        self._buf.extend(chunk)
        return True

    async def read_until(self, marker: bytes, max_bytes: int) -> bytes:
        """Read through ``marker``; returns what was read if the stream ends first."""
        while True:
            idx = self._buf.find(marker)
            if idx != -1:
                end = idx + len(marker)
                data = bytes(self._buf[:end])
                del self._buf[:end]
                return data
            if len(self._buf) > max_bytes:
                raise ValueError("message head too large")
            if not await self._fill():
                data = bytes(self._buf)
                self._buf.clear()
                return data

    async def read_exact(self, n: int) -> bytes:
        while len(self._buf) < n:
            if not await self._fill():
                raise ValueError(f"stream ended after {len(self._buf)} of {n} bytes")
        data = bytes(self._buf[:n])
        del self._buf[:n]
        return data

    async def read_chunked(self, max_bytes: int) -> bytes:
        body = bytearray()
        while True:
            line = await self.read_until(_CRLF, 1024)
            if not line.endswith(_CRLF):
                raise ValueError("truncated chunk size line")
            size_text = line[:-2].split(b";", 1)[0].strip()
            try:
                size = int(size_text, 16)
            except ValueError:
                raise ValueError(f"invalid chunk size: {size_text!r}") from None
            if size == 0:
                # Trailers, if any, end with an empty line.
                while True:
                    trailer = await self.read_until(_CRLF, 8192)
                    if trailer in (_CRLF, b""):
                        return bytes(body)
            if len(body) + size > max_bytes:
                raise ValueError("message body too large")
            body.extend(await self.read_exact(size))
            if await self.read_exact(2) != _CRLF:
                raise ValueError("missing CRLF after chunk")


def _split_head(block: bytes) -> tuple[str, HeaderList]:
    # block contains the start line + headers ending with \r\n\r\n
    if not block.endswith(_HEAD_END):
        raise ValueError("incomplete message head")
    head = block.decode("iso-8859-1")

    lines = head.split("\r\n")
    if not lines or not lines[0]:
        raise ValueError("missing start line")

    headers: HeaderList = []
    for line in lines[1:]:
        if line == "":
            break
        if ":" not in line:
            continue
        k, v = line.split(":", 1)
        headers.append((k.strip(), v.strip()))
    return lines[0], headers


def parse_request_head(block: bytes) -> tuple[str, str, str, HeaderList]:
    """Return (method, target, version, headers)."""
    start, headers = _split_head(block)
    parts = start.split(" ")
    if len(parts) != 3:
        raise ValueError("invalid request line")
    method, target, version = parts
    return method, target, version, headers


def header_value(headers: Iterable[tuple[str, str]], name: str, default: str | None = None) -> str | None:
    wanted = name.lower()
    for k, v in headers:
        if k.lower() == wanted:
            return v
    return default


def combine_headers(headers: Iterable[tuple[str, str]]) -> HeaderList:
    """Fold repeated header names into one comma-separated value.

    The first spelling of a name is kept.
    """
    combined: dict[str, tuple[str, str]] = {}
    for k, v in headers:
        key = k.lower()
        if key in combined:
            name, previous = combined[key]
            combined[key] = (name, f"{previous}, {v}")
        else:
            combined[key] = (k, v)
    return list(combined.values())


def encode_head(start_line: str, headers: Iterable[tuple[str, str]]) -> bytes:
    lines = [start_line]
    lines.extend(f"{k}: {v}" for k, v in headers)
    return ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1")


async def read_body(reader: StreamReader, headers: HeaderList, max_bytes: int) -> bytes:
    """Read a request body framed by ``headers``.

    Without Transfer-Encoding or Content-Length a request has no body.
    """
    encoding = header_value(headers, "transfer-encoding", "") or ""
    if "chunked" in encoding.lower():
        return await reader.read_chunked(max_bytes)

    length = header_value(headers, "content-length")
    if length is not None:
        try:
            n = int(length)
        except ValueError:
            raise ValueError(f"invalid content-length: {length!r}") from None
        if n < 0:
            raise ValueError(f"invalid content-length: {length!r}")
        if n > max_bytes:
            raise ValueError("message body too large")
        return await reader.read_exact(n) if n else b""
    return b""


def charset_of(headers: Iterable[tuple[str, str]], default: str = "utf-8") -> str:
    content_type = header_value(headers, "content-type", "") or ""
    for param in content_type.split(";")[1:]:
        name, _, value = param.strip().partition("=")
        if name.lower() == "charset" and value:
            return value.strip('"')
    return default


def decode_body(body: bytes, headers: Iterable[tuple[str, str]]) -> str:
    try:
        return body.decode(charset_of(headers), errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")
