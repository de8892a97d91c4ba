"""HTTP wire backed by :class:`httpx.AsyncClient`.

One client, and so one connection, per request. Every failure of the
exchange is reported as TransportError.
"""

from __future__ import annotations

import logging

import httpx
from typing_extensions import override

from ..errors import TransportError, TransportTimeout
from ..http.framing import HeaderList, combine_headers, header_value
from ..parts import Body, Headers, Method, ReasonPhrase, RequestUri, Status
from ..primitives import Dict, DictInput, build, joined
from ..settings import WireSettings
from .base import Wire

logger = logging.getLogger(__name__)


class TcpWire(Wire):
    """
    Wire that sends requests through httpx.

    The base ``uri`` and any extra ``inputs`` form the wire's parameter
    dictionary; it is joined after each request, so its keys win.

    Example::

        wire = TcpWire("https://example.com", Accept("application/json"))
        response = await wire.send(build(Get("/users")))
    """

    def __init__(
        self,
        uri: str,
        *inputs: DictInput,
        settings: WireSettings | None = None,
    ):
        self._parameters = build(RequestUri(uri), *inputs)
        self._settings = settings if settings is not None else WireSettings()

    @property
    def parameters(self) -> Dict:
        return self._parameters

    def _request_headers(self, message: Dict) -> HeaderList:
        headers: HeaderList = [(kvp.key, kvp.value) for kvp in Headers.of(message)]
        for name, value in (("User-Agent", self._settings.user_agent), ("Connection", "close")):
            if header_value(headers, name) is None:
                headers.append((name, value))
        return headers

    async def _read(self, response: httpx.Response) -> bytes:
        limit = self._settings.max_body_bytes
        body = bytearray()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) > limit:
                raise TransportError(f"response body exceeds {limit} bytes")
        return bytes(body)

    @override
    async def send(self, request: Dict) -> Dict:
        message = joined(request, self._parameters)
        uri = RequestUri.parsed(message)
        url = RequestUri.of(message)
        method = Method.of(message)
        limits = self._settings

        logger.debug("sending %s %s", method, url)
        try:
            async with httpx.AsyncClient(
                timeout=limits.timeout,
                verify=limits.verify_tls,
                follow_redirects=False,
            ) as client:
                async with client.stream(
                    method,
                    url,
                    headers=self._request_headers(message),
                    content=Body.of(message).encode("utf-8"),
                ) as response:
                    payload = await self._read(response)
                    status = response.status_code
                    reason = response.reason_phrase
                    headers = combine_headers(response.headers.multi_items())
                    text = payload.decode(response.encoding or "utf-8", errors="replace")
        except httpx.TimeoutException as e:
            logger.warning("timeout after %ss for %s %s", limits.timeout, method, url)
            raise TransportTimeout(f"no response from {url} within {limits.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning("transport failure for %s %s: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug("received %s %s for %s %s", status, reason, method, url)
        return build(
            Method(method),
            RequestUri(uri.path),
            Status(status),
            ReasonPhrase(reason),
            Body(text),
            Headers(*headers),
        )
