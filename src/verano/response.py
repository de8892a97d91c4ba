"""Response facade: a wire plus the inputs describing one request."""

from __future__ import annotations

from .errors import UnexpectedStatusError
from .parts import ReasonPhrase, Status
from .primitives import Dict, DictInput, build
from .wire.base import Wire


class Response:
    """
    A request waiting to be sent.

    Example::

        response = await Response(
            TcpWire("https://example.com"),
            Post("/users", JsonBody({"name": "ana"})),
        ).expect_status(201)
    """

    def __init__(self, wire: Wire, *inputs: DictInput):
        self._wire = wire
        self._inputs = inputs

    def request(self) -> Dict:
        return build(*self._inputs)

    async def touch(self) -> Dict:
        """Send the request and return the response dictionary."""
        return await self._wire.send(self.request())

    async def expect_status(self, *codes: int) -> Dict:
        """Like touch(), but raise UnexpectedStatusError for any other status."""
        response = await self.touch()
        status = Status.of(response)
        if status not in codes:
            raise UnexpectedStatusError(status, ReasonPhrase.of(response), codes)
        return response
