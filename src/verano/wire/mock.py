"""In-memory wire for tests."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from typing_extensions import override

from ..parts import Body, ContentType, ReasonPhrase, Status
from ..primitives import Dict, DictInput, build
from .base import Wire
from .matchers import Match

logger = logging.getLogger(__name__)


class Answer:
    """A canned response, given when every matcher accepts the request.

    Responses default to ``200 OK``; ``inputs`` override that.
    """

    def __init__(self, *inputs: DictInput, matches: Iterable[Match] = ()):
        self._inputs = inputs
        self._matches = tuple(matches)

    def mismatches(self, request: Dict) -> list[str]:
        found: list[str] = []
        for match in self._matches:
            found.extend(match.apply(request))
        return found

    def respond(self) -> Dict:
        return build(Status(200), ReasonPhrase("OK"), *self._inputs)


class MockWire(Wire):
    """
    Wire answering from a list of :class:`Answer`.

    The first answer whose matchers all accept the request wins; otherwise
    the response is ``404 Not Found`` with the mismatches in the body.
    Every request is recorded.
    """

    def __init__(self, *answers: Answer):
        self._answers = answers
        self._requests: list[Dict] = []
        self._lock = threading.Lock()

    @property
    def requests(self) -> tuple[Dict, ...]:
        with self._lock:
            return tuple(self._requests)

    @property
    def last(self) -> Dict | None:
        with self._lock:
            return self._requests[-1] if self._requests else None

    @override
    async def send(self, request: Dict) -> Dict:
        with self._lock:
            self._requests.append(request)

        problems: list[str] = []
        for answer in self._answers:
            mismatches = answer.mismatches(request)
            if not mismatches:
                return answer.respond()
            problems.extend(mismatches)

        logger.debug("no answer matched request: %s", problems)
        return build(
            Status(404),
            ReasonPhrase("Not Found"),
            ContentType("text/plain; charset=utf-8"),
            Body("\n".join(problems) or "no answers configured"),
        )
