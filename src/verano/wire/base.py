"""Wire interface.

A wire executes a request dictionary and returns the response dictionary,
encoded with the same flat keys and namespaces as requests so the same
views work on both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..primitives import Dict


class Wire(ABC):
    """Minimal contract for a transport."""

    @abstractmethod
    async def send(self, request: Dict) -> Dict:
        """Send ``request`` and return the response.

        Raises TransportError if the exchange fails.
        """
