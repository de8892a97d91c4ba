"""Exception taxonomy shared by the dictionary algebra, codecs and wires."""


class VeranoError(Exception):
    """Base class for all verano errors."""


class TransportError(VeranoError):
    """A wire could not complete the network exchange."""


class TransportTimeout(TransportError):
    """A wire did not receive a timely response."""


class SerializationError(VeranoError):
    """A body codec could not serialize or deserialize a payload."""


class FormatError(VeranoError):
    """A typed view could not build a well-formed value from raw dictionary strings."""


class PrefixCollisionError(VeranoError):
    """Two namespaces (or a namespace and a reserved key) would share keys."""

    def __init__(self, prefix: str, other: str, kind: str | None = None):
        if kind:
            super().__init__(f"namespace prefix {prefix!r} collides with {other!r} ({kind})")
        else:
            super().__init__(f"namespace prefix {prefix!r} collides with {other!r}")
        self.prefix = prefix
        self.other = other


class UnexpectedStatusError(VeranoError):
    """A response arrived with a status the caller did not expect."""

    def __init__(self, status: int, reason: str, expected: tuple[int, ...]):
        wanted = ", ".join(str(code) for code in expected)
        super().__init__(f"unexpected status {status} {reason!r}, expected one of: {wanted}")
        self.status = status
        self.reason = reason
        self.expected = expected
