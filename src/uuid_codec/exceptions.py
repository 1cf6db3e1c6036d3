"""Exceptions raised by uuid-codec operations."""


class UUIDCodecError(Exception):
    """Base exception for uuid-codec errors."""

    pass


class InvalidArgumentError(UUIDCodecError, ValueError):
    """Input or output argument is absent, malformed or wrongly sized."""

    pass


class OutOfMemoryError(UUIDCodecError, MemoryError):
    """The hash primitive could not allocate its working context."""

    def __init__(self, algorithm: str = "sha1"):
        super().__init__(
            f"Could not allocate a {algorithm} context for UUID generation."
        )
        self.algorithm = algorithm


class UnsupportedError(UUIDCodecError):
    """The hash primitive failed in a way this library does not recognise."""

    pass
