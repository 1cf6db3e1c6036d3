"""SHA-1 context used for name-based (version 5) generation."""

import hashlib
from typing import Any

from uuid_codec.exceptions import InvalidArgumentError, OutOfMemoryError, UnsupportedError

SHA1_DIGEST_SIZE = 20


class Sha1Context:
    """SHA-1 hashing context with explicit setup/update/finish/free phases.

    Failures are mapped onto the codec error taxonomy:
        - rejected input -> InvalidArgumentError
        - allocation failure -> OutOfMemoryError
        - anything else during setup or update -> UnsupportedError

    Used as a context manager, the context is freed on every exit path,
    including a failed setup:

        >>> with Sha1Context() as ctx:
        ...     ctx.update(b"abc")
        ...     digest = ctx.finish()
    """

    algorithm = "sha1"

    def __init__(self) -> None:
        """Initialize an empty context."""
        self._hash: Any = None
        self.released = False

    def _new_hash(self) -> Any:
        return hashlib.sha1(usedforsecurity=False)

    def setup(self) -> None:
        """Allocate the underlying hash object."""
        try:
            self._hash = self._new_hash()
        except TypeError as e:
            raise InvalidArgumentError(f"{self.algorithm} rejected its setup input") from e
        except MemoryError as e:
            raise OutOfMemoryError(self.algorithm) from e
        except Exception as e:
            raise UnsupportedError(f"{self.algorithm} is not available: {e}") from e

    def update(self, data: bytes) -> None:
        """Feed bytes into the digest."""
        if self._hash is None:
            raise InvalidArgumentError(f"{self.algorithm} context is not set up")
        try:
            self._hash.update(data)
        except (TypeError, ValueError, BufferError) as e:
            raise InvalidArgumentError(f"{self.algorithm} rejected input: {e}") from e
        except MemoryError as e:
            raise OutOfMemoryError(self.algorithm) from e
        except Exception as e:
            raise UnsupportedError(f"{self.algorithm} update failed: {e}") from e

    def finish(self) -> bytes:
        """Return the digest. The context cannot be updated afterwards."""
        if self._hash is None:
            raise InvalidArgumentError(f"{self.algorithm} context is not set up")
        digest = self._hash.digest()
        self._hash = None
        if len(digest) != SHA1_DIGEST_SIZE:
            raise InvalidArgumentError(
                f"{self.algorithm} returned {len(digest)} bytes, "
                f"expected {SHA1_DIGEST_SIZE}"
            )
        return bytes(digest)

    def free(self) -> None:
        """Drop the underlying hash object."""
        self._hash = None
        self.released = True

    def __enter__(self) -> "Sha1Context":
        try:
            self.setup()
        except BaseException:
            self.free()
            raise
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.free()
