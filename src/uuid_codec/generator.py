"""UUID generation (versions 4 and 5)."""

import secrets
from collections.abc import Callable, Iterable
from typing import Any

from uuid_codec.exceptions import InvalidArgumentError, UnsupportedError
from uuid_codec.hashing import Sha1Context
from uuid_codec.value import (
    UUID,
    UUID_SIZE,
    VARIANT_MASK,
    VARIANT_OFFSET,
    VARIANT_POSITION,
    VERSION_MASK,
    VERSION_OFFSET,
    VERSION_POSITION,
    require_uuid,
)

UUID_V4_VERSION = 4
UUID_V5_VERSION = 5
RFC9562_VARIANT = 2

RandomSource = Callable[[int], bytes]


def stamp_version_and_variant(data: bytearray, version: int, variant: int) -> None:
    """Overwrite the version nibble and variant bits in place."""
    data[VERSION_POSITION] &= ~VERSION_MASK & 0xFF
    data[VARIANT_POSITION] &= ~VARIANT_MASK & 0xFF
    data[VERSION_POSITION] |= (version << VERSION_OFFSET) & VERSION_MASK
    data[VARIANT_POSITION] |= (variant << VARIANT_OFFSET) & VARIANT_MASK


def generate_v4(random_source: RandomSource = secrets.token_bytes) -> UUID:
    """Generate a random (version 4) UUID.

    Args:
        random_source: Callable returning N cryptographically secure bytes

    Returns:
        Generated UUID

    Raises:
        InvalidArgumentError: If the random source is missing or misbehaves
    """
    if random_source is None:
        raise InvalidArgumentError("random_source is required")

    random_bytes = random_source(UUID_SIZE)
    if not isinstance(random_bytes, (bytes, bytearray)) or len(random_bytes) != UUID_SIZE:
        raise InvalidArgumentError(
            f"random_source must return exactly {UUID_SIZE} bytes"
        )

    data = bytearray(random_bytes)
    stamp_version_and_variant(data, UUID_V4_VERSION, RFC9562_VARIANT)
    return UUID(bytes(data))


def generate_v5(
    namespace: UUID,
    data: bytes | str,
    context_factory: Callable[[], Sha1Context] = Sha1Context,
) -> UUID:
    """Generate a name-based (version 5) UUID.

    The result is the first 16 bytes of SHA-1(namespace bytes + data) with
    the version and variant fields overwritten.

    Args:
        namespace: Namespace UUID
        data: Name to hash; ``str`` is encoded as UTF-8
        context_factory: Builds the SHA-1 context

    Returns:
        Generated UUID

    Raises:
        InvalidArgumentError: If namespace/data are missing or rejected by SHA-1
        OutOfMemoryError: If the SHA-1 context cannot be allocated
        UnsupportedError: If SHA-1 fails for any other reason

    Example:
        >>> ns = from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
        >>> str(generate_v5(ns, "www.example.com"))
        '2ed6657d-e927-568b-95e1-2665a8aea6a2'
    """
    namespace = require_uuid(namespace, "namespace")
    if data is None:
        raise InvalidArgumentError("data is required")
    if isinstance(data, str):
        data = data.encode("utf-8")

    with context_factory() as ctx:
        ctx.update(namespace.value)
        ctx.update(data)
        digest = ctx.finish()

    out = bytearray(digest[:UUID_SIZE])
    stamp_version_and_variant(out, UUID_V5_VERSION, RFC9562_VARIANT)
    return UUID(bytes(out))


class UUIDGenerator:
    """UUID generator bound to a version and, for version 5, a namespace."""

    SUPPORTED_VERSIONS = (UUID_V4_VERSION, UUID_V5_VERSION)

    def __init__(self, version: int = UUID_V4_VERSION, namespace: UUID | None = None, **kwargs: Any):
        """Initialize generator.

        Args:
            version: UUID version to produce (4 or 5)
            namespace: Default namespace for version 5
            **kwargs: Passed through to the generation function
                (``random_source`` or ``context_factory``)

        Raises:
            UnsupportedError: If version is not 4 or 5
            InvalidArgumentError: If version 5 is requested without a namespace
        """
        if version not in self.SUPPORTED_VERSIONS:
            raise UnsupportedError(
                f"Unsupported UUID version: {version}. "
                f"Available: {', '.join(str(v) for v in self.SUPPORTED_VERSIONS)}"
            )
        if version == UUID_V5_VERSION:
            namespace = require_uuid(namespace, "namespace")
        self.version = version
        self.namespace = namespace
        self.options = kwargs

    def generate(self, data: bytes | str | None = None) -> UUID:
        """Generate one UUID.

        Args:
            data: Name to hash (version 5 only)

        Returns:
            Generated UUID
        """
        if self.version == UUID_V4_VERSION:
            return generate_v4(**self.options)
        return generate_v5(self.namespace, data, **self.options)  # type: ignore[arg-type]

    def generate_batch(self, count: int | None = None, names: Iterable[bytes | str] | None = None) -> list[UUID]:
        """Generate several UUIDs.

        Version 4 takes a ``count``; version 5 takes the ``names`` to hash.

        Returns:
            List of generated UUIDs
        """
        if self.version == UUID_V5_VERSION:
            if names is None:
                raise InvalidArgumentError("names are required for version 5 batches")
            return [self.generate(name) for name in names]

        if count is None or count < 0:
            raise InvalidArgumentError(f"count must be a non-negative integer, got {count}")
        return [self.generate() for _ in range(count)]
