"""UUID value type."""

from dataclasses import dataclass

from uuid_codec.exceptions import InvalidArgumentError

UUID_SIZE = 16
UUID_STR_LEN = 36
UUID_BASE64_LEN = 24
UUID_BASE64URL_LEN = 22

VERSION_POSITION = 6
VERSION_OFFSET = 4
VERSION_MASK = 0xF0
VARIANT_POSITION = 8
VARIANT_OFFSET = 6
VARIANT_MASK = 0xC0


@dataclass(frozen=True)
class UUID:
    """A 16-byte RFC 9562 UUID.

    The value carries no identity beyond its bytes: two instances holding
    the same bytes compare (and hash) equal.

    Example:
        >>> uuid = UUID(bytes.fromhex("44b35f73cfbd43b48fefca7baea1375f"))
        >>> uuid.version, uuid.variant
        (4, 2)
    """

    value: bytes

    def __post_init__(self) -> None:
        """Check size and freeze the payload as ``bytes``."""
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                f"UUID value must be bytes, got {type(self.value).__name__}"
            )
        data = bytes(self.value)
        if len(data) != UUID_SIZE:
            raise InvalidArgumentError(
                f"UUID value must be exactly {UUID_SIZE} bytes, got {len(data)}"
            )
        object.__setattr__(self, "value", data)

    @property
    def version(self) -> int:
        """High nibble of byte 6."""
        return self.value[VERSION_POSITION] >> VERSION_OFFSET

    @property
    def variant(self) -> int:
        """Top two bits of byte 8."""
        return self.value[VARIANT_POSITION] >> VARIANT_OFFSET

    def copy(self) -> "UUID":
        """Return a new UUID holding the same 16 bytes."""
        return UUID(bytes(self.value))

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        from uuid_codec.formatter import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f"UUID('{self}')"


def require_uuid(value: object, name: str = "value") -> UUID:
    """Return ``value`` if it is a UUID, raise InvalidArgumentError otherwise."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if not isinstance(value, UUID):
        raise InvalidArgumentError(
            f"{name} must be a UUID, got {type(value).__name__}"
        )
    return value
