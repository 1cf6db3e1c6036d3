"""Raw 16-byte buffer import and export."""

from uuid_codec.exceptions import InvalidArgumentError
from uuid_codec.value import UUID, UUID_SIZE, require_uuid


def _require_buffer(data: object, name: str = "data") -> bytes:
    if data is None:
        raise InvalidArgumentError(f"{name} is required")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"{name} must be a bytes-like object, got {type(data).__name__}"
        )
    raw = bytes(data)
    if len(raw) != UUID_SIZE:
        raise InvalidArgumentError(
            f"{name} must be exactly {UUID_SIZE} bytes, got {len(raw)}"
        )
    return raw


def _swap_guid_fields(raw: bytes) -> bytes:
    # COM/GUID layout: Data1 (4), Data2 (2), Data3 (2) little-endian, Data4 (8) as-is
    return raw[3::-1] + raw[5:3:-1] + raw[7:5:-1] + raw[8:]


def from_buffer(data: bytes) -> UUID:
    """Import a UUID from 16 bytes in network (big-endian) order."""
    return UUID(_require_buffer(data))


def from_buffer_le(data: bytes) -> UUID:
    """Import a UUID from 16 bytes in Microsoft GUID (little-endian) order.

    The first three fields are byte-swapped; the last 8 bytes are copied
    verbatim, so ``33221100-5544-7766-8899-aabbccddeeff`` imports as
    ``00112233-4455-6677-8899-aabbccddeeff``.
    """
    return UUID(_swap_guid_fields(_require_buffer(data)))


def to_buffer(value: UUID) -> bytes:
    """Export the 16 bytes of a UUID in network order."""
    return require_uuid(value).value


def to_buffer_le(value: UUID) -> bytes:
    """Export the 16 bytes of a UUID in Microsoft GUID order."""
    return _swap_guid_fields(require_uuid(value).value)


def require_writable(out: object, size: int, name: str = "out") -> memoryview:
    """Return a writable byte view of ``out`` holding at least ``size`` bytes."""
    if out is None:
        raise InvalidArgumentError(f"{name} buffer is required")
    try:
        view = memoryview(out)  # type: ignore[arg-type]
    except TypeError as e:
        raise InvalidArgumentError(
            f"{name} must support the buffer protocol, got {type(out).__name__}"
        ) from e
    if view.readonly:
        raise InvalidArgumentError(f"{name} buffer is read-only")
    if not view.c_contiguous:
        raise InvalidArgumentError(f"{name} buffer must be contiguous")
    view = view.cast("B")
    if len(view) < size:
        raise InvalidArgumentError(
            f"{name} buffer too small: need {size} bytes, got {len(view)}"
        )
    return view


def to_buffer_into(value: UUID, out: bytearray) -> int:
    """Copy the UUID bytes into a caller-supplied buffer.

    Returns:
        Number of bytes written (always 16)

    Raises:
        InvalidArgumentError: If value is not a UUID or out is absent,
            read-only or shorter than 16 bytes. Nothing is written then.
    """
    value = require_uuid(value)
    view = require_writable(out, UUID_SIZE)
    view[:UUID_SIZE] = value.value
    return UUID_SIZE
