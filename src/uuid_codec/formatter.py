"""Canonical string and base64 encodings of a UUID."""

import base64

from uuid_codec.binary import require_writable
from uuid_codec.value import UUID, UUID_BASE64_LEN, UUID_BASE64URL_LEN, UUID_STR_LEN, require_uuid

_URLSAFE_TABLE = str.maketrans("+/", "-_")


def to_string(value: UUID) -> str:
    """Format a UUID as lowercase ``8-4-4-4-12`` hex."""
    h = require_uuid(value).value.hex()
    return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


def to_base64(value: UUID) -> str:
    """Encode a UUID as padded RFC 4648 base64 (24 characters)."""
    return base64.b64encode(require_uuid(value).value).decode("ascii")


def to_base64url(value: UUID) -> str:
    """Encode a UUID as unpadded RFC 4648 section 5 base64 (22 characters).

    The padded standard form always ends in ``==``; cutting it to 22
    characters drops exactly the padding.
    """
    return to_base64(value).translate(_URLSAFE_TABLE)[:UUID_BASE64URL_LEN]


def _write_text(text: str, out: bytearray, length: int) -> int:
    view = require_writable(out, length + 1)
    view[:length] = text.encode("ascii")
    view[length] = 0
    return length


def to_string_into(value: UUID, out: bytearray) -> int:
    """Write the canonical string plus a NUL terminator into ``out``.

    Returns:
        Number of characters written, excluding the terminator (36)

    Raises:
        InvalidArgumentError: If out is absent, read-only or shorter than
            37 bytes. Nothing is written then.
    """
    text = to_string(value)
    return _write_text(text, out, UUID_STR_LEN)


def to_base64_into(value: UUID, out: bytearray) -> int:
    """Write the base64 form plus a NUL terminator (needs 25 bytes)."""
    text = to_base64(value)
    return _write_text(text, out, UUID_BASE64_LEN)


def to_base64url_into(value: UUID, out: bytearray) -> int:
    """Write the base64url form plus a NUL terminator (needs 23 bytes)."""
    text = to_base64url(value)
    return _write_text(text, out, UUID_BASE64URL_LEN)
