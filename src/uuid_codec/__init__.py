"""
uuid-codec - RFC 9562 UUID Library

Generates version 4 (random) and version 5 (SHA-1 name-based) UUIDs, imports
them from raw big/little-endian buffers and canonical strings, and encodes
them as canonical strings, base64 and URL-safe base64.
"""

from uuid_codec.binary import from_buffer, from_buffer_le, to_buffer, to_buffer_into, to_buffer_le
from uuid_codec.exceptions import (
    InvalidArgumentError,
    OutOfMemoryError,
    UnsupportedError,
    UUIDCodecError,
)
from uuid_codec.formatter import (
    to_base64,
    to_base64_into,
    to_base64url,
    to_base64url_into,
    to_string,
    to_string_into,
)
from uuid_codec.generator import UUIDGenerator, generate_v4, generate_v5
from uuid_codec.hashing import Sha1Context
from uuid_codec.namespaces import (
    NAMESPACE_DNS,
    NAMESPACE_OID,
    NAMESPACE_URL,
    NAMESPACE_X500,
    resolve_namespace,
)
from uuid_codec.parser import from_string
from uuid_codec.validator import UUIDValidator, ValidationResult
from uuid_codec.value import (
    UUID,
    UUID_BASE64_LEN,
    UUID_BASE64URL_LEN,
    UUID_SIZE,
    UUID_STR_LEN,
)

__version__ = "0.1.0"

__all__ = [
    "UUID",
    "UUID_SIZE",
    "UUID_STR_LEN",
    "UUID_BASE64_LEN",
    "UUID_BASE64URL_LEN",
    "UUIDCodecError",
    "InvalidArgumentError",
    "OutOfMemoryError",
    "UnsupportedError",
    "Sha1Context",
    "UUIDGenerator",
    "generate_v4",
    "generate_v5",
    "from_buffer",
    "from_buffer_le",
    "to_buffer",
    "to_buffer_le",
    "to_buffer_into",
    "from_string",
    "to_string",
    "to_string_into",
    "to_base64",
    "to_base64_into",
    "to_base64url",
    "to_base64url_into",
    "UUIDValidator",
    "ValidationResult",
    "NAMESPACE_DNS",
    "NAMESPACE_URL",
    "NAMESPACE_OID",
    "NAMESPACE_X500",
    "resolve_namespace",
]
