"""Well-known namespace UUIDs for name-based generation (RFC 9562 section 6.6)."""

from uuid_codec.exceptions import InvalidArgumentError
from uuid_codec.parser import from_string
from uuid_codec.value import UUID

NAMESPACE_DNS = from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = from_string("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = from_string("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = from_string("6ba7b814-9dad-11d1-80b4-00c04fd430c8")

BUILTIN_NAMESPACES: dict[str, UUID] = {
    "dns": NAMESPACE_DNS,
    "url": NAMESPACE_URL,
    "oid": NAMESPACE_OID,
    "x500": NAMESPACE_X500,
}


def resolve_namespace(name: str) -> UUID:
    """Resolve a namespace by name or canonical UUID string.

    Args:
        name: One of ``dns``, ``url``, ``oid``, ``x500`` (any case) or a UUID

    Returns:
        Namespace UUID

    Raises:
        InvalidArgumentError: If name is not a string, or is neither a known
            namespace nor a UUID

    Example:
        >>> resolve_namespace("dns") == NAMESPACE_DNS
        True
    """
    if name is None:
        raise InvalidArgumentError("namespace is required")
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"namespace must be a name or UUID string, got {type(name).__name__}"
        )
    if name.lower() in BUILTIN_NAMESPACES:
        return BUILTIN_NAMESPACES[name.lower()]
    try:
        return from_string(name)
    except InvalidArgumentError as e:
        raise InvalidArgumentError(
            f"Unknown namespace: {name}. "
            f"Available: {', '.join(BUILTIN_NAMESPACES)} or a canonical UUID string"
        ) from e
