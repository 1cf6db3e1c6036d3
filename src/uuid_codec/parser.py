"""Canonical UUID string parser."""

from uuid_codec.exceptions import InvalidArgumentError
from uuid_codec.value import UUID, UUID_STR_LEN

HYPHEN_POSITIONS = frozenset({8, 13, 18, 23})
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def find_syntax_error(text: object) -> str | None:
    """Check ``text`` against the canonical UUID grammar.

    Args:
        text: Candidate string

    Returns:
        Description of the first violation, or None if the string is valid
    """
    if text is None:
        return "UUID string is required"
    if not isinstance(text, str):
        return f"UUID string must be str, got {type(text).__name__}"
    if len(text) != UUID_STR_LEN:
        return f"UUID string must be exactly {UUID_STR_LEN} characters, got {len(text)}"

    for position, char in enumerate(text):
        if position in HYPHEN_POSITIONS:
            if char != "-":
                return f"Expected '-' at position {position}, got {char!r}"
            continue
        if char not in HEX_DIGITS:
            return f"Invalid hex digit {char!r} at position {position}"

    return None


def from_string(text: str) -> UUID:
    """Parse a UUID from its canonical 36-character form.

    Hex digits may be upper or lower case. Version and variant bits are
    not checked.

    Args:
        text: String such as ``44b35f73-cfbd-43b4-8fef-ca7baea1375f``

    Returns:
        Parsed UUID

    Raises:
        InvalidArgumentError: If text is absent, has the wrong length,
            a misplaced hyphen or a non-hex character
    """
    error = find_syntax_error(text)
    if error is not None:
        raise InvalidArgumentError(f"Invalid UUID string: {error}")

    out = bytearray()
    position = 0
    while position < UUID_STR_LEN:
        if position in HYPHEN_POSITIONS:
            position += 1
            continue
        out.append(int(text[position:position + 2], 16))
        position += 2

    return UUID(bytes(out))
