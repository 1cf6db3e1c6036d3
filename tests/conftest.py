"""Pytest configuration and shared fixtures."""

import pytest
from uuid_codec import UUID, from_string

FIRST_V4_BYTES = bytes(
    [0x44, 0xB3, 0x5F, 0x73, 0xCF, 0xBD, 0x43, 0xB4,
     0x8F, 0xEF, 0xCA, 0x7B, 0xAE, 0xA1, 0x37, 0x5F]
)
SECOND_V4_BYTES = bytes(
    [0x6F, 0x2F, 0xD4, 0xCB, 0x94, 0xA0, 0x41, 0xC7,
     0x8D, 0x27, 0x86, 0x4C, 0x6B, 0x13, 0xB8, 0xC0]
)
FIRST_V5_BYTES = bytes(
    [0x05, 0x75, 0xA5, 0x69, 0x51, 0xEB, 0x57, 0x5C,
     0xAF, 0xE4, 0xCE, 0x7F, 0xC0, 0x3B, 0xCD, 0xC5]
)


@pytest.fixture
def first_v4() -> UUID:
    """UUID 44b35f73-cfbd-43b4-8fef-ca7baea1375f."""
    return UUID(FIRST_V4_BYTES)


@pytest.fixture
def second_v4() -> UUID:
    """UUID 6f2fd4cb-94a0-41c7-8d27-864c6b13b8c0."""
    return UUID(SECOND_V4_BYTES)


@pytest.fixture
def first_v5() -> UUID:
    """UUID 0575a569-51eb-575c-afe4-ce7fc03bcdc5."""
    return UUID(FIRST_V5_BYTES)


@pytest.fixture
def dns_namespace() -> UUID:
    """The RFC 9562 DNS namespace."""
    return from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
