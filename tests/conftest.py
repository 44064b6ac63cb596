"""
Shared fixtures for the key mapping tests.

Golden values were computed independently with OpenSSL (HKDF-SHA256 and
Ed25519 key generation) and are pinned here.
"""

import pytest

from chain_mirror.crypto.ed25519 import Ed25519PublicKey
from chain_mirror.crypto.secp256k1 import Secp256k1PublicKey
from chain_mirror.keys.mapping import SECRET_LEN

# Public half of the fixed default extra key
DEFAULT_EXTRA_PUBLIC_HEX = "77a19186f71e9825b281ae3ee12f2b83d43bc8049e8f03ebedbe3352fd262491"

# secp256k1 generator point
GENERATOR_COMPRESSED_HEX = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


@pytest.fixture
def zero_secret():
    """All-zero operator secret."""
    return bytes(SECRET_LEN)


@pytest.fixture
def ones_secret():
    """Operator secret of 0x01 bytes."""
    return b"\x01" * SECRET_LEN


@pytest.fixture
def ed25519_public():
    return Ed25519PublicKey.from_hex(DEFAULT_EXTRA_PUBLIC_HEX)


@pytest.fixture
def secp256k1_public():
    return Secp256k1PublicKey.from_hex(GENERATOR_COMPRESSED_HEX)
