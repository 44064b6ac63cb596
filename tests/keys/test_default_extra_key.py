"""Default extra key tests."""

import pytest

from chain_mirror.crypto.ed25519 import Ed25519SecretKey
from chain_mirror.keys.mapping import DEFAULT_EXTRA_KEY, default_extra_key, map_key

DEFAULT_EXTRA_KEY_HEX = (
    "d5af1b41ef3f407ebb605acf2a4b01c76d050043cf509313357e8e1ea2a8619b"
    "77a19186f71e9825b281ae3ee12f2b83d43bc8049e8f03ebedbe3352fd262491"
)
MAPPED_ZERO_SECRET_HEX = (
    "d0fe2fd89b90dccd14f53373664b85807954fa043278f0bf2f7f0b13dda6f7c7"
    "f0a127a689adc415942da4c914abecb3aec3370e9dd34da0fcf302bbd3800596"
)
MAPPED_ONES_SECRET_HEX = (
    "e657b244cbf9bb2f61f5ac7fcbad4b8e0931ac37f26a6ebdea65214075931286"
    "884d7ae68d7cb8e23f5132c100b812c8b11f95f7b9f6f89890f6bfa15ae30358"
)


@pytest.mark.unit
def test_no_secret_returns_constant():
    key = default_extra_key()

    assert key is DEFAULT_EXTRA_KEY
    assert key.to_bytes().hex() == DEFAULT_EXTRA_KEY_HEX


@pytest.mark.unit
def test_constant_is_consistent_ed25519_key():
    # The stored public half matches the one generated from the seed
    assert Ed25519SecretKey.from_seed(DEFAULT_EXTRA_KEY.seed) == DEFAULT_EXTRA_KEY


@pytest.mark.unit
def test_zero_secret_golden(zero_secret):
    key = default_extra_key(zero_secret)

    assert key.to_bytes().hex() == MAPPED_ZERO_SECRET_HEX
    assert key != default_extra_key()


@pytest.mark.unit
def test_ones_secret_golden(ones_secret):
    assert default_extra_key(ones_secret).to_bytes().hex() == MAPPED_ONES_SECRET_HEX


@pytest.mark.unit
def test_matches_key_mapper(zero_secret, ones_secret):
    for secret in (zero_secret, ones_secret):
        expected = map_key(default_extra_key().public_key(), secret)
        assert default_extra_key(secret) == expected


@pytest.mark.unit
def test_stable_across_calls(ones_secret):
    assert default_extra_key(ones_secret) == default_extra_key(ones_secret)
