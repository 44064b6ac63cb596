"""
Account mapper tests.

Implicit accounts are remapped through the key mapper; named and
ETH-implicit accounts pass through unchanged.
"""

from unittest.mock import patch

import pytest

from chain_mirror.crypto.ed25519 import Ed25519PublicKey
from chain_mirror.keys.mapping import map_account, map_key
from chain_mirror.runtime.account_id import (
    AccountId,
    AccountType,
    derive_implicit_account_id,
    public_key_from_implicit_account,
)
from chain_mirror.runtime.errors import InvalidAccountIdError, InvalidKeyError, InvariantViolation

DEFAULT_EXTRA_ACCOUNT = "77a19186f71e9825b281ae3ee12f2b83d43bc8049e8f03ebedbe3352fd262491"
MAPPED_ACCOUNT_ZERO_SECRET = "f0a127a689adc415942da4c914abecb3aec3370e9dd34da0fcf302bbd3800596"
MAPPED_ACCOUNT_NO_SECRET = "03f606068c73326cbacdd99a5ebe7daa326a1ec9da33ef5abb60d016706c7ae4"

ETH_IMPLICIT_ACCOUNT = "0x96791e923f8cf697ad9c3290f2c9059f0231b24c"
NAMED_ACCOUNTS = ["alice.near", "test-account_1.testnet", "aa", "near"]


@pytest.mark.unit
def test_implicit_account_golden(zero_secret):
    mapped = map_account(DEFAULT_EXTRA_ACCOUNT, zero_secret)

    assert isinstance(mapped, AccountId)
    assert mapped == MAPPED_ACCOUNT_ZERO_SECRET
    assert mapped.account_type is AccountType.IMPLICIT


@pytest.mark.unit
def test_implicit_account_no_secret():
    assert map_account(AccountId(DEFAULT_EXTRA_ACCOUNT)) == MAPPED_ACCOUNT_NO_SECRET


@pytest.mark.unit
@pytest.mark.parametrize("use_secret", [False, True])
def test_implicit_account_embeds_mapped_key(ones_secret, use_secret):
    secret = ones_secret if use_secret else None
    source_key = Ed25519PublicKey(bytes(range(32)))
    account = derive_implicit_account_id(source_key)

    mapped = map_account(account, secret)

    assert public_key_from_implicit_account(mapped) == map_key(source_key, secret).public_key()


@pytest.mark.unit
def test_implicit_account_mapping_is_deterministic(ones_secret):
    assert map_account(DEFAULT_EXTRA_ACCOUNT, ones_secret) == map_account(DEFAULT_EXTRA_ACCOUNT, ones_secret)


@pytest.mark.unit
def test_implicit_account_depends_on_secret(zero_secret, ones_secret):
    assert map_account(DEFAULT_EXTRA_ACCOUNT, zero_secret) != map_account(DEFAULT_EXTRA_ACCOUNT, ones_secret)


@pytest.mark.unit
@pytest.mark.parametrize("account", NAMED_ACCOUNTS)
@pytest.mark.parametrize("use_secret", [False, True])
def test_named_account_passthrough(account, zero_secret, use_secret):
    secret = zero_secret if use_secret else None

    mapped = map_account(account, secret)

    assert mapped == account
    assert mapped.account_type is AccountType.NAMED


@pytest.mark.unit
@pytest.mark.parametrize("use_secret", [False, True])
def test_eth_implicit_account_is_not_mapped(zero_secret, use_secret):
    # ETH-implicit accounts are mirrored under their source id for now, so
    # the operator holds no derived key for them on the target chain.
    secret = zero_secret if use_secret else None

    mapped = map_account(ETH_IMPLICIT_ACCOUNT, secret)

    assert mapped == ETH_IMPLICIT_ACCOUNT
    assert mapped.account_type is AccountType.ETH_IMPLICIT


@pytest.mark.unit
def test_same_account_object_returned_for_passthrough():
    account = AccountId("bob.near")
    assert map_account(account) is account


@pytest.mark.unit
def test_invalid_account_id_rejected():
    with pytest.raises(InvalidAccountIdError):
        map_account("Not A Valid Account")


@pytest.mark.unit
def test_unparseable_implicit_account_is_fatal():
    with patch(
        "chain_mirror.keys.mapping.public_key_from_implicit_account",
        side_effect=InvalidKeyError("bad key"),
    ):
        with pytest.raises(InvariantViolation) as exc_info:
            map_account(DEFAULT_EXTRA_ACCOUNT)

    assert exc_info.value.details == {"account_id": DEFAULT_EXTRA_ACCOUNT}
    assert isinstance(exc_info.value.cause, InvalidKeyError)
