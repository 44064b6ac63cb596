r"""
Deterministic key and account remapping for chain mirroring.

Every source public key is replaced by a secret key of the same family
that the mirror operator controls. Without an operator secret the public
key bytes are used directly as secret material; with one, the material is
derived with HKDF-SHA256 keyed by the secret and bound to the public key.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..crypto.ed25519 import Ed25519PublicKey, Ed25519SecretKey, SEED_LENGTH
from ..crypto.keys import PublicKey, SecretKey
from ..crypto.secp256k1 import Secp256k1PublicKey, Secp256k1SecretKey, SECRET_KEY_SIZE
from ..runtime.account_id import (
    AccountId,
    AccountType,
    derive_implicit_account_id,
    public_key_from_implicit_account,
)
from ..runtime.errors import InvariantViolation, InvalidSecretError, MirrorError

logger = logging.getLogger(__name__)

SECRET_LEN = 32

# Nothing special about this key; it is a fixed, randomly generated one.
# Every target account gets it as a full access key if it has none.
DEFAULT_EXTRA_KEY = Ed25519SecretKey(bytes([
    213, 175, 27, 65, 239, 63, 64, 126, 187, 96, 90, 207, 42, 75, 1, 199, 109, 5, 0, 67, 207, 80,
    147, 19, 53, 126, 142, 30, 162, 168, 97, 155, 119, 161, 145, 134, 247, 30, 152, 37, 178, 129,
    174, 62, 225, 47, 43, 131, 212, 59, 200, 4, 158, 143, 3, 235, 237, 190, 51, 82, 253, 38, 36,
    145,
]))

OperatorSecret = Optional[bytes]


def _check_secret(secret: OperatorSecret) -> None:
    if secret is not None and len(secret) != SECRET_LEN:
        raise InvalidSecretError(
            f"Operator secret must be {SECRET_LEN} bytes, got {len(secret)}"
        )


def _derive(secret: bytes, info: bytes, length: int) -> bytes:
    """HKDF-SHA256 with empty salt: IKM is the operator secret, info the public key."""
    hkdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=None, info=info)
    return hkdf.derive(bytes(secret))


def _secret_material(public_bytes: bytes, secret: OperatorSecret, length: int) -> bytearray:
    if secret is None:
        return bytearray(public_bytes[:length])
    return bytearray(_derive(secret, public_bytes, length))


def _map_ed25519(public: Ed25519PublicKey, secret: OperatorSecret) -> Ed25519SecretKey:
    seed = _secret_material(public.to_bytes(), secret, SEED_LENGTH)
    return Ed25519SecretKey.from_seed(bytes(seed))


def _secp256k1_from_candidate(buf: bytearray, public: Secp256k1PublicKey) -> Secp256k1SecretKey:
    try:
        return Secp256k1SecretKey(bytes(buf))
    except ValueError:
        logger.warning(
            f"SECP256K1 key mapped from {public} is zero or not below the curve order. "
            "Flipping most significant bit."
        )
    # The curve order starts with 0xFF, so flipping the top bit of a zero or
    # too-large candidate always lands in range.
    buf[0] ^= 0x80
    try:
        return Secp256k1SecretKey(bytes(buf))
    except ValueError as e:
        logger.error(f"SECP256K1 key mapped from {public} is still invalid after bit flip")
        raise InvariantViolation(
            "Mapped SECP256K1 scalar is invalid after correction",
            details={"public_key": public.to_hex()},
            cause=e,
        )


def _map_secp256k1(public: Secp256k1PublicKey, secret: OperatorSecret) -> Secp256k1SecretKey:
    buf = _secret_material(public.to_bytes(), secret, SECRET_KEY_SIZE)
    return _secp256k1_from_candidate(buf, public)


def map_key(key: PublicKey, secret: OperatorSecret = None) -> SecretKey:
    """
    Map a source public key to a target secret key of the same family.

    Args:
        key: Source chain public key
        secret: Optional operator secret of ``SECRET_LEN`` bytes

    Returns:
        Ed25519SecretKey or Secp256k1SecretKey matching the input family

    Raises:
        InvalidSecretError: If the secret has the wrong length
        InvariantViolation: If no valid SECP256K1 scalar can be produced
    """
    _check_secret(secret)
    if isinstance(key, Ed25519PublicKey):
        mapped = _map_ed25519(key, secret)
    elif isinstance(key, Secp256k1PublicKey):
        mapped = _map_secp256k1(key, secret)
    else:
        raise TypeError(f"Unsupported public key type: {type(key).__name__}")
    logger.debug(f"Mapped {key} -> {mapped.public_key()}")
    return mapped


def map_account(account_id: Union[AccountId, str], secret: OperatorSecret = None) -> AccountId:
    """
    Map an account id to the account the mirror controls on the target chain.

    Implicit accounts are read as ed25519 public keys, mapped, and turned
    back into the implicit account of the mapped key, so that transfers
    creating implicit accounts create ones we can sign for. Named and
    ETH-implicit accounts are returned unchanged.
    """
    if not isinstance(account_id, AccountId):
        account_id = AccountId(account_id)
    _check_secret(secret)

    account_type = account_id.account_type
    if account_type is AccountType.IMPLICIT:
        try:
            public_key = public_key_from_implicit_account(account_id)
        except MirrorError as e:
            logger.error(f"Implicit account {account_id} does not embed an ed25519 key")
            raise InvariantViolation(
                "Implicit account does not embed an ed25519 public key",
                details={"account_id": str(account_id)},
                cause=e,
            )
        mapped_key = map_key(public_key, secret)
        mapped = derive_implicit_account_id(mapped_key.public_key())
        logger.debug(f"Mapped implicit account {account_id} -> {mapped}")
        return mapped
    # TODO: map ETH-implicit accounts to the address of a mapped secp256k1 key
    return account_id


def default_extra_key(secret: OperatorSecret = None) -> SecretKey:
    """
    Fallback full access key added to target accounts that have none.

    With an operator secret the fixed key is mapped like any other key.
    """
    if secret is None:
        return DEFAULT_EXTRA_KEY
    return map_key(DEFAULT_EXTRA_KEY.public_key(), secret)


__all__ = [
    "SECRET_LEN",
    "DEFAULT_EXTRA_KEY",
    "OperatorSecret",
    "map_key",
    "map_account",
    "default_extra_key",
]
