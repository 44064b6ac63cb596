"""
Key family dispatch and the chain's textual key encoding.

Keys render as ``"<family>:<base58 bytes>"``, e.g. ``ed25519:9Q7o...``.
A string without a family prefix is read as ed25519.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

import base58

from .ed25519 import Ed25519PublicKey, Ed25519SecretKey
from .secp256k1 import Secp256k1PublicKey, Secp256k1SecretKey
from ..runtime.errors import ErrorCode, InvalidKeyError


class KeyType(str, Enum):
    """Curve family of a key."""

    ED25519 = "ed25519"
    SECP256K1 = "secp256k1"


PublicKey = Union[Ed25519PublicKey, Secp256k1PublicKey]
SecretKey = Union[Ed25519SecretKey, Secp256k1SecretKey]


def key_type_of(key: Union[PublicKey, SecretKey]) -> KeyType:
    """Return the curve family of a public or secret key."""
    if isinstance(key, (Ed25519PublicKey, Ed25519SecretKey)):
        return KeyType.ED25519
    if isinstance(key, (Secp256k1PublicKey, Secp256k1SecretKey)):
        return KeyType.SECP256K1
    raise TypeError(f"Unsupported key type: {type(key).__name__}")


def key_to_string(key: Union[PublicKey, SecretKey]) -> str:
    """Encode a key as ``<family>:<base58>``."""
    return f"{key_type_of(key).value}:{base58.b58encode(key.to_bytes()).decode('ascii')}"


def _split(value: str):
    if ":" in value:
        prefix, _, data = value.partition(":")
        try:
            key_type = KeyType(prefix.lower())
        except ValueError as e:
            raise InvalidKeyError(f"Unknown key type '{prefix}'", ErrorCode.INVALID_KEY_TYPE, cause=e)
    else:
        key_type, data = KeyType.ED25519, value
    try:
        raw = base58.b58decode(data)
    except ValueError as e:
        raise InvalidKeyError(f"Invalid base58 key data: {e}", ErrorCode.INVALID_KEY_ENCODING, cause=e)
    return key_type, raw


def parse_public_key(value: str) -> PublicKey:
    """
    Parse a public key from its textual form.

    Raises:
        InvalidKeyError: If the prefix, encoding or length is wrong
    """
    key_type, raw = _split(value)
    if key_type is KeyType.ED25519:
        return Ed25519PublicKey(raw)
    return Secp256k1PublicKey(raw)


def parse_secret_key(value: str) -> SecretKey:
    """
    Parse a secret key from its textual form.

    Raises:
        InvalidKeyError: If the prefix, encoding, length or scalar is wrong
    """
    key_type, raw = _split(value)
    if key_type is KeyType.ED25519:
        return Ed25519SecretKey(raw)
    try:
        return Secp256k1SecretKey(raw)
    except ValueError as e:
        raise InvalidKeyError(f"Invalid SECP256K1 scalar: {e}", cause=e)


__all__ = [
    "KeyType",
    "PublicKey",
    "SecretKey",
    "key_type_of",
    "key_to_string",
    "parse_public_key",
    "parse_secret_key",
]
