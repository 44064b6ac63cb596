"""
Chain Mirror - deterministic key and account remapping

Maps source chain public keys and implicit accounts to keys and accounts
the mirror operator controls on the target chain.
"""

from .crypto import (
    Ed25519PublicKey,
    Ed25519SecretKey,
    Secp256k1PublicKey,
    Secp256k1SecretKey,
    KeyType,
    PublicKey,
    SecretKey,
    key_to_string,
    parse_public_key,
    parse_secret_key,
)
from .runtime.errors import *
from .runtime.account_id import AccountId, AccountType, derive_implicit_account_id
from .keys import SECRET_LEN, DEFAULT_EXTRA_KEY, map_key, map_account, default_extra_key
from .config import MirrorConfig

__version__ = "0.1.0"
__all__ = [
    # Keys
    "Ed25519PublicKey",
    "Ed25519SecretKey",
    "Secp256k1PublicKey",
    "Secp256k1SecretKey",
    "KeyType",
    "PublicKey",
    "SecretKey",
    "key_to_string",
    "parse_public_key",
    "parse_secret_key",

    # Accounts
    "AccountId",
    "AccountType",
    "derive_implicit_account_id",

    # Mapping
    "SECRET_LEN",
    "DEFAULT_EXTRA_KEY",
    "map_key",
    "map_account",
    "default_extra_key",
    "MirrorConfig",

    # Errors
    "ErrorCode",
    "MirrorError",
    "InvalidKeyError",
    "InvalidAccountIdError",
    "ConfigError",
    "InvalidSecretError",
    "InvariantViolation",
    "is_fatal",
]
