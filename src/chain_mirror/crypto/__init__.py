"""
Cryptographic key types for the mirror.

Provides the Ed25519 and SECP256K1 key families and their textual encoding.
"""

from .ed25519 import Ed25519PublicKey, Ed25519SecretKey
from .secp256k1 import Secp256k1PublicKey, Secp256k1SecretKey, CURVE_ORDER, is_valid_scalar
from .keys import KeyType, PublicKey, SecretKey, key_type_of, key_to_string, parse_public_key, parse_secret_key

__all__ = [
    "Ed25519PublicKey",
    "Ed25519SecretKey",
    "Secp256k1PublicKey",
    "Secp256k1SecretKey",
    "CURVE_ORDER",
    "is_valid_scalar",
    "KeyType",
    "PublicKey",
    "SecretKey",
    "key_type_of",
    "key_to_string",
    "parse_public_key",
    "parse_secret_key",
]
