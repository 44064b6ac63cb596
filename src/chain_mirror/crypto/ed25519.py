"""
Ed25519 keys for the mirror's key mapping.

Secret keys use the chain's 64 byte layout: the 32 byte signing seed
followed by the 32 byte public key derived from it.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey,
)

from ..runtime.errors import ErrorCode, InvalidKeyError

PUBLIC_KEY_LENGTH = 32
SEED_LENGTH = 32
KEYPAIR_LENGTH = SEED_LENGTH + PUBLIC_KEY_LENGTH
SIGNATURE_LENGTH = 64


class Ed25519PublicKey:
    """
    Ed25519 public key.

    Only the length is checked on construction; implicit account ids can
    carry arbitrary 32 byte values and must still round-trip.
    """

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize from 32-byte public key.

        Args:
            public_key_bytes: 32-byte Ed25519 public key

        Raises:
            InvalidKeyError: If key has the wrong length
        """
        public_key_bytes = bytes(public_key_bytes)
        if len(public_key_bytes) != PUBLIC_KEY_LENGTH:
            raise InvalidKeyError(
                f"Ed25519 public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key_bytes)}",
                ErrorCode.INVALID_KEY_ENCODING,
            )
        self._key_bytes = public_key_bytes

    @classmethod
    def from_hex(cls, hex_string: str) -> Ed25519PublicKey:
        """Create public key from hex string."""
        try:
            key_bytes = bytes.fromhex(hex_string)
        except ValueError as e:
            raise InvalidKeyError(f"Invalid hex string: {e}", ErrorCode.INVALID_KEY_ENCODING, cause=e)
        return cls(key_bytes)

    def to_bytes(self) -> bytes:
        """Get the 32-byte public key."""
        return self._key_bytes

    def to_hex(self) -> str:
        """Get the public key as hex string."""
        return self._key_bytes.hex()

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature against a message.

        Returns False for bad signatures and for byte strings that are not
        valid curve points.
        """
        if len(signature) != SIGNATURE_LENGTH:
            return False
        try:
            CryptoEd25519PublicKey.from_public_bytes(self._key_bytes).verify(signature, message)
        except (InvalidSignature, ValueError):
            return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ed25519PublicKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(("ed25519", self._key_bytes))

    def __str__(self) -> str:
        return f"Ed25519PublicKey({self.to_hex()})"

    def __repr__(self) -> str:
        return f"Ed25519PublicKey.from_hex('{self.to_hex()}')"


class Ed25519SecretKey:
    """
    Ed25519 secret key in seed‖public form.

    The repr shows only the public half.
    """

    def __init__(self, keypair_bytes: bytes):
        """
        Initialize from the 64-byte seed‖public layout.

        Raises:
            InvalidKeyError: If key has the wrong length
        """
        keypair_bytes = bytes(keypair_bytes)
        if len(keypair_bytes) != KEYPAIR_LENGTH:
            raise InvalidKeyError(
                f"Ed25519 secret key must be {KEYPAIR_LENGTH} bytes, got {len(keypair_bytes)}",
                ErrorCode.INVALID_KEY_ENCODING,
            )
        self._key_bytes = keypair_bytes

    @classmethod
    def from_seed(cls, seed: bytes) -> Ed25519SecretKey:
        """
        Build a secret key from a 32-byte signing seed.

        The public half is computed with standard Ed25519 key generation.
        """
        if len(seed) != SEED_LENGTH:
            raise InvalidKeyError(
                f"Ed25519 seed must be {SEED_LENGTH} bytes, got {len(seed)}",
                ErrorCode.INVALID_KEY_ENCODING,
            )
        private_key = CryptoEd25519PrivateKey.from_private_bytes(bytes(seed))
        public_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return cls(bytes(seed) + public_bytes)

    @property
    def seed(self) -> bytes:
        """The 32-byte signing seed."""
        return self._key_bytes[:SEED_LENGTH]

    def to_bytes(self) -> bytes:
        """Get the 64-byte seed‖public form."""
        return self._key_bytes

    def public_key(self) -> Ed25519PublicKey:
        """Get the corresponding public key."""
        return Ed25519PublicKey(self._key_bytes[SEED_LENGTH:])

    def sign(self, message: bytes) -> bytes:
        """Sign a message, returning a 64-byte signature."""
        return CryptoEd25519PrivateKey.from_private_bytes(self.seed).sign(message)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ed25519SecretKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(("ed25519", self._key_bytes))

    def __repr__(self) -> str:
        return f"Ed25519SecretKey(public={self.public_key().to_hex()})"

    __str__ = __repr__


__all__ = [
    "PUBLIC_KEY_LENGTH",
    "SEED_LENGTH",
    "KEYPAIR_LENGTH",
    "Ed25519PublicKey",
    "Ed25519SecretKey",
]
