"""
SECP256K1 keys for the mirror's key mapping.

Secret keys are 32-byte scalars that are nonzero and below the group
order. Public keys are kept in the encoding they arrived in (33 byte
compressed, 65 byte uncompressed or the chain's 64 byte x‖y form).
"""

from __future__ import annotations

import coincurve

from ..runtime.errors import ErrorCode, InvalidKeyError

SECRET_KEY_SIZE = 32
RAW_PUBLIC_KEY_SIZE = 64
SIGNATURE_SIZE = 65

# Order of the secp256k1 base point
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def is_valid_scalar(candidate: bytes) -> bool:
    """Check that 32 bytes encode a usable secret scalar (0 < k < n)."""
    if len(candidate) != SECRET_KEY_SIZE:
        return False
    return 0 < int.from_bytes(candidate, "big") < CURVE_ORDER


class Secp256k1PublicKey:
    """SECP256K1 public key."""

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize public key.

        Args:
            public_key_bytes: Public key bytes (33, 64 or 65 bytes)
        """
        public_key_bytes = bytes(public_key_bytes)
        size = len(public_key_bytes)
        if size == 33 and public_key_bytes[0] in (2, 3):
            pass
        elif size == 65 and public_key_bytes[0] == 4:
            pass
        elif size != RAW_PUBLIC_KEY_SIZE:
            raise InvalidKeyError(
                f"SECP256K1 public key must be 33, 64 or 65 bytes with a matching prefix, got {size}",
                ErrorCode.INVALID_KEY_ENCODING,
            )
        self.public_key_bytes = public_key_bytes

    @classmethod
    def from_hex(cls, hex_string: str) -> Secp256k1PublicKey:
        """Create public key from hex string."""
        try:
            key_bytes = bytes.fromhex(hex_string)
        except ValueError as e:
            raise InvalidKeyError(f"Invalid hex string: {e}", ErrorCode.INVALID_KEY_ENCODING, cause=e)
        return cls(key_bytes)

    def to_bytes(self) -> bytes:
        """Get public key as bytes, in the encoding it was created with."""
        return self.public_key_bytes

    def to_hex(self) -> str:
        return self.public_key_bytes.hex()

    def _uncompressed(self) -> bytes:
        if len(self.public_key_bytes) == RAW_PUBLIC_KEY_SIZE:
            return b"\x04" + self.public_key_bytes
        return self.public_key_bytes

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a 65-byte recoverable signature over a 32-byte digest.

        Args:
            signature: r‖s‖v signature bytes
            digest: Message digest that was signed

        Returns:
            True if signature is valid
        """
        if len(signature) != SIGNATURE_SIZE or len(digest) != 32:
            return False
        try:
            recovered = coincurve.PublicKey.from_signature_and_message(signature, digest, hasher=None)
            expected = coincurve.PublicKey(self._uncompressed())
        except ValueError:
            return False
        return recovered.format(compressed=False) == expected.format(compressed=False)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secp256k1PublicKey):
            return False
        return self.public_key_bytes == other.public_key_bytes

    def __hash__(self) -> int:
        return hash(("secp256k1", self.public_key_bytes))

    def __str__(self) -> str:
        return f"Secp256k1PublicKey({self.to_hex()})"

    def __repr__(self) -> str:
        return f"Secp256k1PublicKey.from_hex('{self.to_hex()}')"


class Secp256k1SecretKey:
    """
    SECP256K1 secret key.

    Construction goes through coincurve, which rejects zero and any value
    at or above the curve order with ``ValueError``.
    """

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize secret key.

        Args:
            private_key_bytes: 32-byte scalar

        Raises:
            InvalidKeyError: If the length is wrong
            ValueError: If the scalar is outside the valid range
        """
        private_key_bytes = bytes(private_key_bytes)
        if len(private_key_bytes) != SECRET_KEY_SIZE:
            raise InvalidKeyError(
                f"SECP256K1 secret key must be {SECRET_KEY_SIZE} bytes, got {len(private_key_bytes)}",
                ErrorCode.INVALID_KEY_ENCODING,
            )
        self._private_key = coincurve.PrivateKey(private_key_bytes)
        self._private_key_bytes = private_key_bytes

    def to_bytes(self) -> bytes:
        """Get the 32-byte scalar."""
        return self._private_key_bytes

    def public_key(self) -> Secp256k1PublicKey:
        """Get the public key in the chain's 64-byte x‖y form."""
        return Secp256k1PublicKey(self._private_key.public_key.format(compressed=False)[1:])

    def sign(self, digest: bytes) -> bytes:
        """
        Sign a 32-byte digest.

        Returns:
            65-byte recoverable signature r‖s‖v
        """
        if len(digest) != 32:
            raise InvalidKeyError(f"SECP256K1 signs 32-byte digests, got {len(digest)}")
        return self._private_key.sign_recoverable(digest, hasher=None)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secp256k1SecretKey):
            return False
        return self._private_key_bytes == other._private_key_bytes

    def __hash__(self) -> int:
        return hash(("secp256k1", self._private_key_bytes))

    def __repr__(self) -> str:
        return f"Secp256k1SecretKey(public={self.public_key().to_hex()[:16]}...)"

    __str__ = __repr__


__all__ = [
    "CURVE_ORDER",
    "SECRET_KEY_SIZE",
    "RAW_PUBLIC_KEY_SIZE",
    "Secp256k1PublicKey",
    "Secp256k1SecretKey",
    "is_valid_scalar",
]
