"""
AccountId Pydantic custom type for chain account identifiers.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import InvalidAccountIdError
from ..crypto.ed25519 import Ed25519PublicKey, PUBLIC_KEY_LENGTH

MIN_LENGTH = 2
MAX_LENGTH = 64

_ACCOUNT_ID_RE = re.compile(r"^(([a-z\d]+[\-_])*[a-z\d]+\.)*([a-z\d]+[\-_])*[a-z\d]+$")
_HEX_CHARS = frozenset("0123456789abcdef")


class AccountType(str, Enum):
    """Addressing scheme of an account id."""

    # 64 lowercase hex characters encoding an ed25519 public key
    IMPLICIT = "implicit"
    # "0x" followed by 40 lowercase hex characters
    ETH_IMPLICIT = "eth_implicit"
    NAMED = "named"


class AccountId:
    """Custom Pydantic type for validated account ids."""

    def __init__(self, account_id: str):
        if not isinstance(account_id, str):
            raise InvalidAccountIdError("AccountId must be a string")
        if not MIN_LENGTH <= len(account_id) <= MAX_LENGTH:
            raise InvalidAccountIdError(
                f"AccountId must be {MIN_LENGTH} to {MAX_LENGTH} characters long",
                details={"account_id": account_id},
            )
        if not _ACCOUNT_ID_RE.match(account_id):
            raise InvalidAccountIdError(
                "AccountId may only contain lowercase alphanumerics separated by '-', '_' or '.'",
                details={"account_id": account_id},
            )
        self.account_id = account_id

    def __str__(self) -> str:
        return self.account_id

    def __repr__(self) -> str:
        return f"AccountId('{self.account_id}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, AccountId):
            return self.account_id == other.account_id
        elif isinstance(other, str):
            return self.account_id == other
        return False

    def __hash__(self) -> int:
        return hash(self.account_id)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the AccountId."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any) -> AccountId:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except InvalidAccountIdError as e:
                raise ValueError(e.message)
        raise ValueError(f"Invalid AccountId: {value!r}")

    @property
    def account_type(self) -> AccountType:
        """Classify the id by addressing scheme."""
        value = self.account_id
        if len(value) == 2 * PUBLIC_KEY_LENGTH and set(value) <= _HEX_CHARS:
            return AccountType.IMPLICIT
        if len(value) == 42 and value.startswith("0x") and set(value[2:]) <= _HEX_CHARS:
            return AccountType.ETH_IMPLICIT
        return AccountType.NAMED

    @property
    def is_implicit(self) -> bool:
        return self.account_type is AccountType.IMPLICIT


def derive_implicit_account_id(public_key: Ed25519PublicKey) -> AccountId:
    """Implicit account id of an ed25519 public key: its lowercase hex."""
    return AccountId(public_key.to_hex())


def public_key_from_implicit_account(account_id: AccountId) -> Ed25519PublicKey:
    """
    Recover the ed25519 public key embedded in an implicit account id.

    Raises:
        InvalidAccountIdError: If the account is not an implicit account
    """
    if not account_id.is_implicit:
        raise InvalidAccountIdError(
            "Not an implicit account", details={"account_id": str(account_id)}
        )
    return Ed25519PublicKey.from_hex(account_id.account_id)


__all__ = [
    "AccountType",
    "AccountId",
    "derive_implicit_account_id",
    "public_key_from_implicit_account",
]
