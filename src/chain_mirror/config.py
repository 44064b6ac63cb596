"""
Mirror key mapping configuration.

The operator secret is supplied as a hex string, either directly or via the
``MIRROR_KEY_MAP_SECRET`` environment variable. Leaving it unset runs the
mapper in its no-secret mode.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .crypto.keys import PublicKey, SecretKey
from .keys.mapping import SECRET_LEN, default_extra_key, map_account, map_key
from .runtime.account_id import AccountId
from .runtime.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_KEY_MAP_SECRET = "MIRROR_KEY_MAP_SECRET"


class MirrorConfig(BaseModel):
    """
    Key mapping options.

    The secret never appears in repr or in serialized output.
    """
    key_map_secret: Optional[bytes] = Field(
        default=None,
        repr=False,
        exclude=True,
        description=f"Operator secret, {SECRET_LEN} bytes (hex encoded in input)",
    )

    model_config = {"frozen": True}

    @field_validator('key_map_secret', mode='before')
    @classmethod
    def validate_key_map_secret(cls, v: Any) -> Optional[bytes]:
        """Validate and convert the secret to bytes."""
        if v is None or v == "":
            return None
        if isinstance(v, (bytes, bytearray)):
            v = bytes(v)
        elif isinstance(v, str):
            v = bytes.fromhex(v.strip())
        else:
            raise ValueError(f"key_map_secret must be bytes or hex string, got {type(v)}")
        if len(v) != SECRET_LEN:
            raise ValueError(f"key_map_secret must be {SECRET_LEN} bytes, got {len(v)}")
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MirrorConfig:
        """
        Build a config from a mapping such as a parsed JSON file.

        Raises:
            ConfigError: If any value is invalid
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigError(f"Invalid mirror configuration: {e.error_count()} error(s)", cause=e)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> MirrorConfig:
        """Build a config from environment variables."""
        if environ is None:
            environ = os.environ
        config = cls.from_dict({"key_map_secret": environ.get(ENV_KEY_MAP_SECRET)})
        if config.secret is None:
            logger.info(f"{ENV_KEY_MAP_SECRET} not set, mapping keys without an operator secret")
        return config

    @property
    def secret(self) -> Optional[bytes]:
        return self.key_map_secret

    def map_key(self, key: PublicKey) -> SecretKey:
        """Map a public key with the configured secret."""
        return map_key(key, self.secret)

    def map_account(self, account_id: Union[AccountId, str]) -> AccountId:
        """Map an account id with the configured secret."""
        return map_account(account_id, self.secret)

    def default_extra_key(self) -> SecretKey:
        return default_extra_key(self.secret)


__all__ = [
    "ENV_KEY_MAP_SECRET",
    "MirrorConfig",
]
