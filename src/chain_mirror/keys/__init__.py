"""
Key and account remapping for the mirror.
"""

from .mapping import SECRET_LEN, DEFAULT_EXTRA_KEY, map_key, map_account, default_extra_key

__all__ = [
    "SECRET_LEN",
    "DEFAULT_EXTRA_KEY",
    "map_key",
    "map_account",
    "default_extra_key",
]
