"""Hash implementations.

This package contains the rolling hash used to fingerprint credentials.
"""

from shared.implementations.hashing.rolling_hash import (
    fold,
    to_signed,
    prefix_state,
    credentials_hash,
    verify,
)

__all__ = [
    "fold",
    "to_signed",
    "prefix_state",
    "credentials_hash",
    "verify",
]
