"""Type definitions for edkeys."""

from ..types.common import (
    HexStr,
    Base58Str,
    Mnemonic,
    PrivateKeyBytes,
    PublicKeyBytes,
    SecretKeyBytes,
    Seed,
    BytesLike,
)

__all__ = [
    "HexStr",
    "Base58Str",
    "Mnemonic",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "SecretKeyBytes",
    "Seed",
    "BytesLike",
]
