"""Common type definitions for edkeys."""

from typing import List, NewType, Union

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

# Encodings
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Base58Str = NewType("Base58Str", str)
"""Base58 string representation."""

Mnemonic = NewType("Mnemonic", str)
"""Space separated BIP39 mnemonic phrase."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte Ed25519 private key (seed)."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte Ed25519 public key."""

SecretKeyBytes = NewType("SecretKeyBytes", bytes)
"""64-byte secret key: private key followed by public key."""

Seed = NewType("Seed", bytes)
"""64-byte BIP39 seed."""

# Type aliases
BytesLike = Union[bytes, bytearray, memoryview, List[int]]
"""Anything that can be turned into key bytes."""
