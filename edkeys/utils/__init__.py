"""Utility helpers for edkeys."""

from ..utils.encoding import (
    hex_to_bytes,
    bytes_to_hex,
    to_bytes,
    encode_base58,
    decode_base58,
)
from ..utils.validation import (
    validate_private_key,
    validate_public_key,
    validate_secret_key,
)

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "to_bytes",
    "encode_base58",
    "decode_base58",
    "validate_private_key",
    "validate_public_key",
    "validate_secret_key",
]
