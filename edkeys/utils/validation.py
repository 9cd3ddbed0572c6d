"""Validation utilities for key material."""

import logging
import re
from typing import Union

from ..constants import PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH
from ..exceptions import InvalidKeyLengthError, ValidationError
from ..types.common import BytesLike, PrivateKeyBytes, PublicKeyBytes, SecretKeyBytes
from ..utils.encoding import hex_to_bytes, to_bytes

__all__ = [
    "validate_length",
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "is_valid_secret_key",
    "validate_secret_key",
]

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]*$")


def _normalize(key: Union[str, BytesLike], kind: str) -> bytes:
    """Turn hex strings and bytes-likes into bytes."""
    if isinstance(key, str):
        if not HEX_PATTERN.match(key):
            raise ValidationError(f"{kind} must be hexadecimal")
        return hex_to_bytes(key)
    return to_bytes(key)


def validate_length(data: bytes, expected: int) -> bytes:
    """
    Check that data is exactly the expected number of bytes.
    
    Raises:
        InvalidKeyLengthError: If the length differs
    """
    if len(data) != expected:
        logger.debug("Rejected key material of %d bytes (expected %d)", len(data), expected)
        raise InvalidKeyLengthError(expected, len(data))
    return data


def is_valid_private_key(key: Union[str, BytesLike]) -> bool:
    """Check if private key format is valid."""
    try:
        validate_private_key(key)
        return True
    except ValidationError:
        return False


def validate_private_key(key: Union[str, BytesLike]) -> PrivateKeyBytes:
    """
    Validate private key and return as bytes.
    
    Args:
        key: Private key as hex string or bytes
        
    Returns:
        Private key as 32 bytes
        
    Raises:
        ValidationError: If private key is not hex or bytes
        InvalidKeyLengthError: If private key is not 32 bytes
    """
    key = _normalize(key, "Private key")
    return PrivateKeyBytes(validate_length(key, PRIVATE_KEY_LENGTH))


def is_valid_public_key(key: Union[str, BytesLike]) -> bool:
    """Check if public key format is valid."""
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, BytesLike]) -> PublicKeyBytes:
    """
    Validate public key and return as bytes.
    
    Args:
        key: Public key as hex string or bytes
        
    Returns:
        Public key as 32 bytes
        
    Raises:
        ValidationError: If public key is not hex or bytes
        InvalidKeyLengthError: If public key is not 32 bytes
    """
    key = _normalize(key, "Public key")
    return PublicKeyBytes(validate_length(key, PUBLIC_KEY_LENGTH))


def is_valid_secret_key(key: Union[str, BytesLike]) -> bool:
    """Check if secret key format is valid (length only, not consistency)."""
    try:
        validate_secret_key(key)
        return True
    except ValidationError:
        return False


def validate_secret_key(key: Union[str, BytesLike]) -> SecretKeyBytes:
    """
    Validate secret key shape and return as bytes.
    
    Only the length is checked here; whether the public half matches the
    private half is checked by Keypair.from_secret_key.
    
    Args:
        key: Secret key as hex string or bytes
        
    Returns:
        Secret key as 64 bytes
        
    Raises:
        ValidationError: If secret key is not hex or bytes
        InvalidKeyLengthError: If secret key is not 64 bytes
    """
    key = _normalize(key, "Secret key")
    return SecretKeyBytes(validate_length(key, SECRET_KEY_LENGTH))
