"""Encoding and decoding utilities for edkeys."""

from typing import Union

from ..exceptions import ValidationError
from ..types.common import Base58Str, BytesLike, HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "to_bytes",
    "encode_base58",
    "decode_base58",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.
    
    Args:
        hex_str: Hex string with or without 0x prefix
        
    Returns:
        Decoded bytes
        
    Raises:
        ValidationError: If hex string is invalid
    """
    if not isinstance(hex_str, str):
        raise ValidationError(f"Hex value must be a string, got {type(hex_str).__name__}")
    try:
        # Remove 0x prefix if present
        if hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.
    
    Args:
        data: Bytes to encode
        prefix: Add 0x prefix
        
    Returns:
        Hex string
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def to_bytes(data: BytesLike) -> bytes:
    """
    Copy a bytes-like value into immutable bytes.
    
    Args:
        data: bytes, bytearray, memoryview or sequence of ints (0-255)
        
    Returns:
        Independent bytes copy
        
    Raises:
        ValidationError: If value cannot be interpreted as bytes
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        raise ValidationError("Expected bytes, got str; decode hex or Base58 first")
    if isinstance(data, int):
        # bytes(n) would silently produce n zero bytes
        raise ValidationError("Expected bytes, got int")
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Cannot convert {type(data).__name__} to bytes: {e}") from e


def encode_base58(data: bytes) -> Base58Str:
    """
    Encode bytes as Base58 string.
    
    Args:
        data: Bytes to encode
        
    Returns:
        Base58 encoded string
    """
    n = int.from_bytes(data, "big")
    
    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded
        
    # Add leading zeros
    for byte in data:
        if byte == 0:
            encoded = "1" + encoded
        else:
            break
            
    return Base58Str(encoded)


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.
    
    Args:
        string: Base58 string
        
    Returns:
        Decoded bytes
        
    Raises:
        ValidationError: If string contains invalid characters
    """
    if not isinstance(string, str):
        raise ValidationError(f"Base58 value must be a string, got {type(string).__name__}")
        
    n = 0
    for char in string:
        try:
            n = n * 58 + BASE58_ALPHABET.index(char)
        except ValueError:
            raise ValidationError(f"Invalid Base58 character: {char!r}") from None
            
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    
    # Add leading zeros
    leading_zeros = len(string) - len(string.lstrip("1"))
    return b"\x00" * leading_zeros + body
