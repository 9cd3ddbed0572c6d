"""Public key wrapper for edkeys."""

from typing import Union

from ..types.common import Base58Str, BytesLike, HexStr, PublicKeyBytes
from ..utils.encoding import bytes_to_hex, decode_base58, encode_base58
from ..utils.validation import validate_public_key

__all__ = ["PublicKey"]


class PublicKey:
    """
    Ed25519 public key wrapper.
    
    Holds the 32 raw key bytes and provides equality and the usual
    display formats (Base58, hex).
    """
    
    __slots__ = ("_point",)
    
    def __init__(self, key: Union[BytesLike, str, "PublicKey"]) -> None:
        """
        Initialize public key.
        
        Args:
            key: Public key as 32 bytes, hex string, or another PublicKey
            
        Raises:
            ValidationError: If key format is invalid
            InvalidKeyLengthError: If key is not 32 bytes
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            return
            
        self._point = validate_public_key(key)
        
    @classmethod
    def from_bytes(cls, data: BytesLike) -> "PublicKey":
        """Create public key from raw bytes."""
        return cls(data)
        
    @classmethod
    def from_hex(cls, value: str) -> "PublicKey":
        """Create public key from hex string."""
        return cls(value)
        
    @classmethod
    def from_base58(cls, value: str) -> "PublicKey":
        """Create public key from Base58 string."""
        return cls(decode_base58(value))
        
    @property
    def point(self) -> PublicKeyBytes:
        """Get public key as bytes."""
        return self._point
        
    def hex(self) -> HexStr:
        """Get public key as hex string."""
        return bytes_to_hex(self._point)
        
    def to_base58(self) -> Base58Str:
        """Get public key as Base58 string."""
        return encode_base58(self._point)
        
    def __bytes__(self) -> bytes:
        return bytes(self._point)
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self._point == other._point
        
    def __hash__(self) -> int:
        return hash(self._point)
        
    def __str__(self) -> str:
        return self.to_base58()
        
    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.to_base58()})"
