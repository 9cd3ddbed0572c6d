"""edkeys exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "EdKeysError",
    "ValidationError",
    "InvalidMnemonicError",
    "InvalidKeyLengthError",
    "CryptoError",
    "KeyMismatchError",
    "KeypairError",
    "NoMnemonicAvailableError",
]


class EdKeysError(Exception):
    """Base exception for all edkeys errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(EdKeysError):
    """Raised when validation fails."""
    pass


class InvalidMnemonicError(ValidationError):
    """Raised when a mnemonic fails wordlist or checksum validation."""
    
    def __init__(self, message: str = "Invalid mnemonic") -> None:
        super().__init__(message)


class InvalidKeyLengthError(ValidationError):
    """Raised when key material has the wrong number of bytes."""
    
    def __init__(
        self, 
        expected: int, 
        actual: int, 
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Invalid key size: expected {expected} bytes, got {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CryptoError(EdKeysError):
    """Raised when cryptographic operation fails."""
    pass


class KeyMismatchError(CryptoError):
    """Raised when a secret key's public half does not match its private half."""
    
    def __init__(self, message: str = "Provided secret key is invalid") -> None:
        super().__init__(message)


class KeypairError(EdKeysError):
    """Raised when keypair operation fails."""
    pass


class NoMnemonicAvailableError(KeypairError):
    """Raised when recovery is requested on a keypair without a mnemonic."""
    
    def __init__(self, message: str = "No mnemonic available to recover from") -> None:
        super().__init__(message)
