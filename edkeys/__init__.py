"""
edkeys

Ed25519 keypair management with BIP39 mnemonic derivation and recovery.
"""

from .constants import Language
from .exceptions import (
    EdKeysError,
    ValidationError,
    InvalidMnemonicError,
    InvalidKeyLengthError,
    CryptoError,
    KeyMismatchError,
    KeypairError,
    NoMnemonicAvailableError,
)
from .crypto import Keypair, PublicKey, generate_mnemonic, validate_mnemonic

__version__ = "1.0.0"

__all__ = [
    # Keys
    "Keypair",
    "PublicKey",
    
    # Mnemonics
    "generate_mnemonic",
    "validate_mnemonic",
    "Language",
    
    # Exceptions
    "EdKeysError",
    "ValidationError",
    "InvalidMnemonicError",
    "InvalidKeyLengthError",
    "CryptoError",
    "KeyMismatchError",
    "KeypairError",
    "NoMnemonicAvailableError",
]
