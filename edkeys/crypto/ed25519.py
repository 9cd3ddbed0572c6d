"""Ed25519 key derivation backed by libsodium (PyNaCl)."""

import logging
from dataclasses import dataclass

import nacl.exceptions
from nacl.signing import SigningKey

from ..constants import PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH
from ..crypto.bip39 import mnemonic_to_seed
from ..exceptions import CryptoError
from ..types.common import BytesLike, PrivateKeyBytes, PublicKeyBytes, SecretKeyBytes
from ..utils.encoding import to_bytes
from ..utils.validation import validate_length

__all__ = [
    "KeyMaterial",
    "keypair_from_seed",
    "derive_keypair_from_mnemonic",
    "generate_keypair",
    "get_public_key",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyMaterial:
    """Raw public/secret key pair as produced by the curve."""
    
    public_key: PublicKeyBytes
    secret_key: SecretKeyBytes
    
    def __post_init__(self) -> None:
        validate_length(self.public_key, PUBLIC_KEY_LENGTH)
        validate_length(self.secret_key, SECRET_KEY_LENGTH)
        
    def __repr__(self) -> str:
        return f"KeyMaterial(public_key={self.public_key.hex()})"


def _signing_key(private_key: bytes) -> SigningKey:
    try:
        return SigningKey(private_key)
    except (nacl.exceptions.CryptoError, ValueError, TypeError) as e:
        raise CryptoError(f"Ed25519 key derivation failed: {e}") from e


def _material(signing_key: SigningKey) -> KeyMaterial:
    private_key = bytes(signing_key)
    public_key = bytes(signing_key.verify_key)
    return KeyMaterial(
        public_key=PublicKeyBytes(public_key),
        secret_key=SecretKeyBytes(private_key + public_key),
    )


def keypair_from_seed(seed: BytesLike) -> KeyMaterial:
    """
    Build an Ed25519 keypair from a 32-byte private key seed.
    
    Args:
        seed: 32-byte Ed25519 private key
        
    Returns:
        KeyMaterial with 32-byte public and 64-byte secret key
        
    Raises:
        InvalidKeyLengthError: If seed is not 32 bytes
        CryptoError: If libsodium rejects the seed
    """
    seed = validate_length(to_bytes(seed), PRIVATE_KEY_LENGTH)
    return _material(_signing_key(seed))


def derive_keypair_from_mnemonic(mnemonic: str) -> KeyMaterial:
    """
    Derive an Ed25519 keypair from a BIP39 mnemonic.
    
    The first 32 bytes of the BIP39 seed (empty passphrase) are used as the
    Ed25519 private key. The mnemonic is not validated here.
    """
    seed = mnemonic_to_seed(mnemonic)
    return keypair_from_seed(seed[:PRIVATE_KEY_LENGTH])


def generate_keypair() -> KeyMaterial:
    """Generate a random Ed25519 keypair from libsodium's CSPRNG."""
    return _material(SigningKey.generate())


def get_public_key(private_key: BytesLike) -> PublicKeyBytes:
    """
    Compute the public key for a 32-byte private key.
    
    Raises:
        InvalidKeyLengthError: If private key is not 32 bytes
        CryptoError: If libsodium rejects the key
    """
    private_key = validate_length(to_bytes(private_key), PRIVATE_KEY_LENGTH)
    return PublicKeyBytes(bytes(_signing_key(private_key).verify_key))
