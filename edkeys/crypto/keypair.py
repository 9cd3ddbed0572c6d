"""Ed25519 keypair with optional BIP39 mnemonic."""

import hmac
import logging
from typing import Optional

from ..constants import DEFAULT_MNEMONIC_STRENGTH, PRIVATE_KEY_LENGTH, SECRET_KEY_LENGTH
from ..crypto.bip39 import generate_mnemonic, validate_mnemonic
from ..crypto.ed25519 import KeyMaterial, derive_keypair_from_mnemonic, generate_keypair, get_public_key
from ..crypto.keys import PublicKey
from ..exceptions import InvalidMnemonicError, KeyMismatchError, NoMnemonicAvailableError
from ..types.common import BytesLike, Mnemonic, PublicKeyBytes, SecretKeyBytes
from ..utils.encoding import decode_base58, encode_base58, hex_to_bytes, to_bytes
from ..utils.validation import validate_length

__all__ = ["Keypair"]

logger = logging.getLogger(__name__)


class Keypair:
    """
    Ed25519 signing keypair, optionally tied to the mnemonic it came from.
    
    Keypairs are immutable. They are built in one of three ways:
    
    - from a mnemonic, supplied or freshly generated (``Keypair(...)``,
      ``Keypair.from_mnemonic``); the mnemonic is kept
    - from the curve's random generator (``Keypair.generate``)
    - from a raw 64-byte secret key (``Keypair.from_secret_key``)
    
    Only the first way attaches a mnemonic.
    
    Example:
        >>> kp = Keypair()
        >>> kp.recover_from_mnemonic() == kp
        True
    """
    
    __slots__ = ("_public_key", "_secret_key", "_mnemonic")
    
    def __init__(
        self,
        mnemonic: Optional[str] = None,
        *,
        strength: int = DEFAULT_MNEMONIC_STRENGTH
    ) -> None:
        """
        Create a keypair from a mnemonic, generating one if none is given.
        
        Args:
            mnemonic: BIP39 mnemonic phrase; a new one is generated when None
            strength: Entropy bits for a generated mnemonic
            
        Raises:
            InvalidMnemonicError: If the supplied mnemonic is invalid
            ValueError: If strength is not a BIP39 strength
        """
        if mnemonic is None:
            mnemonic = generate_mnemonic(strength)
        else:
            _check_mnemonic(mnemonic)
            
        self._assign(derive_keypair_from_mnemonic(mnemonic), Mnemonic(mnemonic))
        logger.debug("Created keypair %s from mnemonic", self.public_key)
        
    @classmethod
    def _from_key_material(
        cls,
        material: KeyMaterial,
        mnemonic: Optional[Mnemonic] = None
    ) -> "Keypair":
        """Build a keypair from already derived key bytes, bypassing __init__."""
        instance = object.__new__(cls)
        instance._assign(material, mnemonic)
        return instance
        
    def _assign(self, material: KeyMaterial, mnemonic: Optional[Mnemonic]) -> None:
        if hasattr(self, "_secret_key"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, "_public_key", PublicKeyBytes(bytes(material.public_key)))
        object.__setattr__(self, "_secret_key", SecretKeyBytes(bytes(material.secret_key)))
        object.__setattr__(self, "_mnemonic", mnemonic)
        
    @classmethod
    def generate(cls) -> "Keypair":
        """
        Generate a new random keypair.
        
        The keys come straight from the curve's random generator, so the
        result has no mnemonic.
        """
        keypair = cls._from_key_material(generate_keypair())
        logger.debug("Generated random keypair %s", keypair.public_key)
        return keypair
        
    @classmethod
    def from_mnemonic(cls, mnemonic: str) -> "Keypair":
        """
        Derive a keypair from a BIP39 mnemonic.
        
        The same mnemonic always yields the same keys.
        
        Args:
            mnemonic: BIP39 mnemonic phrase
            
        Returns:
            Keypair carrying the mnemonic
            
        Raises:
            InvalidMnemonicError: If the mnemonic is invalid
        """
        _check_mnemonic(mnemonic)
        keypair = cls._from_key_material(derive_keypair_from_mnemonic(mnemonic), Mnemonic(mnemonic))
        logger.debug("Derived keypair %s from mnemonic", keypair.public_key)
        return keypair
        
    @classmethod
    def from_secret_key(
        cls,
        secret_key: BytesLike,
        *,
        skip_validation: bool = False
    ) -> "Keypair":
        """
        Rebuild a keypair from a 64-byte secret key.
        
        The secret key is the 32-byte private key followed by the 32-byte
        public key. Unless skip_validation is set, the public half is
        recomputed from the private half and must match exactly.
        
        Args:
            secret_key: 64-byte secret key
            skip_validation: Trust the public half without recomputing it
            
        Returns:
            Keypair without a mnemonic
            
        Raises:
            InvalidKeyLengthError: If secret key is not 64 bytes
            KeyMismatchError: If the public half does not match
        """
        secret_key = validate_length(to_bytes(secret_key), SECRET_KEY_LENGTH)
        private_key = secret_key[:PRIVATE_KEY_LENGTH]
        public_key = secret_key[PRIVATE_KEY_LENGTH:]
        
        if not skip_validation:
            computed = get_public_key(private_key)
            # Full-length comparison; must not short-circuit on the first differing byte
            if not hmac.compare_digest(computed, public_key):
                logger.debug("Rejected secret key: public half does not match private half")
                raise KeyMismatchError()
                
        keypair = cls._from_key_material(
            KeyMaterial(
                public_key=PublicKeyBytes(public_key),
                secret_key=SecretKeyBytes(secret_key),
            )
        )
        logger.debug("Loaded keypair %s from secret key", keypair.public_key)
        return keypair
        
    @classmethod
    def from_secret_key_hex(cls, value: str, *, skip_validation: bool = False) -> "Keypair":
        """Rebuild a keypair from a hex encoded 64-byte secret key."""
        return cls.from_secret_key(hex_to_bytes(value), skip_validation=skip_validation)
        
    @classmethod
    def from_secret_key_base58(cls, value: str, *, skip_validation: bool = False) -> "Keypair":
        """Rebuild a keypair from a Base58 encoded 64-byte secret key."""
        return cls.from_secret_key(decode_base58(value), skip_validation=skip_validation)
        
    @property
    def public_key(self) -> PublicKey:
        """Get the public key."""
        return PublicKey(self._public_key)
        
    @property
    def secret_key(self) -> bytearray:
        """Get a fresh, caller-owned copy of the 64-byte secret key."""
        return bytearray(self._secret_key)
        
    @property
    def has_mnemonic(self) -> bool:
        return self._mnemonic is not None
        
    def get_mnemonic(self) -> Optional[Mnemonic]:
        """Get the mnemonic this keypair was derived from, or None."""
        return self._mnemonic
        
    def recover_from_mnemonic(self) -> "Keypair":
        """
        Recreate the keypair from the stored mnemonic.
        
        Returns:
            New Keypair equal to this one
            
        Raises:
            NoMnemonicAvailableError: If the keypair has no mnemonic
        """
        if self._mnemonic is None:
            raise NoMnemonicAvailableError()
        return type(self).from_mnemonic(self._mnemonic)
        
    def secret_key_base58(self) -> str:
        """Get the secret key as Base58 string."""
        return encode_base58(self._secret_key)
        
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")
        
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")
        
    def __reduce__(self) -> tuple:
        material = KeyMaterial(
            public_key=self._public_key,
            secret_key=self._secret_key,
        )
        return (_rebuild, (type(self), material, self._mnemonic))
        
    def __eq__(self, other: object) -> bool:
        """Check equality of key material; the mnemonic is not compared."""
        if not isinstance(other, Keypair):
            return NotImplemented
        return hmac.compare_digest(self._secret_key, other._secret_key)
        
    def __hash__(self) -> int:
        return hash(self._public_key)
        
    def __repr__(self) -> str:
        """String representation; never includes secret material."""
        return f"Keypair({self.public_key.to_base58()}, mnemonic={self.has_mnemonic})"


def _check_mnemonic(mnemonic: object) -> None:
    if not validate_mnemonic(mnemonic):
        logger.debug("Rejected invalid mnemonic")
        raise InvalidMnemonicError()


def _rebuild(cls: type, material: KeyMaterial, mnemonic: Optional[Mnemonic]) -> Keypair:
    """Unpickle/copy hook; slot state cannot be restored through __setattr__."""
    return cls._from_key_material(material, mnemonic)
