"""BIP39 mnemonic support for edkeys.

Thin wrapper around the reference ``mnemonic`` implementation, so that the
rest of the package only deals with plain strings and edkeys exceptions.
"""

import logging
from functools import lru_cache
from typing import Union

from mnemonic import Mnemonic as _Mnemonic

from ..constants import DEFAULT_LANGUAGE, DEFAULT_MNEMONIC_STRENGTH, MNEMONIC_STRENGTHS, Language
from ..types.common import Mnemonic, Seed

__all__ = [
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    "word_count",
]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _wordlist(language: Language) -> _Mnemonic:
    """Load (once) the BIP39 engine for a language."""
    return _Mnemonic(Language(language).value)


def word_count(strength: int) -> int:
    """Number of words in a mnemonic of the given entropy strength (bits)."""
    if strength not in MNEMONIC_STRENGTHS:
        raise ValueError(f"Strength must be one of {', '.join(map(str, MNEMONIC_STRENGTHS))}")
    return (strength + strength // 32) // 11


def generate_mnemonic(
    strength: int = DEFAULT_MNEMONIC_STRENGTH,
    language: Union[Language, str] = DEFAULT_LANGUAGE
) -> Mnemonic:
    """
    Generate BIP39 mnemonic phrase.
    
    Args:
        strength: Entropy bits (128, 160, 192, 224 or 256)
        language: Wordlist language
        
    Returns:
        Space separated mnemonic phrase
        
    Raises:
        ValueError: If strength is not supported
    """
    word_count(strength)
    phrase = _wordlist(Language(language)).generate(strength=strength)
    logger.debug("Generated %d-word mnemonic", len(phrase.split()))
    return Mnemonic(phrase)


def validate_mnemonic(
    mnemonic: object,
    language: Union[Language, str] = DEFAULT_LANGUAGE
) -> bool:
    """
    Check a mnemonic against the wordlist and its checksum.
    
    Never raises; anything that is not a well-formed phrase is simply invalid.
    """
    if not isinstance(mnemonic, str) or not mnemonic:
        return False
    try:
        return bool(_wordlist(Language(language)).check(mnemonic))
    except (ValueError, LookupError, TypeError):
        return False


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> Seed:
    """Convert mnemonic to the 64-byte BIP39 seed using PBKDF2."""
    return Seed(_Mnemonic.to_seed(mnemonic, passphrase=passphrase))
