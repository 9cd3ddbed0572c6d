"""Constants and defaults for edkeys."""

from enum import Enum

__all__ = [
    "Language",
    "DEFAULT_LANGUAGE",
    "PUBLIC_KEY_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
    "MNEMONIC_STRENGTHS",
    "DEFAULT_MNEMONIC_STRENGTH",
]


class Language(str, Enum):
    """BIP39 wordlist languages."""

    ENGLISH = "english"
    CHINESE_SIMPLIFIED = "chinese_simplified"
    CHINESE_TRADITIONAL = "chinese_traditional"
    CZECH = "czech"
    FRENCH = "french"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    PORTUGUESE = "portuguese"
    SPANISH = "spanish"


DEFAULT_LANGUAGE = Language.ENGLISH

# Ed25519 key sizes
PUBLIC_KEY_LENGTH = 32
PRIVATE_KEY_LENGTH = 32
SECRET_KEY_LENGTH = PRIVATE_KEY_LENGTH + PUBLIC_KEY_LENGTH

# BIP39
MNEMONIC_STRENGTHS = (128, 160, 192, 224, 256)
DEFAULT_MNEMONIC_STRENGTH = 128
