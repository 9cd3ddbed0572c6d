"""Cryptographic primitives for edkeys."""

from ..crypto.bip39 import generate_mnemonic, validate_mnemonic, mnemonic_to_seed, word_count
from ..crypto.ed25519 import (
    KeyMaterial,
    keypair_from_seed,
    derive_keypair_from_mnemonic,
    generate_keypair,
    get_public_key,
)
from ..crypto.keys import PublicKey
from ..crypto.keypair import Keypair

__all__ = [
    # Keys
    "Keypair",
    "PublicKey",
    
    # Mnemonics
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",
    "word_count",
    
    # Curve
    "KeyMaterial",
    "keypair_from_seed",
    "derive_keypair_from_mnemonic",
    "generate_keypair",
    "get_public_key",
]
