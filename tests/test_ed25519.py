import pytest

from edkeys.crypto.ed25519 import (
    KeyMaterial,
    derive_keypair_from_mnemonic,
    generate_keypair,
    get_public_key,
    keypair_from_seed,
)
from edkeys.exceptions import InvalidKeyLengthError


# RFC 8032, section 7.1, test 1
RFC8032_SECRET = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC8032_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"


def test_get_public_key_vector():
    assert get_public_key(bytes.fromhex(RFC8032_SECRET)).hex() == RFC8032_PUBLIC


def test_keypair_from_seed_layout():
    material = keypair_from_seed(bytes.fromhex(RFC8032_SECRET))
    assert material.public_key.hex() == RFC8032_PUBLIC
    assert material.secret_key.hex() == RFC8032_SECRET + RFC8032_PUBLIC


def test_derive_from_mnemonic():
    phrase = " ".join(["abandon"] * 11 + ["about"])
    material = derive_keypair_from_mnemonic(phrase)
    assert material == derive_keypair_from_mnemonic(phrase)
    assert material.secret_key[:32].hex() == "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"


def test_generate_keypair():
    a = generate_keypair()
    b = generate_keypair()
    assert a != b
    assert get_public_key(a.secret_key[:32]) == a.public_key
    assert a.secret_key[32:] == a.public_key


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_wrong_private_key_length(length):
    with pytest.raises(InvalidKeyLengthError):
        get_public_key(b"\x01" * length)
    with pytest.raises(InvalidKeyLengthError):
        keypair_from_seed(b"\x01" * length)


def test_key_material_checks_lengths():
    with pytest.raises(InvalidKeyLengthError):
        KeyMaterial(public_key=b"\x00" * 31, secret_key=b"\x00" * 64)
    with pytest.raises(InvalidKeyLengthError):
        KeyMaterial(public_key=b"\x00" * 32, secret_key=b"\x00" * 63)


def test_key_material_repr_hides_secret():
    material = keypair_from_seed(bytes.fromhex(RFC8032_SECRET))
    assert RFC8032_SECRET not in repr(material)
