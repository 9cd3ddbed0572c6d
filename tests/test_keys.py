import pytest

from edkeys.crypto.keys import PublicKey
from edkeys.exceptions import InvalidKeyLengthError, ValidationError


RFC8032_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"


def test_public_key_formats():
    pub = PublicKey.from_hex(RFC8032_PUBLIC)
    assert pub.hex() == RFC8032_PUBLIC
    assert bytes(pub) == bytes.fromhex(RFC8032_PUBLIC)
    assert pub.point == bytes.fromhex(RFC8032_PUBLIC)
    assert str(pub) == pub.to_base58()
    assert repr(pub) == f"PublicKey({pub.to_base58()})"


def test_public_key_base58_roundtrip():
    pub = PublicKey.from_bytes(bytes.fromhex(RFC8032_PUBLIC))
    assert PublicKey.from_base58(str(pub)) == pub


def test_public_key_leading_zero_bytes():
    raw = b"\x00\x00" + b"\x07" * 30
    pub = PublicKey(raw)
    assert str(pub).startswith("11")
    assert bytes(PublicKey.from_base58(str(pub))) == raw


def test_public_key_equality_and_hash():
    a = PublicKey(b"\x01" * 32)
    b = PublicKey(bytearray(b"\x01" * 32))
    c = PublicKey(b"\x02" * 32)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != b"\x01" * 32
    assert len({a, b, c}) == 2
    assert PublicKey(a) == a


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_public_key_wrong_length(length):
    with pytest.raises(InvalidKeyLengthError):
        PublicKey(b"\x01" * length)


def test_public_key_invalid_text():
    with pytest.raises(ValidationError):
        PublicKey("not hex")
    with pytest.raises(ValidationError):
        PublicKey.from_base58("0" * 44)
