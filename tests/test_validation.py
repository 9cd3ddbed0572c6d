import pytest

from edkeys.exceptions import InvalidKeyLengthError, ValidationError
from edkeys.utils import validation as v


def test_secret_key_validation():
    assert v.validate_secret_key(b"\x01" * 64) == b"\x01" * 64
    assert v.validate_secret_key("0x" + "01" * 64) == b"\x01" * 64
    assert v.is_valid_secret_key("01" * 64)
    assert not v.is_valid_secret_key(b"\x01" * 63)
    with pytest.raises(InvalidKeyLengthError):
        v.validate_secret_key(b"\x01" * 65)


def test_private_and_public_key_validation():
    assert v.is_valid_private_key(b"\x00" * 32)
    assert v.is_valid_public_key("ab" * 32)
    assert not v.is_valid_public_key("xyz")
    with pytest.raises(ValidationError):
        v.validate_public_key("not hex")
    with pytest.raises(InvalidKeyLengthError):
        v.validate_private_key(b"\x00" * 33)


def test_invalid_key_length_is_validation_error():
    with pytest.raises(ValidationError) as exc:
        v.validate_length(b"abc", 4)
    assert exc.value.expected == 4
    assert exc.value.actual == 3
    assert "expected 4 bytes, got 3" in str(exc.value)
