import pytest

from edkeys.exceptions import ValidationError
from edkeys.utils.encoding import bytes_to_hex, decode_base58, encode_base58, hex_to_bytes, to_bytes


def test_hex_bytes_roundtrip():
    data = b"\x00\x01deadbeef"
    hex_str = bytes_to_hex(data, prefix=True)
    assert hex_str.startswith("0x")
    assert hex_to_bytes(hex_str) == data
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")
    with pytest.raises(ValidationError):
        hex_to_bytes(b"00")


def test_base58_known_values():
    assert encode_base58(b"hello world") == "StV1DL6CwTryKyV"
    assert decode_base58("StV1DL6CwTryKyV") == b"hello world"
    assert encode_base58(b"\x00\x00\x01") == "112"
    assert decode_base58("112") == b"\x00\x00\x01"


def test_base58_empty_and_zeros():
    assert encode_base58(b"") == ""
    assert decode_base58("") == b""
    assert decode_base58("111") == b"\x00\x00\x00"


def test_base58_invalid():
    for bad in ("0", "O", "I", "l", "abc+"):
        with pytest.raises(ValidationError):
            decode_base58(bad)


def test_to_bytes():
    assert to_bytes([1, 2, 3]) == b"\x01\x02\x03"
    assert to_bytes(bytearray(b"ab")) == b"ab"
    assert to_bytes(memoryview(b"ab")) == b"ab"
    for bad in ("ab", 5, [256], [-1], None):
        with pytest.raises(ValidationError):
            to_bytes(bad)
