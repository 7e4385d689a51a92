"""
Methods for testing Base58 and Base58Check encoding and decoding
"""
from secrets import token_bytes

import pytest

from dashmsg.core import ChecksumMismatch, FormatError
from dashmsg.encoding import BASE58_ALPHABET, decode_base58, decode_base58check, encode_base58, encode_base58check
from utility import KEY_ONE_HASH160

# Fixed corpus for the corruption test
CORPUS = [
    (0x4c, KEY_ONE_HASH160),
    (0x8c, KEY_ONE_HASH160),
    (0xcc, bytes(range(32)) + b'\x01'),
    (0x00, bytes(20)),
]


def test_alphabet():
    assert len(BASE58_ALPHABET) == 58
    assert not set("0OIl") & set(BASE58_ALPHABET), "Ambiguous glyphs must be excluded"


def test_known_base58():
    assert encode_base58(b"hello world") == "StV1DL6CwTryKyV"
    assert decode_base58("StV1DL6CwTryKyV") == b"hello world"
    assert encode_base58(b'\x00\x00\x01') == "112"
    assert decode_base58("112") == b'\x00\x00\x01'
    assert encode_base58(b'') == ""


def test_known_base58check():
    """
    The Bitcoin pubkey hash address of private key 1
    """
    address = "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"
    assert encode_base58check(0x00, KEY_ONE_HASH160) == address
    assert decode_base58check(address) == (0x00, KEY_ONE_HASH160)


def test_base58check_codec():
    for version in (0x00, 0x10, 0x4c, 0x8c, 0xef, 0xff):
        for payload in (b'', b'\x00', bytes(20), token_bytes(20), token_bytes(33)):
            encoded = encode_base58check(version, payload)
            assert decode_base58check(encoded) == (version, payload), "Base58Check failed to recover data"


@pytest.mark.parametrize("version, payload", CORPUS)
def test_single_character_corruption(version, payload):
    """
    Every single character substitution of a valid Base58Check string fails its checksum
    """
    encoded = encode_base58check(version, payload)
    for i, original in enumerate(encoded):
        for char in BASE58_ALPHABET:
            if char == original:
                continue
            corrupted = encoded[:i] + char + encoded[i + 1:]
            with pytest.raises(ChecksumMismatch):
                decode_base58check(corrupted)


@pytest.mark.parametrize("text", ["", "1", "1111", "0OIl", "Xabc!", "StV1DL6CwTryKyV "])
def test_malformed_base58check(text):
    with pytest.raises(FormatError):
        decode_base58check(text)


def test_non_string_input():
    with pytest.raises(FormatError):
        decode_base58(b"StV1DL6CwTryKyV")


def test_version_out_of_range():
    with pytest.raises(FormatError):
        encode_base58check(0x100, bytes(20))
