"""
Methods for Base58 and Base58Check encoding and decoding

Base58Check text = Base58(version || payload || HASH256(version || payload)[:4])
"""
from typing import Tuple

from dashmsg.core import HASHES, ChecksumMismatch, FormatError
from dashmsg.core.logging import get_logger
from dashmsg.crypto.hash_functions import hash256

logger = get_logger(__name__)

__all__ = ["BASE58_ALPHABET", "encode_base58", "decode_base58", "encode_base58check", "decode_base58check"]

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


# --- BASE58 ENCODING --- #

def encode_base58(data: bytes) -> str:
    """
    Given bytes we return the base58 encoded string. Each leading zero byte becomes a leading '1'.
    """
    base = len(BASE58_ALPHABET)
    n = int.from_bytes(data, "big")
    encoded = []

    while n > 0:
        n, remainder = divmod(n, base)
        encoded.append(BASE58_ALPHABET[remainder])

    leading_zeros = len(data) - len(data.lstrip(b'\x00'))
    return "1" * leading_zeros + "".join(reversed(encoded))


def decode_base58(text: str) -> bytes:
    """
    Given a base58 encoded string, return the underlying bytes. Each leading '1' becomes a leading zero byte.
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected base58 string but received: {type(text)}")

    total = 0
    for char in text:
        try:
            total = total * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise FormatError(f"Invalid base58 character: {char!r}") from None

    leading_zeros = len(text) - len(text.lstrip("1"))
    body = total.to_bytes((total.bit_length() + 7) // 8, "big")
    return b'\x00' * leading_zeros + body


# --- BASE58CHECK ENCODING --- #

def encode_base58check(version: int, payload: bytes) -> str:
    """
    Given a version byte and payload, we return the base58Check encoding
    """
    if not 0 <= version <= 0xff:
        raise FormatError(f"Version {version} does not fit in a single byte")
    data = bytes([version]) + payload
    checksum = hash256(data)[:HASHES.CHECKSUM]
    return encode_base58(data + checksum)


def decode_base58check(text: str) -> Tuple[int, bytes]:
    """
    Given a string of base58Check chars, we return the version byte and payload.
    Raises FormatError if too short and ChecksumMismatch if the checksum fails.
    """
    decoded = decode_base58(text)
    if len(decoded) < 1 + HASHES.CHECKSUM:
        raise FormatError(f"Base58Check data too short: {len(decoded)} bytes")

    data, checksum = decoded[:-HASHES.CHECKSUM], decoded[-HASHES.CHECKSUM:]
    if hash256(data)[:HASHES.CHECKSUM] != checksum:
        raise ChecksumMismatch("Decoded checksum does not equal given checksum")

    logger.debug(f"Base58Check: {text} -> version {data[0]:#04x}, {len(data) - 1} byte payload")
    return data[0], data[1:]


if __name__ == "__main__":
    test_data = bytes.fromhex("3dca04f0b6a594a43ac7af7315338118299fce44")
    test_encoding = encode_base58check(0x4c, test_data)
    print(f"ENCODING: {test_encoding}")
    v_v, v_d = decode_base58check(test_encoding)
    print(f"RECOVERED DATA: {v_d.hex()}")
    print(f"ORIGINAL DATA : {test_data.hex()}")
