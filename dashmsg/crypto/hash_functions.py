"""
Shortcuts for the hash functions used in message signing. Each function returns the bytes digest
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

from dashmsg.core.byte_stream import write_compact_size
from dashmsg.core.formats import MESSAGE

__all__ = ["sha256", "ripemd160", "hash256", "hash160", "magic_concat", "magic_hash"]


# --- SHA --- #
def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


# --- RIPEMD --- #

def ripemd160(data: bytes) -> bytes:
    return bytes(_ripemd160(data))


# --- BTC HASH FUNCTIONS --- #

def hash256(data: bytes) -> bytes:
    """SHA256(SHA256(data))"""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))


# --- SIGNED MESSAGE HASHES --- #

def magic_concat(message: bytes, magic_bytes: bytes = MESSAGE.MAGIC_BYTES) -> bytes:
    """
    Returns CompactSize(len(magic)) || magic || CompactSize(len(message)) || message
    """
    return b''.join([
        write_compact_size(len(magic_bytes)),
        magic_bytes,
        write_compact_size(len(message)),
        message
    ])


def magic_hash(message: bytes, magic_bytes: bytes = MESSAGE.MAGIC_BYTES) -> bytes:
    """The value actually signed: HASH256 of the magic preimage"""
    return hash256(magic_concat(message, magic_bytes))
