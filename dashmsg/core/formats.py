"""
The Dash message signing formats
"""
from typing import Final

__all__ = ["DATA", "HASHES", "KEYS", "NETWORK", "MESSAGE", "LOGGING"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff


class HASHES:
    SHA256: Final[int] = 32
    RIPEMD160: Final[int] = 20
    HASH160: Final[int] = 20
    CHECKSUM: Final[int] = 4


class KEYS:
    PRIV: Final[int] = 32
    COORD_BYTES: Final[int] = 32
    PUB_COMP: Final[int] = 33
    PUB_UNCOMP: Final[int] = 65
    SIG_RECOVERABLE: Final[int] = 65
    COMPRESSION_FLAG: Final[int] = 0x01


class NETWORK:
    """
    Base58Check version bytes. Each network has two payment address versions (pubkey hash, script hash) and one
    WIF version.
    """
    MAINNET_ADDRESS: Final[tuple] = (0x4c, 0x10)
    MAINNET_WIF: Final[int] = 0xcc
    TESTNET_ADDRESS: Final[tuple] = (0x8c, 0x13)
    TESTNET_WIF: Final[int] = 0xef


class MESSAGE:
    """
    Signed message constants. The magic bytes must match the wallet software byte-for-byte.
    """
    MAGIC_BYTES: Final[bytes] = b"DarkCoin Signed Message:\n"
    RECOVERY_OFFSET: Final[int] = 27
    COMPRESSED_OFFSET: Final[int] = 4
    MAX_RECOVERY_ID: Final[int] = 3


class LOGGING:
    DEFAULT_LEVEL: Final[str] = "INFO"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
