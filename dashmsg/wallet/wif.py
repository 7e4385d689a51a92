"""
Wallet Import Format (WIF) for private keys

WIF = Base58Check(wif_version, 32-byte big-endian private key [|| 0x01 if the public key is used compressed])
"""
import secrets
from dataclasses import dataclass
from typing import Tuple

from dashmsg.core import KEYS, FormatError, Network, UnrecognizedNetwork
from dashmsg.core.logging import get_logger
from dashmsg.crypto.ecc import SECP256K1
from dashmsg.crypto.ecc_keys import PubKey, validate_private_key
from dashmsg.encoding.base58 import encode_base58check, decode_base58check

logger = get_logger(__name__)

__all__ = ["WIFKey", "generate_private_key", "generate_wif", "private_key_to_wif", "wif_to_private_key"]


@dataclass(frozen=True)
class WIFKey:
    """A decoded WIF: the network it belongs to, the private key and its public key"""
    network: Network
    private_key: int
    compressed: bool
    pub_key: PubKey

    def to_wif(self) -> str:
        return private_key_to_wif(self.private_key, self.network, self.compressed)


def generate_private_key() -> int:
    """A uniformly random scalar in [1, n-1] from the operating system CSPRNG"""
    return secrets.randbelow(SECP256K1.order - 1) + 1


def private_key_to_wif(private_key: int, network: Network | int = Network.MAINNET, compressed: bool = True) -> str:
    """
    Encodes the private key under the network's WIF version. A raw version byte of either flavor is accepted and
    normalized to the WIF version.
    """
    validate_private_key(private_key)
    version = network.wif_version if isinstance(network, Network) else Network.to_wif_version(network)

    payload = private_key.to_bytes(KEYS.PRIV, "big")
    if compressed:
        payload += bytes([KEYS.COMPRESSION_FLAG])
    return encode_base58check(version, payload)


def generate_wif(network: Network = Network.MAINNET) -> Tuple[int, str]:
    """Returns a fresh private key and its compressed WIF"""
    private_key = generate_private_key()
    return private_key, private_key_to_wif(private_key, network, compressed=True)


def wif_to_private_key(wif: str) -> WIFKey:
    """
    Decodes the WIF into its network, private key and public key.
    Raises FormatError for bad lengths or scalars and UnrecognizedNetwork for a version outside the WIF table.
    """
    version, payload = decode_base58check(wif)

    if len(payload) == KEYS.PRIV + 1:
        if payload[-1] != KEYS.COMPRESSION_FLAG:
            raise FormatError(f"Invalid WIF compression flag: {payload[-1]:#04x}")
        compressed = True
    elif len(payload) == KEYS.PRIV:
        compressed = False
    else:
        raise FormatError(f"Invalid WIF payload length: {len(payload)}")

    network = Network.from_version(version)
    if version != network.wif_version:
        raise UnrecognizedNetwork(f"Version {version:#04x} is a {network} address version, not a WIF version")
    logger.debug(f"Decoded {network} WIF (compressed={compressed})")

    private_key = validate_private_key(int.from_bytes(payload[:KEYS.PRIV], "big"))
    return WIFKey(network=network, private_key=private_key, compressed=compressed, pub_key=PubKey(private_key))
