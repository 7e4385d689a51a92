"""
Pay-to-pubkey-hash payment addresses

address = Base58Check(address_version, RIPEMD160(SHA256(compressed pubkey)))
"""
from typing import Tuple

from dashmsg.core import HASHES, FormatError, Network, UnrecognizedNetwork
from dashmsg.core.logging import get_logger
from dashmsg.crypto.ecc_keys import PubKey
from dashmsg.crypto.hash_functions import hash160
from dashmsg.encoding.base58 import encode_base58check, decode_base58check

logger = get_logger(__name__)

__all__ = ["public_key_to_address", "address_to_version", "address_to_network", "address_to_pubkey_hash",
           "check_address", "is_valid_address"]


def public_key_to_address(pub_key: PubKey, network: Network | int = Network.MAINNET) -> str:
    """
    Returns the payment address of the public key. The network may be given as a Network or as a raw version byte;
    a WIF version is normalized to its network's pubkey hash version.
    """
    if isinstance(network, Network):
        version = network.address_version
    else:
        version = Network.to_address_version(network)
    return encode_base58check(version, hash160(pub_key.compressed()))


def _decode_address(address: str) -> Tuple[int, bytes]:
    version, payload = decode_base58check(address)
    if len(payload) != HASHES.HASH160:
        raise FormatError(f"Address payload must be {HASHES.HASH160} bytes, not {len(payload)}")
    return version, payload


def address_to_version(address: str) -> int:
    """
    Returns the address version byte, normalized for re-encoding as an address
    """
    version, _ = _decode_address(address)
    return Network.to_address_version(version)


def address_to_network(address: str) -> Network:
    version, _ = _decode_address(address)
    return Network.from_version(version)


def address_to_pubkey_hash(address: str) -> bytes:
    _, payload = _decode_address(address)
    return payload


def check_address(address: str, network: Network) -> int:
    """
    Returns the version byte of an address belonging to network.
    Raises FormatError (or ChecksumMismatch) for a malformed address and UnrecognizedNetwork for a version outside the
    network's address versions.
    """
    version, _ = _decode_address(address)
    if version not in network.address_versions:
        raise UnrecognizedNetwork(f"Address {address} is not a valid {network} address")
    return version


def is_valid_address(address: str, network: Network) -> bool:
    """
    True if the address decodes to a 20-byte payload under one of the network's address versions
    """
    try:
        check_address(address, network)
    except (FormatError, UnrecognizedNetwork) as e:
        logger.debug(f"Invalid address {address!r}: {e}")
        return False
    return True
