"""
Signing and verifying messages scoped to the Dash network

Signing:
    magic_hash(message) -> ECDSA (r, s) -> trial recovery for the recovery id -> CompactSignature -> base64

Verifying:
    base64 -> CompactSignature -> magic_hash(message) -> recovered public key -> address under the claimed
    address's own version byte -> exact string comparison with the claimed address
"""
from enum import Enum
from typing import Optional

from dashmsg.core import (ChecksumMismatch, DashMsgError, FormatError, Network, RecoveryFailure, SignatureMismatch,
                          UnrecognizedNetwork)
from dashmsg.core.logging import get_logger
from dashmsg.crypto.ecc_keys import PubKey
from dashmsg.crypto.ecdsa import ecdsa, find_recovery_id, recover_public_key
from dashmsg.crypto.hash_functions import magic_hash
from dashmsg.message.signature import CompactSignature
from dashmsg.wallet.address import address_to_version, public_key_to_address

logger = get_logger(__name__)

__all__ = ["VerifyResult", "magic_sign", "sign_message", "signature_to_public_key", "magic_verify",
           "verify_message"]

# Exception kinds mapped to results, most specific first
_RESULTS = (
    (ChecksumMismatch, "CHECKSUM_MISMATCH"),
    (RecoveryFailure, "RECOVERY_FAILURE"),
    (FormatError, "FORMAT_ERROR"),
    (UnrecognizedNetwork, "UNRECOGNIZED_NETWORK"),
    (SignatureMismatch, "MISMATCH"),
)


class VerifyResult(Enum):
    OK = "ok"
    MISMATCH = "mismatch"
    FORMAT_ERROR = "format_error"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    UNRECOGNIZED_NETWORK = "unrecognized_network"
    RECOVERY_FAILURE = "recovery_failure"

    @classmethod
    def from_error(cls, error: DashMsgError) -> "VerifyResult":
        for error_type, name in _RESULTS:
            if isinstance(error, error_type):
                return cls[name]
        return cls.FORMAT_ERROR

    def __bool__(self):
        return self is VerifyResult.OK


def _message_bytes(message: bytes | str) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise FormatError(f"Expected message as bytes or str but received: {type(message)}")


def magic_sign(private_key: int, message: bytes | str) -> CompactSignature:
    """
    Signs the magic hash of the message. The nonce is random, so repeated calls give different signatures, each of
    which verifies.
    """
    msg_hash = magic_hash(_message_bytes(message))
    pub_key = PubKey(private_key)

    r, s = ecdsa(private_key, msg_hash)
    recovery_id = find_recovery_id(msg_hash, r, s, pub_key)
    return CompactSignature(recovery_id, r, s)


def sign_message(private_key: int, message: bytes | str) -> str:
    """Returns the base64 compact signature of the message"""
    return magic_sign(private_key, message).to_base64()


def signature_to_public_key(msg_hash: bytes, signature: CompactSignature) -> PubKey:
    """Recovers the signer's public key from the magic hash and the compact signature"""
    return recover_public_key(msg_hash, signature.r, signature.s, signature.recovery_id)


def magic_verify(address: str, message: bytes | str, signature: str | bytes,
                 network: Optional[Network] = None) -> None:
    """
    Checks that the base64 signature over message was made by the key behind the pubkey hash address.

    If network is given, the address must carry one of that network's address versions.

    Returns None on success. Raises:
        FormatError: malformed signature, message or address
        ChecksumMismatch: address fails its Base58Check checksum
        RecoveryFailure: no public key can be recovered from the signature
        UnrecognizedNetwork: address version outside the table or outside the given network
        SignatureMismatch: the recovered key belongs to a different address
    """
    compact_sig = CompactSignature.from_base64(signature)
    msg_hash = magic_hash(_message_bytes(message))

    pub_key = signature_to_public_key(msg_hash, compact_sig)

    version = address_to_version(address)
    if network is not None and version not in network.address_versions:
        raise UnrecognizedNetwork(f"Address {address} is not a {network} address")

    guess = public_key_to_address(pub_key, version)
    if guess != address:
        raise SignatureMismatch(
            f"Signature's public key hash payment address {guess} does not match given address {address}")


def verify_message(address: str, message: bytes | str, signature: str | bytes,
                   network: Optional[Network] = None) -> VerifyResult:
    """
    Same as magic_verify, but every outcome is returned as a VerifyResult rather than raised.
    """
    try:
        magic_verify(address, message, signature, network)
    except DashMsgError as e:
        result = VerifyResult.from_error(e)
        logger.debug(f"Verification of {address!r} failed ({result.value}): {e}")
        return result

    logger.debug(f"Verified signature for {address}")
    return VerifyResult.OK
