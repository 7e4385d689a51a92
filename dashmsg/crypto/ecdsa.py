"""
Methods to create, verify and recover from a signature created using ECDSA over secp256k1
"""
import secrets
from typing import Tuple

from dashmsg.core import MESSAGE, FormatError, RecoveryFailure
from dashmsg.core.logging import get_logger
from dashmsg.crypto.ecc import SECP256K1, Point
from dashmsg.crypto.ecc_keys import PubKey, validate_private_key

logger = get_logger(__name__)

__all__ = ["ecdsa", "verify_ecdsa", "recover_public_key", "find_recovery_id"]

curve = SECP256K1


def _message_int(message_hash: bytes) -> int:
    """Keep the n leftmost bits of the message hash"""
    n = curve.order
    z = int.from_bytes(message_hash, 'big')
    excess = len(message_hash) * 8 - n.bit_length()
    if excess > 0:
        z >>= excess
    return z


def ecdsa(private_key: int, message_hash: bytes) -> Tuple[int, int]:
    """
    Generates an ECDSA signature for a given private_key and message hash.

    Parameters:
    ----------
    private_key : int
        The signer's private key.
    message_hash : bytes
        The hash of the message that will be signed.

    Returns:
    --------
    tuple
        The ECDSA signature (r, s), using low s.

    Algorithm:
    ----------
    1) Compute z as the integer value of the first n bits of message hash.
    2) Select a random integer k in [1, n-1].
    3) Calculate curve point (x, y) = k * generator.
    4) Compute r = x (mod n) and s = k^(-1)(z + r * private_key) (mod n).
    5) If r or s is 0, repeat from step 2.
    6) Return the signature (r, min(s, n - s)).
    """
    validate_private_key(private_key)
    n = curve.order
    z = _message_int(message_hash)

    while True:
        k = secrets.randbelow(n - 1) + 1

        x, _ = curve.multiply_generator(k)
        r = x % n
        if r == 0:
            continue

        s = (pow(k, -1, n) * (z + r * private_key)) % n
        if s == 0:
            continue
        break

    if s > n // 2:
        s = n - s
    return r, s


def verify_ecdsa(signature: tuple, message_hash: bytes, public_key: PubKey) -> bool:
    """
    We verify that the given signature corresponds to the given public_key for the message hash.

    Algorithm
    --------
    1) Verify that (r,s) are integers in the interval [1,n-1]
    2) Let u1 = z * s^(-1) (mod n) and u2 = r * s^(-1) (mod n)
    3) Calculate the curve point (x,y) = (u1 * generator) + (u2 * public_key)
    4) If r = x (mod n), the signature is valid.
    """
    n = curve.order
    r, s = signature

    if not (1 <= r < n and 1 <= s < n):
        raise FormatError("ECDSA signature values out of bounds.")

    z = _message_int(message_hash)
    s_inv = pow(s, -1, n)
    u1 = (z * s_inv) % n
    u2 = (r * s_inv) % n

    point = curve.add_points(curve.multiply_generator(u1), curve.scalar_multiplication(u2, public_key.point))
    if not point:
        return False
    return r == point.x % n


def recover_public_key(message_hash: bytes, r: int, s: int, recovery_id: int) -> PubKey:
    """
    Recovers the public key which produced (r, s) over message_hash, selected by recovery_id.

    The recovery id packs two bits: bit 1 chooses the x coordinate of the nonce point R (r or r + n) and bit 0
    chooses the parity of its y coordinate. The public key is then Q = r^(-1) * (s*R - z*G).
    """
    n = curve.order

    if not 0 <= recovery_id <= MESSAGE.MAX_RECOVERY_ID:
        raise RecoveryFailure(f"Recovery id {recovery_id} out of range")
    if not (1 <= r < n and 1 <= s < n):
        raise RecoveryFailure("Signature values out of bounds")

    x = r + (recovery_id >> 1) * n
    if x >= curve.p:
        raise RecoveryFailure("Recovery id selects an x coordinate beyond the field")

    try:
        big_r = curve.lift_x(x, recovery_id & 1)
    except ValueError as e:
        raise RecoveryFailure(f"No curve point for recovery id {recovery_id}") from e

    z = _message_int(message_hash)
    r_inv = pow(r, -1, n)
    s_r = curve.scalar_multiplication(s, big_r)
    z_g = curve.negate(curve.multiply_generator(z))
    q = curve.scalar_multiplication(r_inv, curve.add_points(s_r, z_g))

    if not q:
        raise RecoveryFailure("Recovered public key is the point at infinity")
    return PubKey.from_point(q)


def find_recovery_id(message_hash: bytes, r: int, s: int, public_key: PubKey) -> int:
    """
    Trial recovery over the four candidates; returns the first id whose recovered key equals public_key.
    """
    for recovery_id in range(MESSAGE.MAX_RECOVERY_ID + 1):
        try:
            candidate = recover_public_key(message_hash, r, s, recovery_id)
        except RecoveryFailure:
            continue
        if candidate == public_key:
            logger.debug(f"Recovery id {recovery_id} matches signer public key")
            return recovery_id
    raise RecoveryFailure("No recovery id reproduces the signer public key")


if __name__ == "__main__":
    test_key = secrets.randbelow(curve.order - 1) + 1
    test_hash = secrets.token_bytes(32)
    test_r, test_s = ecdsa(test_key, test_hash)
    test_id = find_recovery_id(test_hash, test_r, test_s, PubKey(test_key))
    print(f"SIGNATURE  : {hex(test_r), hex(test_s)}")
    print(f"RECOVERY ID: {test_id}")
    print(f"VERIFIED   : {verify_ecdsa((test_r, test_s), test_hash, PubKey(test_key))}")
