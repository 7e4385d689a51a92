"""
We generate random signatures, verify them and recover the signing key from them
"""
from secrets import token_bytes

import pytest

from dashmsg.core import FormatError, RecoveryFailure
from dashmsg.crypto import SECP256K1, ecdsa, find_recovery_id, recover_public_key, verify_ecdsa
from utility import random_keypair


def test_ecdsa():
    private_key, pub_key = random_keypair()
    messages = [token_bytes(32) for _ in range(3)]
    signatures = [ecdsa(private_key, m) for m in messages]

    for message, signature in zip(messages, signatures):
        assert verify_ecdsa(signature, message, pub_key), "Failed to verify ECDSA signature for random data"
        r, s = signature
        assert s <= SECP256K1.order // 2, "Signature must use low s"

    assert not verify_ecdsa(signatures[0], messages[1], pub_key)


def test_ecdsa_uses_fresh_nonces():
    private_key, _ = random_keypair()
    message = token_bytes(32)
    assert ecdsa(private_key, message) != ecdsa(private_key, message)


def test_verify_ecdsa_bounds():
    _, pub_key = random_keypair()
    with pytest.raises(FormatError):
        verify_ecdsa((0, 1), token_bytes(32), pub_key)
    with pytest.raises(FormatError):
        verify_ecdsa((1, SECP256K1.order), token_bytes(32), pub_key)


def test_recovery():
    """
    The trial loop finds the recovery id, and recovering with that id gives back the signer's key
    """
    private_key, pub_key = random_keypair()
    message = token_bytes(32)
    r, s = ecdsa(private_key, message)

    recovery_id = find_recovery_id(message, r, s, pub_key)
    assert 0 <= recovery_id <= 3
    assert recover_public_key(message, r, s, recovery_id) == pub_key

    # The sibling id (other y parity) recovers a different key
    sibling = recover_public_key(message, r, s, recovery_id ^ 1)
    assert sibling != pub_key


def test_find_recovery_id_wrong_key():
    private_key, _ = random_keypair()
    _, other_key = random_keypair()
    message = token_bytes(32)
    r, s = ecdsa(private_key, message)

    with pytest.raises(RecoveryFailure):
        find_recovery_id(message, r, s, other_key)


@pytest.mark.parametrize("r, s, recovery_id", [
    (0, 1, 0),
    (1, 0, 0),
    (SECP256K1.order, 1, 0),
    (1, SECP256K1.order, 1),
    (1, 1, 4),
    (1, 1, -1),
    (SECP256K1.p - SECP256K1.order, 1, 2),
])
def test_recovery_failures(r, s, recovery_id):
    with pytest.raises(RecoveryFailure):
        recover_public_key(token_bytes(32), r, s, recovery_id)
