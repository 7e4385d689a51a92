"""
Tests for the Vote record
"""
import json
from datetime import datetime, timezone

import pytest

from dashmsg import ChecksumMismatch, FormatError, Network, SignatureMismatch, UnrecognizedNetwork, Vote, VerifyResult

TIMESTAMP = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_vote_verify(signed_vote):
    address, message, signature = signed_vote
    vote = Vote(address, message, signature, TIMESTAMP)

    vote.verify(Network.MAINNET)
    assert vote.check(Network.MAINNET) == VerifyResult.OK
    assert vote.check(Network.TESTNET) == VerifyResult.UNRECOGNIZED_NETWORK
    with pytest.raises(UnrecognizedNetwork):
        vote.verify(Network.TESTNET)


def test_vote_wrong_message(signed_vote):
    address, _, signature = signed_vote
    vote = Vote(address, "I vote for candidate B", signature)

    assert vote.check(Network.MAINNET) == VerifyResult.MISMATCH
    with pytest.raises(SignatureMismatch):
        vote.verify(Network.MAINNET)


def test_vote_json(signed_vote):
    address, message, signature = signed_vote
    vote = Vote(address, message, signature, TIMESTAMP)

    vote_dict = vote.to_dict()
    assert vote_dict == {"addr": address, "msg": message, "sig": signature, "ts": "2026-01-02T03:04:05Z"}
    assert Vote.from_dict(vote_dict) == vote
    assert Vote.from_json(vote.to_json()) == vote
    assert str(vote) == f"Vote<{address} {message} {signature} 2026-01-02T03:04:05Z>"


def test_vote_received_time(signed_vote):
    address, message, signature = signed_vote
    vote = Vote.from_dict({"addr": address, "msg": message, "sig": signature})
    assert vote.created_at.tzinfo is not None

    received = Vote.from_dict({"addr": address, "msg": message, "sig": signature, "ts": "2020-01-01T00:00:00Z"},
                              created_at=TIMESTAMP)
    assert received.created_at == TIMESTAMP


@pytest.mark.parametrize("data", [
    "not json",
    json.dumps({"addr": "X", "msg": "m"}),
    json.dumps({"addr": 1, "msg": "m", "sig": "s"}),
    json.dumps({"addr": "X", "msg": "m", "sig": "s", "ts": "yesterday"}),
    json.dumps(["addr", "msg", "sig"]),
])
def test_vote_malformed(data):
    with pytest.raises(FormatError):
        Vote.from_json(data)


def test_vote_corrupted_address(signed_vote):
    """
    A corrupted address is reported as a checksum failure, the same as for a bare verification
    """
    address, message, signature = signed_vote
    corrupted = address[:-1] + ("2" if address[-1] != "2" else "3")
    vote = Vote(corrupted, message, signature)

    assert vote.check(Network.MAINNET) == VerifyResult.CHECKSUM_MISMATCH
    with pytest.raises(ChecksumMismatch):
        vote.verify(Network.MAINNET)


def test_vote_timestamp_without_offset(signed_vote):
    """
    A timestamp without a UTC offset is read as UTC and written back unchanged
    """
    address, message, signature = signed_vote
    vote = Vote.from_dict({"addr": address, "msg": message, "sig": signature, "ts": "2020-01-01T00:00:00"})

    assert vote.created_at == datetime(2020, 1, 1, tzinfo=timezone.utc)
    assert vote.to_dict()["ts"] == "2020-01-01T00:00:00Z"
