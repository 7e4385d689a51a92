"""
Fixtures used in the tests
"""
import pytest

from dashmsg import Network, public_key_to_address, sign_message
from utility import random_keypair


@pytest.fixture()
def keypair():
    return random_keypair()


@pytest.fixture(params=list(Network), ids=lambda n: n.value)
def network(request):
    return request.param


@pytest.fixture()
def signed_vote(keypair):
    """A mainnet (address, message, signature) triple that verifies"""
    private_key, pub_key = keypair
    message = "I vote for candidate A"
    address = public_key_to_address(pub_key, Network.MAINNET)
    return address, message, sign_message(private_key, message)
