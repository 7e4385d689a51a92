"""
The network table. A network owns two payment address version bytes and one WIF version byte; the version byte
of any Base58Check value is enough to classify it.
"""
from enum import Enum

from .exceptions import UnrecognizedNetwork
from .formats import NETWORK

__all__ = ["Network"]


class Network(Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

    @property
    def address_versions(self) -> tuple:
        return NETWORK.MAINNET_ADDRESS if self is Network.MAINNET else NETWORK.TESTNET_ADDRESS

    @property
    def address_version(self) -> int:
        """The pubkey hash version byte"""
        return self.address_versions[0]

    @property
    def wif_version(self) -> int:
        return NETWORK.MAINNET_WIF if self is Network.MAINNET else NETWORK.TESTNET_WIF

    @property
    def versions(self) -> tuple:
        """Every version byte belonging to the network"""
        return *self.address_versions, self.wif_version

    @classmethod
    def from_version(cls, version: int) -> "Network":
        """
        Classify either flavor of version byte (address or WIF)
        """
        for network in cls:
            if version in network.versions:
                return network
        raise UnrecognizedNetwork(f"Unrecognized network version byte: {version:#04x}")

    @classmethod
    def from_name(cls, name: str) -> "Network":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnrecognizedNetwork(f"Unrecognized network name: {name!r}") from None

    @staticmethod
    def to_address_version(version: int) -> int:
        """
        Normalize a version byte for use in an address: a WIF version becomes its network's pubkey hash version,
        address versions pass through unchanged.
        """
        network = Network.from_version(version)
        if version == network.wif_version:
            return network.address_version
        return version

    @staticmethod
    def to_wif_version(version: int) -> int:
        """
        Normalize a version byte for use in a WIF: any version of a network becomes that network's WIF version.
        """
        return Network.from_version(version).wif_version

    def __str__(self):
        return self.value
