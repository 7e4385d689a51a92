"""
The Vote class - an externally submitted (address, message, signature) triple with its receipt time.
A vote counts only if its address belongs to the running network and its signature verifies.
"""
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from dashmsg.core import DashMsgError, FormatError, Network
from dashmsg.message.signer import VerifyResult, magic_verify
from dashmsg.wallet.address import check_address

__all__ = ["Vote"]

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass(frozen=True)
class Vote:
    address: str
    message: str
    signature: str
    created_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_dict(cls, vote_dict: dict, created_at: Optional[datetime] = None):
        """
        Builds a vote from its JSON form {"addr", "msg", "sig"[, "ts"]}. An explicit created_at wins over "ts".
        """
        try:
            address, message, signature = vote_dict["addr"], vote_dict["msg"], vote_dict["sig"]
        except (KeyError, TypeError) as e:
            raise FormatError(f"Vote is missing a field: {e}") from e
        if not all(isinstance(v, str) for v in (address, message, signature)):
            raise FormatError("Vote fields addr, msg and sig must be strings")

        if created_at is None and vote_dict.get("ts"):
            try:
                created_at = datetime.fromisoformat(vote_dict["ts"].replace("Z", "+00:00"))
            except (AttributeError, ValueError) as e:
                raise FormatError(f"Invalid vote timestamp: {vote_dict['ts']!r}") from e
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(address, message, signature, created_at or _utc_now())

    @classmethod
    def from_json(cls, data: str | bytes):
        try:
            vote_dict = json.loads(data)
        except ValueError as e:
            raise FormatError(f"Invalid vote JSON: {e}") from e
        return cls.from_dict(vote_dict)

    @property
    def timestamp(self) -> str:
        return self.created_at.astimezone(timezone.utc).strftime(TIME_FORMAT)

    def to_dict(self) -> dict:
        return {
            "addr": self.address,
            "msg": self.message,
            "sig": self.signature,
            "ts": self.timestamp
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def verify(self, network: Network) -> None:
        """Raises the first reason this vote does not count"""
        check_address(self.address, network)
        magic_verify(self.address, self.message, self.signature, network)

    def check(self, network: Network) -> VerifyResult:
        try:
            self.verify(network)
        except DashMsgError as e:
            return VerifyResult.from_error(e)
        return VerifyResult.OK

    def __str__(self):
        return f"Vote<{self.address} {self.message} {self.signature} {self.timestamp}>"
