"""
The CompactSignature class

    marker (1 byte) || r (32 bytes) || s (32 bytes)

where marker = 27 + 4 + recovery_id. The +4 flags that the signer's public key is recovered in compressed form.
The text form is standard base64 with padding.
"""
import base64
import binascii

from dashmsg.core import KEYS, MESSAGE, FormatError, SERIALIZED, Serializable, get_stream, read_stream

__all__ = ["CompactSignature"]

MARKER_BASE = MESSAGE.RECOVERY_OFFSET + MESSAGE.COMPRESSED_OFFSET
SCALAR_BYTES = KEYS.COORD_BYTES


class CompactSignature(Serializable):
    __slots__ = ("recovery_id", "r", "s")

    def __init__(self, recovery_id: int, r: int, s: int):
        if not 0 <= recovery_id <= MESSAGE.MAX_RECOVERY_ID:
            raise FormatError(f"Recovery id {recovery_id} out of range")
        if not (0 <= r < 1 << 256 and 0 <= s < 1 << 256):
            raise FormatError("Signature values must fit in 32 bytes")
        self.recovery_id = recovery_id
        self.r = r
        self.s = s

    @property
    def marker(self) -> int:
        return MARKER_BASE + self.recovery_id

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        marker = read_stream(stream, 1, "signature marker")[0]
        r = int.from_bytes(read_stream(stream, SCALAR_BYTES, "signature r"), "big")
        s = int.from_bytes(read_stream(stream, SCALAR_BYTES, "signature s"), "big")
        if stream.read(1):
            raise FormatError(f"Compact signature must be {KEYS.SIG_RECOVERABLE} bytes")

        recovery_id = marker - MARKER_BASE
        if not 0 <= recovery_id <= MESSAGE.MAX_RECOVERY_ID:
            raise FormatError(f"Invalid compact signature marker: {marker}")
        return cls(recovery_id, r, s)

    @classmethod
    def from_base64(cls, text: str | bytes):
        try:
            raw = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError, TypeError) as e:
            raise FormatError(f"Could not decode signature: {e}") from e
        return cls.from_bytes(raw)

    def to_bytes(self) -> bytes:
        return b''.join([
            bytes([self.marker]),
            self.r.to_bytes(SCALAR_BYTES, "big"),
            self.s.to_bytes(SCALAR_BYTES, "big")
        ])

    def to_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    def to_dict(self) -> dict:
        return {
            "recovery_id": self.recovery_id,
            "r": self.r.to_bytes(SCALAR_BYTES, "big").hex(),
            "s": self.s.to_bytes(SCALAR_BYTES, "big").hex()
        }
