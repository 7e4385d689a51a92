"""
The PubKey class - a point on secp256k1 derived from a private key, with its two serializations:
    -compressed: parity byte (0x02 even y, 0x03 odd y) || x  (33 bytes, the only form used for addresses)
    -uncompressed: 0x04 || x || y  (65 bytes)
"""
from dashmsg.core import KEYS, FormatError, SERIALIZED, Serializable, get_stream, read_stream, read_big_int
from dashmsg.crypto.ecc import EllipticCurve, SECP256K1, Point

__all__ = ["PubKey", "validate_private_key"]

BYTE_LEN = KEYS.COORD_BYTES


def validate_private_key(private_key: int, curve: EllipticCurve = SECP256K1) -> int:
    """Returns the private key if it lies in [1, n-1], otherwise raises FormatError"""
    if not isinstance(private_key, int) or not 1 <= private_key < curve.order:
        raise FormatError("Private key out of range for secp256k1")
    return private_key


class PubKey(Serializable):
    __slots__ = ("point",)

    def __init__(self, private_key: int, curve: EllipticCurve = SECP256K1):
        validate_private_key(private_key, curve)
        self.point = curve.multiply_generator(private_key)

    @classmethod
    def from_point(cls, point: Point, curve: EllipticCurve = SECP256K1):
        if not point or not curve.is_point_on_curve(point):
            raise FormatError("Public key point is not on the curve")
        instance = cls.__new__(cls)
        instance.point = point
        return instance

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED, curve: EllipticCurve = SECP256K1):
        """
        Parses either the compressed or the uncompressed serialization
        """
        stream = get_stream(byte_stream)

        type_byte = read_stream(stream, 1, "pubkey type byte")
        x_int = read_big_int(stream, BYTE_LEN, "pubkey_x")

        if type_byte in (b'\x02', b'\x03'):
            try:
                point = curve.lift_x(x_int, type_byte[0] & 1)
            except ValueError as e:
                raise FormatError(f"Invalid compressed public key: {e}") from e
        elif type_byte == b'\x04':
            y_int = read_big_int(stream, BYTE_LEN, "pubkey_y")
            point = Point(x_int, y_int)
        else:
            raise FormatError(f"Unidentified type byte for Public Key: {type_byte.hex()}")

        if stream.read(1):
            raise FormatError("Trailing data after public key")

        return cls.from_point(point, curve)

    def __eq__(self, other):
        if not isinstance(other, PubKey):
            return False
        return self.point == other.point

    def __hash__(self):
        return hash(self.point)

    @property
    def is_even_y(self) -> bool:
        return self.point.y % 2 == 0

    def _x_bytes(self):
        return self.point.x.to_bytes(length=BYTE_LEN, byteorder='big')

    def _y_bytes(self):
        return self.point.y.to_bytes(length=BYTE_LEN, byteorder='big')

    def compressed(self) -> bytes:
        """Returns the 33-byte compressed pubkey"""
        init_byte = b'\x02' if self.is_even_y else b'\x03'
        return b''.join([init_byte, self._x_bytes()])

    def uncompressed(self) -> bytes:
        """Returns the 65-byte uncompressed pubkey"""
        return b''.join([b'\x04', self._x_bytes(), self._y_bytes()])

    def to_bytes(self) -> bytes:
        return self.compressed()

    def to_dict(self) -> dict:
        return {
            "compressed": self.compressed().hex(),
            "uncompressed": self.uncompressed().hex()
        }
