"""
Methods for deserializing byte streams, along with the CompactSize (BCVarint) length prefix
"""
from io import BytesIO
from typing import Union, Optional, Literal

from .exceptions import FormatError
from .formats import DATA

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_little_int", "read_big_int", "read_compact_size",
           "write_compact_size"]

SERIALIZED = Union[bytes, BytesIO]
BYTEORDER = Literal['big', 'little']


def get_stream(byte_stream: SERIALIZED):
    """Convert bytes or BytesIO to BytesIO stream"""
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(byte_stream)
    elif isinstance(byte_stream, BytesIO):
        return byte_stream
    else:
        raise TypeError(f"Expected bytes or BytesIO but received: {type(byte_stream)}")


def read_stream(stream: BytesIO, length: int, data_type: Optional[str] = None) -> bytes:
    """Read exact number of bytes from stream with error checking"""
    data = stream.read(length)

    # Verify data integrity
    if len(data) != length:
        if data_type:
            raise FormatError(f"Error reading stream. Insufficient data. Data type: {data_type}")
        else:
            raise FormatError("Error reading stream. Insufficient data.")

    return data


def _read_int(stream: BytesIO, length: int, byteorder: BYTEORDER, data_type: Optional[str] = None) -> int:
    """Internal method to read integer from stream"""
    data = read_stream(stream, length, data_type)
    return int.from_bytes(data, byteorder)


def read_little_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read little-endian integer from stream"""
    return _read_int(stream, length, "little", data_type)


def read_big_int(stream: BytesIO, length: int, data_type: Optional[str] = None) -> int:
    """Read big-endian integer from stream"""
    return _read_int(stream, length, "big", data_type)


# --- COMPACT SIZE --- #

def read_compact_size(byte_stream: SERIALIZED) -> int:
    """
    Returns the integer value of the CompactSize encoding at the head of the stream. Exactly the number of bytes
    implied by the prefix is consumed.
    """
    stream = get_stream(byte_stream)

    # Prefix
    prefix = read_little_int(stream, 1, "Compact Size Prefix")

    # One byte compact size number
    if prefix <= 0xfc:
        return prefix

    match prefix:
        case 0xfd:
            return read_little_int(stream, 2, "Compact Size: 0xfd")
        case 0xfe:
            return read_little_int(stream, 4, "Compact Size: 0xfe")
        case _:
            return read_little_int(stream, 8, "Compact Size: 0xff")


def write_compact_size(num: int) -> bytes:
    """
    Given a non-negative integer we return its CompactSize encoding
    """
    if num < 0 or num > DATA.MAX_COMPACTSIZE:
        raise FormatError(f"Given number {num} out of bounds for CompactSize encoding")

    if num <= 0xfc:  # One byte
        return num.to_bytes(1, "little")
    elif num <= 0xffff:  # Two bytes
        return b'\xfd' + num.to_bytes(2, "little")
    elif num <= 0xffffffff:  # Four bytes
        return b'\xfe' + num.to_bytes(4, "little")
    else:  # Eight bytes
        return b'\xff' + num.to_bytes(8, "little")
