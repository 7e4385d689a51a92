"""
The custom exceptions used throughout dashmsg
"""
__all__ = ["DashMsgError", "FormatError", "ChecksumMismatch", "RecoveryFailure", "UnrecognizedNetwork",
           "SignatureMismatch"]


class DashMsgError(Exception):
    """
    Parent class for every error raised by dashmsg
    """
    pass


class FormatError(DashMsgError):
    """
    For malformed wire values: base64, base58, CompactSize, lengths and out of range scalars
    """
    pass


class ChecksumMismatch(FormatError):
    """
    For when the Base58Check checksum does not match the decoded data
    """
    pass


class RecoveryFailure(FormatError):
    """
    For when (r, s, recovery_id) does not yield a valid public key
    """
    pass


class UnrecognizedNetwork(DashMsgError):
    """
    For version bytes or network names outside the known network table
    """
    pass


class SignatureMismatch(DashMsgError):
    """
    For a well-formed signature whose recovered key does not belong to the given address
    """
    pass
