"""
dashmsg - sign and verify messages with Dash payment addresses

A holder of a private key signs an arbitrary message; anyone holding only the payment address can verify the
signature by recovering the public key from it and re-deriving the address.
"""
# dashmsg/__init__.py
from dashmsg.core import *
from dashmsg.crypto import *
from dashmsg.encoding import *
from dashmsg.message import *
from dashmsg.vote import *
from dashmsg.wallet import *
