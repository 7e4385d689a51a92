"""
Elliptic curve cryptography and hash functions
"""
# crypto/__init__.py
from dashmsg.crypto.ecc import *
from dashmsg.crypto.ecc_keys import *
from dashmsg.crypto.ecdsa import *
from dashmsg.crypto.hash_functions import *
