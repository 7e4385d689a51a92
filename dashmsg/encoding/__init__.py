"""
Text encodings for wire values
"""
# encoding/__init__.py
from dashmsg.encoding.base58 import *
