"""
Contains the core elements that are used within dashmsg

Core:
    -Provides the reference formats and constants for dashmsg
    -Provides custom exceptions for the signing and verification pipelines
    -Provides byte stream and CompactSize helpers
    -Provides the network table
"""
# core/__init__.py
from dashmsg.core.byte_stream import *
from dashmsg.core.exceptions import *
from dashmsg.core.formats import *
from dashmsg.core.network import *
from dashmsg.core.serializable import *
