"""
Signed messages: the compact recoverable signature and the sign / verify pipelines
"""
# message/__init__.py
from dashmsg.message.signature import *
from dashmsg.message.signer import *
