"""
Wallet key material: WIF private keys and payment addresses
"""
# wallet/__init__.py
from dashmsg.wallet.address import *
from dashmsg.wallet.wif import *
