"""
Devices
*******

This module contains all of the device implementations.
Each device implementation is a subclass of :class:`~hwslib.signer.Signer`.
"""

from .ledger import LedgerSigner

__all__ = [
    'ledger',
]
