"""
Common Classes and Utilities
****************************
"""

import hashlib

from enum import Enum

from typing import Union


class SignatureScheme(Enum):
    """
    The signature scheme of a key. The value is the one byte flag
    that prefixes serialized signatures and address preimages.
    """
    ED25519 = 0x00 #: Ed25519 keys, 32 byte public keys

    def __str__(self) -> str:
        return str(self.name).lower()

    def __repr__(self) -> str:
        return str(self)

    @property
    def flag(self) -> int:
        return self.value

    @property
    def public_key_size(self) -> int:
        return PUBLIC_KEY_SIZES[self]

    @staticmethod
    def from_flag(flag: int) -> 'SignatureScheme':
        """
        Look up a scheme by its serialized flag byte.

        :param flag: The flag byte
        :return: The matching scheme
        :raises ValueError: if no scheme uses that flag
        """
        for scheme in SignatureScheme:
            if scheme.value == flag:
                return scheme
        raise ValueError("Unknown signature scheme flag 0x{:02x}".format(flag))


PUBLIC_KEY_SIZES = {
    SignatureScheme.ED25519: 32,
}

SIGNATURE_SIZE = 64


class Network(Enum):
    """
    The network a signer is bound to
    """
    MAINNET = 0 #: Sui main network
    TESTNET = 1 #: Sui test network
    DEVNET = 2 #: Sui development network
    LOCALNET = 3 #: A locally running network

    def __str__(self) -> str:
        return str(self.name).lower()

    def __repr__(self) -> str:
        return str(self)

    @staticmethod
    def argparse(s: str) -> Union['Network', str]:
        try:
            return Network[s.upper()]
        except KeyError:
            return s


def blake2b256(s: bytes) -> bytes:
    """
    Perform a single BLAKE2b hash with a 32 byte digest.

    :param s: Bytes to hash
    :return: The hash
    """
    return hashlib.blake2b(s, digest_size=32).digest()
