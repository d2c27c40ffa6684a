#!/usr/bin/env python3
# Copyright (c) 2026 The HWS developers
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
Key Classes and Utilities
*************************

Classes and utilities for working with public keys, addresses and derivation paths.
"""

from .common import (
    SignatureScheme,
    blake2b256,
)
from .errors import BadArgumentError

import base64
import binascii
from typing import (
    Dict,
    List,
)


HARDENED_FLAG = 1 << 31

SUI_PURPOSE = 44
SUI_COIN_TYPE = 784

DEFAULT_DERIVATION_PATH = "m/44'/784'/0'/0'/0'"

Address = str

def H_(x: int) -> int:
    """
    Shortcut function that "hardens" a number in a BIP44 path.
    """
    return x | HARDENED_FLAG

def is_hardened(i: int) -> bool:
    """
    Returns whether an index is hardened
    """
    return i & HARDENED_FLAG != 0


def parse_path(nstr: str) -> List[int]:
    """
    Convert BIP32 path string to list of uint32 integers with hardened flags.
    Several conventions are supported to set the hardened flag: 1', 1h, 1H

    e.g.: "m/0/1h/1" -> [0, 0x80000001, 1]

    :param nstr: path string
    :return: list of integers
    :raises ValueError: if the path cannot be parsed
    """
    if not nstr:
        return []

    n = nstr.split("/")

    # m/a/b/c => a/b/c
    if n[0] == "m":
        n = n[1:]

    def str_to_harden(x: str) -> int:
        hardened = x.endswith(("h", "H", "'"))
        if hardened:
            x = x[:-1]
        if not x.isdigit():
            raise ValueError(x)
        i = int(x)
        if i >= HARDENED_FLAG:
            raise ValueError(x)
        return H_(i) if hardened else i

    try:
        return [str_to_harden(x) for x in n]
    except ValueError:
        raise ValueError("Invalid BIP32 path", nstr)


def check_derivation_path(path: str) -> str:
    """
    Validate a derivation path and normalize its hardened markers to ``'``.

    :param path: The derivation path, e.g. ``m/44h/784h/0h/0h/0h``
    :return: The normalized path, e.g. ``m/44'/784'/0'/0'/0'``
    :raises BadArgumentError: if the path is not a valid BIP32 path
    """
    if not isinstance(path, str) or not path.startswith("m/"):
        raise BadArgumentError("Invalid derivation path: {}".format(path))
    try:
        indexes = parse_path(path)
    except ValueError:
        raise BadArgumentError("Invalid derivation path: {}".format(path))
    return "m/" + "/".join(
        "{}'".format(i & ~HARDENED_FLAG) if is_hardened(i) else str(i) for i in indexes
    )


def get_derivation_path(account: int = 0, change: int = 0, address_index: int = 0) -> str:
    """
    Build the standard Sui Ed25519 derivation path ``m/44'/784'/{account}'/{change}'/{address_index}'``.

    :param account: The account number
    :param change: The change level
    :param address_index: The address index
    :return: The derivation path string
    """
    for i in (account, change, address_index):
        if i < 0 or i >= HARDENED_FLAG:
            raise BadArgumentError("Derivation index out of range: {}".format(i))
    return "m/{}'/{}'/{}'/{}'/{}'".format(SUI_PURPOSE, SUI_COIN_TYPE, account, change, address_index)


def is_standard_path(path: str) -> bool:
    """
    Whether the path has the standard Sui Ed25519 shape, where every level is hardened.

    :param path: The derivation path
    """
    try:
        indexes = parse_path(path)
    except ValueError:
        return False
    if len(indexes) != 5:
        return False
    if not all(is_hardened(i) for i in indexes):
        return False
    return indexes[0] == H_(SUI_PURPOSE) and indexes[1] == H_(SUI_COIN_TYPE)


class PublicKey(object):
    """
    A public key for a given :class:`~hwslib.common.SignatureScheme`.
    The account address is always computed from the key, never stored.
    """

    def __init__(self, data: bytes, scheme: SignatureScheme = SignatureScheme.ED25519) -> None:
        """
        :param data: The raw public key bytes
        :param scheme: The signature scheme the key belongs to
        :raises ValueError: if the key has the wrong length for the scheme
        """
        data = bytes(data)
        if len(data) != scheme.public_key_size:
            raise ValueError("Invalid {} public key length: expected {} bytes, got {}".format(scheme, scheme.public_key_size, len(data)))
        self.scheme = scheme
        self.data = data

    @classmethod
    def from_base64(cls, s: str, scheme: SignatureScheme = SignatureScheme.ED25519) -> 'PublicKey':
        try:
            data = base64.b64decode(s, validate=True)
        except binascii.Error:
            raise ValueError("Invalid base64 public key")
        return cls(data, scheme)

    def to_bytes(self) -> bytes:
        return self.data

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode()

    def to_address(self) -> Address:
        """
        Derive the account address: the BLAKE2b-256 hash of the scheme flag
        followed by the public key bytes, hex encoded with a ``0x`` prefix.

        :return: The address
        """
        return "0x" + blake2b256(bytes([self.scheme.flag]) + self.data).hex()

    def get_printable_dict(self) -> Dict[str, str]:
        return {
            "scheme": str(self.scheme),
            "public_key": self.to_base64(),
            "address": self.to_address(),
        }

    def __bytes__(self) -> bytes:
        return self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.scheme == other.scheme and self.data == other.data

    def __hash__(self) -> int:
        return hash((self.scheme, self.data))

    def __repr__(self) -> str:
        return "PublicKey({}, {})".format(self.scheme, self.to_base64())
