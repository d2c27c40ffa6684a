#! /usr/bin/env python3

"""
Commands
********

The functions in this module are the primary way to use signers from scripts and from the command line tool.
Each function that takes a ``signer`` uses a :class:`~hwslib.signer.Signer`.
The functions then call public members of that signer and return JSON serializable dictionaries.

Hardware signers can be constructed using :func:`~get_signer`.
The connector that opens the transport to the device is loaded with :func:`~get_connector`.
"""

import importlib
import logging

from .common import Network
from .connection import Connector
from .errors import BadArgumentError
from .key import DEFAULT_DERIVATION_PATH
from .devices.ledger import LedgerSigner
from .signature import SerializedSignature
from .signer import Signer

from typing import (
    Any,
    Dict,
    Union,
)

LOG = logging.getLogger(__name__)


def get_connector(spec: str) -> Connector:
    """
    Load a connector given as ``package.module:callable``.

    :param spec: The import path of the connector
    :return: The connector
    :raises BadArgumentError: if the connector cannot be loaded
    """
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise BadArgumentError('Connector must be given as module:callable')
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BadArgumentError('Could not import connector module {}: {}'.format(module_name, e))

    connector: Any = module
    for part in attr.split('.'):
        connector = getattr(connector, part, None)
        if connector is None:
            raise BadArgumentError('Connector {} not found'.format(spec))
    if not callable(connector):
        raise BadArgumentError('Connector {} is not callable'.format(spec))
    LOG.debug("Loaded connector %s", spec)
    return connector

def get_signer(connector: Union[str, Connector], path: str = DEFAULT_DERIVATION_PATH, network: Network = Network.MAINNET) -> Signer:
    """
    Returns a :class:`~hwslib.devices.ledger.LedgerSigner` for the key at the derivation path.
    The device is not contacted until the signer is first used.

    :param connector: The connector, or its import path as accepted by :func:`~get_connector`
    :param path: The derivation path of the signing key
    :param network: The network the signer is bound to
    :return: The signer
    """
    if isinstance(connector, str):
        connector = get_connector(connector)
    return LedgerSigner(connector, path, network)

def getaddress(signer: Signer) -> Dict[str, str]:
    """
    Get the address of the signer.

    :param signer: The signer to use
    :return: A dictionary containing the address.
        Returned as ``{"address": <0x prefixed hex address>}``.
    """
    return {"address": signer.get_address()}

def getpublickey(signer: Signer) -> Dict[str, str]:
    """
    Get the public key of the signer.

    :param signer: The signer to use
    :return: A dictionary containing the public key and its address.
        Returned as ``{"public_key": <base64 public key>, "address": <address>}``.
    """
    public_key = signer.get_public_key()
    return {"public_key": public_key.to_base64(), "address": public_key.to_address()}

def signdata(signer: Signer, payload: bytes) -> Dict[str, str]:
    """
    Sign a payload.

    :param signer: The signer to use
    :param payload: The bytes to sign
    :return: A dictionary containing the serialized signature.
        Returned as ``{"signature": <base64 serialized signature>}``.
    """
    return {"signature": signer.sign_data(payload).to_base64()}

def verifysignature(message: bytes, signature: str) -> Dict[str, Any]:
    """
    Verify a serialized signature. No device is needed.

    :param message: The bytes that were signed
    :param signature: The base64 serialized signature
    :return: A dictionary with the verification result and the address of the signing key.
        Returned as ``{"valid": <bool>, "address": <address>}``.
    :raises BadArgumentError: if the signature cannot be parsed
    """
    try:
        sig = SerializedSignature.from_base64(signature)
    except ValueError as e:
        raise BadArgumentError(str(e))
    return {"valid": sig.verify(message), "address": sig.public_key.to_address()}
