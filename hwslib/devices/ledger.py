"""
Ledger Devices
**************

Signing with the Sui application on Ledger devices. Keys are Ed25519 keys
derived on the device; the private key never leaves it.

The transport (USB HID, Bluetooth, or the Speculos emulator) is not handled here.
Callers supply a connector which opens the transport and returns a
:class:`~hwslib.connection.DeviceConnection`.
"""

from functools import wraps
from typing import (
    Any,
    Callable,
    NoReturn,
    Optional,
)

from ..common import (
    SIGNATURE_SIZE,
    SignatureScheme,
)
from ..connection import (
    ConnectionCache,
    Connector,
)
from ..errors import (
    ActionCanceledError,
    BadArgumentError,
    DeviceFailureError,
    DeviceLockedError,
    HWSError,
    MalformedResponseError,
    UnsupportedRequestError,
)
from ..key import (
    Address,
    DEFAULT_DERIVATION_PATH,
    PublicKey,
    check_derivation_path,
    is_standard_path,
)
from ..signature import SerializedSignature
from ..signer import Signer

import logging

LOG = logging.getLogger(__name__)

bad_args = [
    0x6700, # SW_WRONG_LENGTH
    0x6A80, # SW_INCORRECT_DATA
    0x6B00, # SW_WRONG_P1_P2
    0x6D00, # SW_INS_NOT_SUPPORTED
]

cancels = [
    0x6982, # SW_SECURITY_STATUS_NOT_SATISFIED
    0x6985, # SW_CONDITIONS_OF_USE_NOT_SATISFIED
]

locked = [
    0x5515, # SW_LOCKED_DEVICE
]

app_not_open = [
    0x6D02, # SW_APP_NOT_OPEN
    0x6E00, # SW_CLA_NOT_SUPPORTED
    0x6E01,
]

def handle_device_exception(e: Exception, func_name: str) -> NoReturn:
    sw = getattr(e, 'sw', None)
    if sw in bad_args:
        raise UnsupportedRequestError('Request not supported by the device: {}'.format(e)) from e
    elif sw in cancels:
        raise ActionCanceledError('{} canceled'.format(func_name)) from e
    elif sw in locked:
        raise DeviceLockedError('Device is locked') from e
    elif sw in app_not_open:
        raise DeviceLockedError('Sui application is not open on the device') from e
    elif sw == 0x6F00: # SW_TECHNICAL_PROBLEM
        raise DeviceFailureError('Device technical problem') from e
    else:
        raise DeviceFailureError('{} failed: {}'.format(func_name, e)) from e

def device_exception(f: Callable[..., Any]) -> Any:
    @wraps(f)
    def func(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except HWSError:
            raise
        except Exception as e:
            handle_device_exception(e, f.__name__)
    return func

def _get_field(result: Any, name: str, size: int) -> bytes:
    try:
        value = result[name]
    except (KeyError, TypeError, IndexError):
        raise MalformedResponseError('Device response is missing {}'.format(name))
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise MalformedResponseError('Device returned a {} of type {}, expected bytes'.format(name, type(value).__name__))
    value = bytes(value)
    if len(value) != size:
        raise MalformedResponseError('Device returned a {} of {} bytes, expected {}'.format(name, len(value), size))
    return value


class KeyDeriver(object):
    """
    Fetches public keys from the device and derives addresses from them.
    """

    def __init__(self, connection_cache: ConnectionCache, scheme: SignatureScheme = SignatureScheme.ED25519) -> None:
        self.connection_cache = connection_cache
        self.scheme = scheme

    @device_exception
    def public_key(self, path: str) -> PublicKey:
        with self.connection_cache.request() as connection:
            LOG.debug("Fetching public key at %s", path)
            result = connection.fetch_public_key(path)
        return PublicKey(_get_field(result, 'public_key', self.scheme.public_key_size), self.scheme)

    def address(self, path: str) -> Address:
        return self.public_key(path).to_address()


class SignatureAssembler(object):
    """
    Has the device sign a payload and assembles the serialized signature.

    Each signature takes two device requests: the signing request itself,
    and a public key request for the key to embed in the serialized signature.
    """

    def __init__(self, connection_cache: ConnectionCache, key_deriver: KeyDeriver) -> None:
        self.connection_cache = connection_cache
        self.key_deriver = key_deriver

    @device_exception
    def sign(self, path: str, payload: bytes) -> SerializedSignature:
        with self.connection_cache.request() as connection:
            LOG.debug("Signing %d byte payload at %s", len(payload), path)
            result = connection.sign(path, payload)
        signature = _get_field(result, 'signature', SIGNATURE_SIZE)
        public_key = self.key_deriver.public_key(path)
        return SerializedSignature.build(self.key_deriver.scheme, signature, public_key)


# This class extends the Signer for the Sui application on Ledger devices
class LedgerSigner(Signer):

    def __init__(self, connector: Connector, derivation_path: str = DEFAULT_DERIVATION_PATH, provider: Optional[Any] = None) -> None:
        """
        The device is not contacted until the first request.

        :param connector: Callable opening a connection to the device
        :param derivation_path: The derivation path of the signing key
        :param provider: The network context the signer is used with
        :raises BadArgumentError: if the derivation path is invalid
        """
        super(LedgerSigner, self).__init__(provider)
        self.connector = connector
        self.derivation_path = check_derivation_path(derivation_path)
        self.signature_scheme = SignatureScheme.ED25519
        if not is_standard_path(self.derivation_path):
            LOG.warning("Derivation path %s is not a standard Sui path", self.derivation_path)

        self.connection_cache = ConnectionCache(connector)
        self.key_deriver = KeyDeriver(self.connection_cache, self.signature_scheme)
        self.signature_assembler = SignatureAssembler(self.connection_cache, self.key_deriver)

    def get_address(self) -> Address:
        return self.key_deriver.address(self.derivation_path)

    def get_public_key(self) -> PublicKey:
        return self.key_deriver.public_key(self.derivation_path)

    def sign_data(self, payload: bytes) -> SerializedSignature:
        """
        Sign a payload with the device. The user may need to confirm on the device,
        which can take arbitrarily long.

        :param payload: The bytes to sign
        :return: The serialized signature
        """
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise BadArgumentError("Payload must be bytes")
        return self.signature_assembler.sign(self.derivation_path, bytes(payload))

    def reconnect(self, provider: Any) -> 'LedgerSigner':
        LOG.debug("Rebinding signer for %s to %s", self.derivation_path, provider)
        return LedgerSigner(self.connector, self.derivation_path, provider)
