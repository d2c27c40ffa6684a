"""
Device Connections
******************

A :data:`Connector` is supplied by the caller and knows how to reach the physical device.
It returns a :class:`DeviceConnection`, which is held by a :class:`ConnectionCache`
owned by exactly one signer.

The cache creates the connection lazily, keeps it for the lifetime of the signer,
and serializes all requests to it since devices process one request at a time.
"""

import logging
import threading

from contextlib import contextmanager
from typing import (
    Callable,
    Iterator,
    Optional,
)
from typing_extensions import TypedDict

from .errors import (
    DeviceConnectionError,
    HWSError,
)

LOG = logging.getLogger(__name__)


class PublicKeyResult(TypedDict):
    public_key: bytes


class SignatureResult(TypedDict):
    signature: bytes


class DeviceConnection(object):
    """
    An open connection to a hardware signing device.

    This abstract class defines the requests that connection
    implementations for a specific transport must provide.
    Implementations should raise :class:`~hwslib.errors.DeviceError` subclasses,
    or exceptions carrying a status word ``sw`` attribute, when the device refuses a request.
    """

    def fetch_public_key(self, path: str) -> PublicKeyResult:
        """
        Get the public key at the derivation path.

        :param path: The derivation path
        :return: ``{"public_key": <raw public key bytes>}``
        """
        raise NotImplementedError("The DeviceConnection base class "
                                  "does not implement this method")

    def sign(self, path: str, payload: bytes) -> SignatureResult:
        """
        Sign a payload with the key at the derivation path.
        Devices usually ask the user to confirm before signing.

        :param path: The derivation path
        :param payload: The bytes to sign
        :return: ``{"signature": <raw signature bytes>}``
        """
        raise NotImplementedError("The DeviceConnection base class "
                                  "does not implement this method")


Connector = Callable[[], DeviceConnection]


class ConnectionCache(object):
    """
    Holds at most one :class:`DeviceConnection`, created on first use.
    """

    def __init__(self, connector: Connector) -> None:
        self.connector = connector
        self._connection: Optional[DeviceConnection] = None
        self._connect_lock = threading.Lock()
        self._request_lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def acquire(self) -> DeviceConnection:
        """
        Return the cached connection, invoking the connector if there is none yet.
        Concurrent callers wait for a single connector invocation.

        :return: The device connection
        :raises DeviceConnectionError: if the connector fails. The cache stays empty.
            :class:`~hwslib.errors.HWSError` and :class:`ConnectionError` raised by the
            connector propagate unchanged; other exceptions are wrapped.
        """
        with self._connect_lock:
            if self._connection is not None:
                return self._connection

            LOG.debug("Connecting to device")
            try:
                connection = self.connector()
            except (HWSError, ConnectionError):
                raise
            except Exception as e:
                raise DeviceConnectionError("Could not connect to device: {}".format(e)) from e
            if connection is None:
                raise DeviceConnectionError("Connector did not return a device connection")

            self._connection = connection
            LOG.debug("Connected to device")
            return connection

    @contextmanager
    def request(self) -> Iterator[DeviceConnection]:
        """
        Context manager giving exclusive use of the connection for one device request.
        """
        connection = self.acquire()
        with self._request_lock:
            yield connection
