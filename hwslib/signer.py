"""
Signer Interface
****************

The :class:`Signer` is the class which all of the specific signer implementations subclass.
Code that builds and submits transactions only relies on the methods defined here,
so hardware backed signers and signers holding keys in software are interchangeable.
"""

from typing import Any

from .key import Address, PublicKey
from .signature import SerializedSignature


class Signer(object):
    """
    Create a signer bound to a provider.

    This abstract class defines the methods
    that signer subclasses should implement.
    """

    def __init__(self, provider: Any) -> None:
        """
        :param provider: The network context the signer is used with.
            Opaque to the signer; typically a :class:`~hwslib.common.Network` or an RPC client.
        """
        self.provider = provider

    def get_address(self) -> Address:
        """
        Get the address of the signing key.

        :return: The address
        """
        raise NotImplementedError("The Signer base class "
                                  "does not implement this method")

    def get_public_key(self) -> PublicKey:
        """
        Get the public key of the signing key.

        :return: The public key
        """
        raise NotImplementedError("The Signer base class "
                                  "does not implement this method")

    def sign_data(self, payload: bytes) -> SerializedSignature:
        """
        Sign an opaque payload.

        :param payload: The bytes to sign
        :return: The serialized signature
        """
        raise NotImplementedError("The Signer base class "
                                  "does not implement this method")

    def reconnect(self, provider: Any) -> 'Signer':
        """
        Get a new signer for the same key, bound to another provider.

        :param provider: The new network context
        :return: The new signer
        """
        raise NotImplementedError("The Signer base class "
                                  "does not implement this method")
