"""
Serialized Signatures
*********************

A :class:`SerializedSignature` is what verifiers consume: the scheme flag,
the raw signature and the public key that produced it, concatenated::

    [scheme flag: 1 byte][signature: 64 bytes][public key: 32 bytes]

Text encodings for transport are provided as base64 helpers only.
"""

import base64
import binascii

from ecdsa import BadSignatureError, VerifyingKey
from ecdsa.curves import Ed25519
from ecdsa.errors import MalformedPointError

from .common import (
    SIGNATURE_SIZE,
    SignatureScheme,
)
from .key import PublicKey


class SerializedSignature(bytes):
    """
    The canonical serialized signature. Behaves as the ``bytes`` it is
    made of, with accessors for each field.
    """

    def __new__(cls, data: bytes) -> 'SerializedSignature':
        """
        :param data: The serialized signature bytes
        :raises ValueError: if the layout is not valid for the scheme flag
        """
        data = bytes(data)
        if len(data) == 0:
            raise ValueError("Empty serialized signature")
        scheme = SignatureScheme.from_flag(data[0])
        expected = 1 + SIGNATURE_SIZE + scheme.public_key_size
        if len(data) != expected:
            raise ValueError("Invalid serialized signature length: expected {} bytes, got {}".format(expected, len(data)))
        return super().__new__(cls, data)

    @classmethod
    def build(cls, scheme: SignatureScheme, signature: bytes, public_key: PublicKey) -> 'SerializedSignature':
        """
        Assemble a serialized signature from its parts.

        :param scheme: The signature scheme
        :param signature: The raw signature
        :param public_key: The public key of the signer
        :return: The serialized signature
        :raises ValueError: if a part has the wrong length or the key does not match the scheme
        """
        if len(signature) != SIGNATURE_SIZE:
            raise ValueError("Invalid signature length: expected {} bytes, got {}".format(SIGNATURE_SIZE, len(signature)))
        if public_key.scheme != scheme:
            raise ValueError("Public key scheme {} does not match {}".format(public_key.scheme, scheme))
        return cls(bytes([scheme.flag]) + bytes(signature) + public_key.to_bytes())

    @classmethod
    def from_base64(cls, s: str) -> 'SerializedSignature':
        try:
            data = base64.b64decode(s, validate=True)
        except binascii.Error:
            raise ValueError("Invalid base64 signature")
        return cls(data)

    @property
    def scheme(self) -> SignatureScheme:
        return SignatureScheme.from_flag(self[0])

    @property
    def signature(self) -> bytes:
        return bytes(self[1:1 + SIGNATURE_SIZE])

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(self[1 + SIGNATURE_SIZE:], self.scheme)

    def to_base64(self) -> str:
        return base64.b64encode(self).decode()

    def verify(self, message: bytes) -> bool:
        """
        Check the signature over ``message`` against the embedded public key.

        :param message: The exact bytes that were signed
        :return: Whether the signature is valid
        """
        try:
            vk = VerifyingKey.from_string(self.public_key.to_bytes(), curve=Ed25519)
            return vk.verify(self.signature, bytes(message))
        except (BadSignatureError, MalformedPointError, ValueError):
            return False

    def __repr__(self) -> str:
        return "SerializedSignature({})".format(self.to_base64())
