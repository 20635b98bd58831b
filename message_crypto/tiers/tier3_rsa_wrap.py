"""
Tier 3 - KEY WRAPPING: RSA + OAEP
==================================
Encrypts the 32-byte AES session key under the recipient's RSA public key.

OAEP uses MGF1 with SHA-1 by default. That is what OpenSSL's
RSA_PKCS1_OAEP_PADDING produces, so envelopes interoperate with
OpenSSL-based peers speaking this format.
Pass hash_algorithm=hashes.SHA256() for a non-interoperable variant.

The wrapped key is exactly one modulus long (256 bytes for RSA-2048), so
the envelope needs no length field for it.

Dependencies: cryptography >= 41.0
"""

import logging
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..constants import AES_KEY_SIZE
from ..errors import KeyWrapError, KeyUnwrapError
from .tier1_keys import (PublicKeyLike, PrivateKeyLike, modulus_size,
                         public_key_handle, private_key_handle)

logger = logging.getLogger(__name__)


class RSAKeyWrapper:
    """RSA-OAEP wrapping of fixed-length symmetric keys."""

    SYMMETRIC_KEY_SIZE = AES_KEY_SIZE

    def __init__(self, hash_algorithm: hashes.HashAlgorithm = None):
        self._hash = hash_algorithm or hashes.SHA1()

    def _oaep(self):
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=self._hash),
            algorithm=self._hash,
            label=None
        )

    def wrap(self, symmetric_key: bytes, public_key: PublicKeyLike) -> bytes:
        """Encrypt a session key with the recipient's public key."""
        with public_key_handle(public_key, error=KeyWrapError) as pub:
            try:
                wrapped = pub.encrypt(bytes(symmetric_key), self._oaep())
            except ValueError as exc:
                raise KeyWrapError("Failed to encrypt with RSA key.") from exc
            if len(wrapped) != modulus_size(pub):
                raise KeyWrapError("Wrapped key has unexpected length.")
        logger.debug(f"Wrapped {len(symmetric_key)}B key -> {len(wrapped)}B")
        return wrapped

    def unwrap(self, wrapped_key: bytes, private_key: PrivateKeyLike) -> bytes:
        """
        Recover a session key with the recipient's private key.
        Only the first modulus-size bytes of wrapped_key are read.
        """
        with private_key_handle(private_key, error=KeyUnwrapError) as priv:
            size = modulus_size(priv)
            if len(wrapped_key) < size:
                raise KeyUnwrapError(
                    f"Wrapped key is {len(wrapped_key)}B, expected {size}B."
                )
            try:
                key = priv.decrypt(bytes(wrapped_key[:size]), self._oaep())
            except ValueError as exc:
                raise KeyUnwrapError("Failed to decrypt message key.") from exc
        if len(key) != self.SYMMETRIC_KEY_SIZE:
            raise KeyUnwrapError("Recovered key has unexpected length.")
        return key
