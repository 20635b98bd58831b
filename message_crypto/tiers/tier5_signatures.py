"""
Tier 5 - SIGNATURES: RSA PKCS#1 v1.5 + SHA-256
================================================
Detached signatures over raw message bytes.

Signatures are RSASSA-PKCS1-v1_5 over a SHA-256 digest, the scheme
OpenSSL's EVP_DigestSign uses for RSA by default, so signatures made here
verify with OpenSSL-based peers and vice versa. They are
exactly one modulus long (256 bytes for RSA-2048) and travel separately
from the message.

verify() keeps two outcomes apart:
  False              - the verifier worked and the signature is not authentic
  VerificationError  - the verifier itself could not run (bad key, ...)

Dependencies: cryptography >= 41.0
"""

import logging
from typing import Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from ..errors import SigningError, VerificationError
from .tier1_keys import (PublicKeyLike, PrivateKeyLike, modulus_size,
                         public_key_handle, private_key_handle)

logger = logging.getLogger(__name__)


def _message_bytes(message: Union[bytes, str]) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError(f"Message must be str or bytes, got {type(message).__name__}.")


class DigitalSigner:
    """RSA PKCS#1 v1.5 signatures with SHA-256 hashing."""

    def __init__(self, hash_algorithm: hashes.HashAlgorithm = None):
        self._hash = hash_algorithm or hashes.SHA256()

    def sign(self, private_key: PrivateKeyLike, message: Union[bytes, str]) -> bytes:
        with private_key_handle(private_key, error=SigningError) as priv:
            try:
                signature = priv.sign(_message_bytes(message),
                                      padding.PKCS1v15(), self._hash)
            except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
                raise SigningError("Could not sign message.") from exc
            expected = modulus_size(priv)
        if len(signature) != expected:
            raise SigningError(
                f"Signature is {len(signature)}B, expected {expected}B."
            )
        logger.debug(f"Signed {len(message)}B message -> {len(signature)}B signature")
        return signature

    def verify(self, public_key: PublicKeyLike, message: Union[bytes, str],
               signature: bytes) -> bool:
        """
        True if signature is authentic for message under public_key.
        Wrong-length or non-matching signatures give False, not an error.
        """
        if not isinstance(signature, (bytes, bytearray, memoryview)):
            raise VerificationError("Signature must be bytes.")
        with public_key_handle(public_key, error=VerificationError) as pub:
            if len(signature) != modulus_size(pub):
                return False
            try:
                pub.verify(bytes(signature), _message_bytes(message),
                           padding.PKCS1v15(), self._hash)
                return True
            except InvalidSignature:
                return False
            except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
                raise VerificationError("Signature verification failed to run.") from exc


_default_signer = DigitalSigner()


def sign_message(private_key: PrivateKeyLike, message: Union[bytes, str]) -> bytes:
    """Detached SHA-256 signature of message."""
    return _default_signer.sign(private_key, message)


def verify_signature(public_key: PublicKeyLike, message: Union[bytes, str],
                     signature: bytes) -> bool:
    """Check a detached signature; see DigitalSigner.verify."""
    return _default_signer.verify(public_key, message, signature)
