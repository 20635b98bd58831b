"""
message_crypto
==============
Hybrid public-key message encryption and detached signatures.
RSA-2048 for key transport and signing, AES-256-CBC for the payload.

Tiers:
    1  KEYS        - RSA-2048 key pairs (PEM), key matching
    2  SYMMETRIC   - AES-256-CBC with PKCS#7 padding
    3  WRAPPING    - RSA-OAEP wrapping of the one-time AES key
    4  ENVELOPE    - MARKER || wrapped key || IV || ciphertext
    5  SIGNATURES  - RSA PKCS#1 v1.5 over SHA-256

Quick start:
    pub, priv = generate_keypair()
    blob = encrypt_message(b"hello", pub)
    assert decrypt_message(blob, priv) == b"hello"

    sig = sign_message(priv, b"hello")
    assert verify_signature(pub, b"hello", sig)

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (
    MessageCryptoError,
    EntropyError,
    KeyGenerationError,
    KeyWrappingError,
    KeyWrapError,
    KeyUnwrapError,
    FormatError,
    DecryptionError,
    AuthenticityError,
    SigningError,
    VerificationError,
)
from .tiers.tier1_keys       import KeyPair, KeyPairGenerator, match_keys
from .tiers.tier2_aes_cbc    import AESCBCCipher
from .tiers.tier3_rsa_wrap   import RSAKeyWrapper
from .tiers.tier4_envelope   import (EnvelopeReader, MessageCodec,
                                     encrypt_message, decrypt_message,
                                     is_encrypted_message, envelope_size)
from .tiers.tier5_signatures import DigitalSigner, sign_message, verify_signature


def generate_keypair() -> KeyPair:
    """Fresh RSA-2048 key pair as (public_pem, private_pem)."""
    return KeyPairGenerator().generate()


__all__ = [
    "KeyPair",
    "KeyPairGenerator",
    "generate_keypair",
    "match_keys",
    "AESCBCCipher",
    "RSAKeyWrapper",
    "EnvelopeReader",
    "MessageCodec",
    "encrypt_message",
    "decrypt_message",
    "is_encrypted_message",
    "envelope_size",
    "DigitalSigner",
    "sign_message",
    "verify_signature",
    "MessageCryptoError",
    "EntropyError",
    "KeyGenerationError",
    "KeyWrappingError",
    "KeyWrapError",
    "KeyUnwrapError",
    "FormatError",
    "DecryptionError",
    "AuthenticityError",
    "SigningError",
    "VerificationError",
]
