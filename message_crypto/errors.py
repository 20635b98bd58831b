"""
Error taxonomy
==============
Every failure inside message_crypto surfaces as one of these classes.
Low-level `cryptography` exceptions are translated at the component
boundary, so callers never have to catch library-specific errors.

In security-sensitive code treat FormatError and AuthenticityError the
same way: reject the message without telling the sender which check failed.
"""


class MessageCryptoError(Exception):
    """Base class for all message_crypto errors."""
    pass


class EntropyError(MessageCryptoError):
    """The secure random source could not deliver bytes. Not retriable."""
    pass


class KeyGenerationError(MessageCryptoError):
    """Key pair generation or serialization failed."""
    pass


class KeyWrappingError(MessageCryptoError):
    """Common parent of the RSA key-wrapping failures."""
    pass


class KeyWrapError(KeyWrappingError):
    """Public key unusable, or the session key does not fit under OAEP."""
    pass


class KeyUnwrapError(KeyWrappingError):
    """Private key unusable, wrapped key truncated, or OAEP decoding failed."""
    pass


class FormatError(MessageCryptoError):
    """Data is not a recognized envelope (missing marker or truncated)."""
    pass


class DecryptionError(MessageCryptoError):
    """Symmetric decryption failed (misaligned ciphertext or bad padding)."""
    pass


class AuthenticityError(MessageCryptoError):
    """Wrong key or corrupted data."""
    pass


class SigningError(MessageCryptoError):
    """Signature could not be produced."""
    pass


class VerificationError(MessageCryptoError):
    """
    The verifier itself failed (unparseable key, digest failure).
    A signature that simply does not match is NOT an error: verify()
    returns False for that.
    """
    pass
