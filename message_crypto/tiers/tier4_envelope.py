"""
Tier 4 - ENVELOPE: RSA-OAEP + AES-256-CBC message codec
=========================================================
Hybrid encryption of arbitrary-length messages.

The payload is encrypted with a one-time AES-256 key; that key is wrapped
with the recipient's RSA public key. Only the matching private key can
unwrap it and read the message.

Envelope format:
    [MARKER "MESSAGE:" (8)][wrapped key (K)][IV (16)][AES-CBC ciphertext]

K is the modulus size of the recipient key, so it is derived from the key
rather than stored. Before encryption the payload is prefixed with the
tag "MSG"; since CBC has no integrity check, finding that tag after
decryption is how a wrong key or corrupted blob is detected.
The tag only covers its own bytes: CBC lets anyone flip chosen payload
bits through the IV or the previous ciphertext block without touching it.
Sign the payload when integrity matters.

open() parses strictly left to right with an EnvelopeReader, and stops at
the first stage that fails.

Dependencies: cryptography >= 41.0
"""

import logging
from typing import Union

from ..constants import (ENCR_MARKER, ENCR_MARKER_SIZE, MSG_RECOGNIZE_TAG,
                         AES_IV_SIZE)
from ..entropy import session_key, wipe
from ..errors import (AuthenticityError, DecryptionError, FormatError,
                      KeyUnwrapError)
from .tier1_keys import (PublicKeyLike, PrivateKeyLike, modulus_size,
                         private_key_handle)
from .tier2_aes_cbc import AESCBCCipher
from .tier3_rsa_wrap import RSAKeyWrapper

logger = logging.getLogger(__name__)


def _payload_bytes(payload: Union[bytes, str]) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise TypeError(f"Payload must be str or bytes, got {type(payload).__name__}.")


class EnvelopeReader:
    """Forward-only cursor over an immutable byte buffer."""

    def __init__(self, data: bytes):
        self._data   = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def expect(self, literal: bytes) -> None:
        """Consume `literal` or raise FormatError without advancing."""
        end = self._offset + len(literal)
        if self._data[self._offset:end] != literal:
            raise FormatError("Not a recognized envelope.")
        self._offset = end

    def read(self, n: int) -> bytes:
        """Consume exactly n bytes or raise FormatError without advancing."""
        if n < 0 or n > self.remaining:
            raise FormatError(f"Envelope truncated: wanted {n}B, have {self.remaining}B.")
        chunk = self._data[self._offset:self._offset + n]
        self._offset += n
        return chunk

    def read_upto(self, n: int) -> bytes:
        """Consume at most n bytes; may return fewer at end of buffer."""
        return self.read(min(n, self.remaining))

    def read_rest(self) -> bytes:
        return self.read(self.remaining)


class MessageCodec:
    """Builds and parses envelopes for one recipient key per call."""

    MARKER        = ENCR_MARKER
    RECOGNIZE_TAG = MSG_RECOGNIZE_TAG

    def __init__(self, cipher: AESCBCCipher = None,
                 key_wrapper: RSAKeyWrapper = None,
                 marker: bytes = None, recognize_tag: bytes = None):
        self._cipher  = cipher or AESCBCCipher()
        self._wrapper = key_wrapper or RSAKeyWrapper()
        self.marker        = self.MARKER if marker is None else bytes(marker)
        self.recognize_tag = (self.RECOGNIZE_TAG if recognize_tag is None
                              else bytes(recognize_tag))
        if len(self.marker) != ENCR_MARKER_SIZE:
            raise ValueError(f"Envelope marker must be {ENCR_MARKER_SIZE} bytes.")
        if not self.recognize_tag:
            raise ValueError("Recognize tag must not be empty.")

    def is_envelope(self, data: bytes) -> bool:
        """Cheap check: does data start with this codec's marker?"""
        return bytes(data[:ENCR_MARKER_SIZE]) == self.marker

    def envelope_size(self, payload_length: int, modulus_bytes: int = 256) -> int:
        """Sealed size of a payload of the given length."""
        tagged = len(self.recognize_tag) + payload_length
        return (len(self.marker) + modulus_bytes + AES_IV_SIZE
                + AESCBCCipher.padded_size(tagged))

    def seal(self, plaintext: Union[bytes, str], public_key: PublicKeyLike) -> bytes:
        """
        Encrypt plaintext so only the holder of public_key's private half
        can read it. Returns a self-contained envelope.
        """
        plaintext = _payload_bytes(plaintext)

        # 1. Fresh AES-256 key + IV, wiped when the block exits
        with session_key() as (key, iv):
            # 2. Tag the payload, 3. encrypt it
            ciphertext = self._cipher.encrypt(
                key, iv, self.recognize_tag + plaintext
            )
            # 4. Wrap the session key for the recipient
            wrapped = self._wrapper.wrap(key, public_key)

        # 5. MARKER || WRAPPED_KEY || IV || CIPHERTEXT
        envelope = self.marker + wrapped + iv + ciphertext
        logger.debug(f"Sealed {len(plaintext)}B payload -> {len(envelope)}B envelope")
        return envelope

    def open(self, envelope: bytes, private_key: PrivateKeyLike) -> bytes:
        """
        Recover the payload of an envelope produced by seal().

        Raises FormatError (no marker, truncated IV), KeyUnwrapError
        (wrong key, damaged wrapped key) or AuthenticityError (anything
        wrong with the ciphertext or its content).
        """
        reader = EnvelopeReader(envelope)

        # 1. Marker
        reader.expect(self.marker)

        # 2. Wrapped key, sized by the private key's modulus
        with private_key_handle(private_key, error=KeyUnwrapError) as priv:
            wrapped = reader.read_upto(modulus_size(priv))
            key = bytearray(self._wrapper.unwrap(wrapped, priv))

        try:
            # 3. IV
            iv = reader.read(AES_IV_SIZE)

            # 4. Ciphertext
            try:
                tagged = self._cipher.decrypt(key, iv, reader.read_rest())
            except DecryptionError:
                logger.debug("Rejected envelope: symmetric decryption failed")
                raise AuthenticityError("Wrong key or corrupted data.") from None
        finally:
            wipe(key)

        # 5. Recognizability tag
        if not tagged.startswith(self.recognize_tag):
            logger.debug("Rejected envelope: recognize tag mismatch")
            raise AuthenticityError("Wrong key or corrupted data.")
        return tagged[len(self.recognize_tag):]


_default_codec = MessageCodec()


def encrypt_message(plaintext: Union[bytes, str], public_key: PublicKeyLike) -> bytes:
    """Seal plaintext for public_key with the default codec."""
    return _default_codec.seal(plaintext, public_key)


def decrypt_message(envelope: bytes, private_key: PrivateKeyLike) -> bytes:
    """Open an envelope with private_key using the default codec."""
    return _default_codec.open(envelope, private_key)


def is_encrypted_message(data: bytes) -> bool:
    """True if data carries the envelope marker."""
    return _default_codec.is_envelope(data)


def envelope_size(payload_length: int, modulus_bytes: int = 256) -> int:
    """Predicted sealed size for the default codec."""
    return _default_codec.envelope_size(payload_length, modulus_bytes)
