"""
Tier 2 - SYMMETRIC: AES-256-CBC
================================
AES-256 in Cipher Block Chaining mode with PKCS#7 padding.

CBC gives confidentiality only. There is no authentication tag, so a
successful decrypt says nothing about whether the key was right. The
envelope tier handles that with its recognizability tag.

Key size: 256 bits (32 bytes), fresh per message.
IV:       128 bits (16 bytes), fresh per message, not secret.
Output:   len(plaintext) rounded up to the next 16-byte block
          (an aligned input gains one full padding block).

Dependencies: cryptography >= 41.0
"""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import AES_KEY_SIZE, AES_IV_SIZE, AES_BLOCK_SIZE
from ..errors import DecryptionError


class AESCBCCipher:
    """AES-256-CBC encryption / decryption with PKCS#7 padding."""

    KEY_SIZE   = AES_KEY_SIZE
    IV_SIZE    = AES_IV_SIZE
    BLOCK_SIZE = AES_BLOCK_SIZE

    def _cipher(self, key: bytes, iv: bytes) -> Cipher:
        if len(key) != self.KEY_SIZE:
            raise ValueError(f"AES-256 key must be {self.KEY_SIZE} bytes.")
        if len(iv) != self.IV_SIZE:
            raise ValueError(f"CBC IV must be {self.IV_SIZE} bytes.")
        return Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv)))

    @staticmethod
    def padded_size(length: int) -> int:
        """Ciphertext length for a plaintext of `length` bytes."""
        return length + AES_BLOCK_SIZE - (length % AES_BLOCK_SIZE)

    def encrypt(self, key: bytes, iv: bytes, plaintext: bytes) -> bytes:
        """Pad and encrypt. Returns ciphertext only (IV is the caller's)."""
        padder    = padding.PKCS7(self.BLOCK_SIZE * 8).padder()
        padded    = padder.update(plaintext) + padder.finalize()
        encryptor = self._cipher(key, iv).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        """
        Decrypt and strip padding.
        Raises DecryptionError on misaligned input or bad padding.
        """
        if not ciphertext or len(ciphertext) % self.BLOCK_SIZE != 0:
            raise DecryptionError(
                f"Ciphertext must be a positive multiple of {self.BLOCK_SIZE} bytes."
            )
        decryptor = self._cipher(key, iv).decryptor()
        try:
            padded   = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = padding.PKCS7(self.BLOCK_SIZE * 8).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise DecryptionError("Failed to decrypt message.") from exc
