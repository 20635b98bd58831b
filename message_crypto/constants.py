"""
Protocol constants shared by every tier.

Envelope layout on the wire:

    MARKER(8) || WRAPPED_KEY(K) || IV(16) || CIPHERTEXT(n*16)

K is the recipient's RSA modulus size in bytes (256 for RSA-2048).
"""

# Envelope marker, ASCII, fixed length
ENCR_MARKER      = b"MESSAGE:"
ENCR_MARKER_SIZE = 8

# Prefixed to every payload before encryption, checked after decryption
MSG_RECOGNIZE_TAG = b"MSG"

# AES-256-CBC session material
AES_KEY_SIZE   = 32
AES_IV_SIZE    = 16
AES_BLOCK_SIZE = 16

# RSA key generation defaults
RSA_KEY_SIZE        = 2048
RSA_PUBLIC_EXPONENT = 65537
