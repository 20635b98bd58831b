"""
Secure randomness and one-time session key material.

All random bytes come from os.urandom (the OS CSPRNG). If it fails we
raise EntropyError; there is deliberately no weaker fallback.
"""

import os
import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

from .constants import AES_KEY_SIZE, AES_IV_SIZE
from .errors import EntropyError

logger = logging.getLogger(__name__)


def random_bytes(n: int) -> bytes:
    """Return n bytes from the OS CSPRNG or raise EntropyError."""
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        logger.error(f"OS random source unavailable: {exc}")
        raise EntropyError("Could not obtain secure random bytes.") from exc
    if len(data) != n:
        raise EntropyError("Random source returned a short read.")
    return data


def wipe(buf: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place."""
    for i in range(len(buf)):
        buf[i] = 0


@contextmanager
def session_key() -> Iterator[Tuple[bytearray, bytes]]:
    """
    Yield a fresh (key, iv) pair for exactly one encryption.

    The key lives in a bytearray that is zeroed when the block exits,
    whether it exits normally or through an exception.
    Wiping is best-effort: the cipher and wrapping tiers hand
    `cryptography` immutable bytes copies, which Python cannot clear.
    """
    key = bytearray(random_bytes(AES_KEY_SIZE))
    try:
        iv = random_bytes(AES_IV_SIZE)
        yield key, iv
    finally:
        wipe(key)
