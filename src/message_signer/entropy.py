import threading
from typing import Protocol

import nacl.utils
from jwt.utils import base64url_encode

from .constants import JTI_ENTROPY_BITS
from .errors import SigningError


class RandomSource(Protocol):
    def random_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """libsodium randombytes. Safe to share between threads."""

    def random_bytes(self, n: int) -> bytes:
        return nacl.utils.random(n)


class LockedRandomSource:
    """
    Serializes draws from a source that may not be thread-safe.
    The lock is held for the draw only.
    """

    def __init__(self, inner: RandomSource):
        self._inner = inner
        self._lock = threading.Lock()

    def random_bytes(self, n: int) -> bytes:
        with self._lock:
            return self._inner.random_bytes(n)


def new_jti(source: RandomSource, bits: int = JTI_ENTROPY_BITS) -> str:
    """Fresh base64url envelope identifier carrying `bits` of entropy."""
    size = bits // 8
    raw = source.random_bytes(size)
    if len(raw) != size:
        raise SigningError(f'random source returned {len(raw)} bytes, expected {size}')
    return base64url_encode(raw).decode('ascii')
