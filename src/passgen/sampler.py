"""
sampler.py


Purpose/Aim:
1) Pulls raw entropy from the operating system CSPRNG (`secrets.token_bytes`).
2) Turns it into a stream of single-use bits (via a small cache).
3) Provides unbiased integers in [0, n) using rejection sampling.

Why this shape?

- The OS CSPRNG is the only entropy source; there is no seed and no way to
  replay a stream.
- A small "bit pool" avoids a system call for every draw.
- Rejection sampling ensures no modulo bias when mapping bits to [0, n).

Quick start

>>> from passgen.sampler import sample_index, random_bits
>>> random_bits(64)          # 64 fresh bits (list of 0/1)
>>> sample_index(10)         # unbiased integer 0..9

If you're generating a lot of indices:
>>> from passgen.sampler import BitPool
>>> pool = BitPool(refill_bytes=4096)
>>> pool.uniform_ints(10, size=1000)
# 1,000 numbers in [0,10)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import logging
import os
import secrets
import threading

import numpy as np

from .errors import InvalidRange

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]


#Bit cache & unbiased integers
@dataclass
class BitPool:
    """
    A small, refillable cache of random bits backed by the OS CSPRNG.

    Typical usage

    >>> pool = BitPool()
    >>> pool.get_bits(128)          # 128 fresh bits
    >>> pool.uniform_int(1000)      # unbiased integer in [0, 1000)
    >>> pool.uniform_ints(10, 5)    # 5 unbiased integers in [0, 10)

    Parameters

    refill_bytes : int, default=256
        How many bytes to request each time the buffer needs topping up.
    entropy : callable, optional
        ``entropy(n) -> bytes`` returning n random bytes. Defaults to
        `secrets.token_bytes`. Only tests should pass anything else.

    Every bit is handed out once. A pool that finds itself in a forked
    child discards whatever it inherited from the parent.
    """

    refill_bytes: int = 256
    entropy: Optional[EntropySource] = None

    def __post_init__(self) -> None:
        if self.refill_bytes <= 0:
            raise ValueError("refill_bytes must be positive")
        if self.entropy is None:
            self.entropy = secrets.token_bytes
        self._buf = np.zeros(0, dtype=np.uint8)  # bits as 0/1 bytes
        self._pos = 0
        self._pid = os.getpid()

    #internal
    @property
    def available(self) -> int:
        """Number of unread bits left in the buffer."""
        return int(self._buf.size - self._pos)

    def _refill(self, min_bits: int) -> None:
        """
        Pull fresh bytes from the entropy source and append their bits to
        whatever is still unread. Called automatically when the buffer runs low.
        """
        n_bytes = max(self.refill_bytes, -(-min_bits // 8))
        raw = self.entropy(n_bytes)
        if len(raw) != n_bytes:
            raise RuntimeError(
                f"entropy source returned {len(raw)} bytes, expected {n_bytes}"
            )
        fresh = np.unpackbits(np.frombuffer(raw, dtype=np.uint8))
        self._buf = np.concatenate([self._buf[self._pos:], fresh])
        self._pos = 0
        logger.debug("bit pool refilled with %d bytes", n_bytes)

    def _check_owner(self) -> None:
        pid = os.getpid()
        if pid != self._pid:
            logger.debug("bit pool inherited across fork; discarding buffer")
            self._buf = np.zeros(0, dtype=np.uint8)
            self._pos = 0
            self._pid = pid

    #public API
    def get_bits(self, n_bits: int) -> List[int]:
        """
        Return `n_bits` random bits (as ints 0/1). Refills on demand.
        """
        if n_bits <= 0:
            raise ValueError("n_bits must be positive")
        self._check_owner()
        if self.available < n_bits:
            self._refill(n_bits - self.available)
        out = self._buf[self._pos:self._pos + n_bits]
        self._pos += n_bits
        return out.tolist()

    def get_uint(self, k_bits: int) -> int:
        """
        Interpret `k_bits` fresh bits as a big-endian, non-negative integer.
        """
        if k_bits <= 0:
            raise ValueError("k_bits must be positive")
        val = 0
        for b in self.get_bits(k_bits):
            val = (val << 1) | b
        return val

    def uniform_int(self, n: int) -> int:
        """
        Unbiased integer in [0, n) via rejection sampling.

        How it works (short version)
        - Choose k = bit length of n-1, so values live in [0, 2^k).
        - Accept only when the k-bit value falls below the largest multiple of n.
        - On accept, return value % n; otherwise, try again.

        Each attempt is accepted with probability above 1/2, so the loop
        has no retry cap.
        """
        if n < 1:
            raise InvalidRange(n)
        if n == 1:
            return 0

        k = (n - 1).bit_length()
        M = 1 << k
        limit = (M // n) * n  # largest multiple of n not above 2^k

        while True:
            x = self.get_uint(k)
            if x < limit:
                return x % n

    def uniform_ints(self, n: int, size: int) -> List[int]:
        """
        Convenience: `size` many unbiased integers in [0, n).
        """
        if size < 0:
            raise ValueError("size must be non-negative")
        if n < 1:
            raise InvalidRange(n)
        return [self.uniform_int(n) for _ in range(size)]


#Module-level convenience singleton
_default_pool: Optional[BitPool] = None
_default_pool_lock = threading.Lock()


def default_pool() -> BitPool:
    """
    Lazily create (and reuse) the process-wide BitPool.
    """
    global _default_pool
    if _default_pool is None:
        with _default_pool_lock:
            if _default_pool is None:
                _default_pool = BitPool()
    return _default_pool


def random_bits(n_bits: int) -> List[int]:
    """Fetch `n_bits` from the default pool."""
    return default_pool().get_bits(n_bits)


def sample_index(n: int) -> int:
    """Unbiased integer in [0, n) from the default pool."""
    return default_pool().uniform_int(n)


def sample_indices(n: int, size: int) -> List[int]:
    """Unbiased integers in [0, n) from the default pool."""
    return default_pool().uniform_ints(n, size)


__all__ = [
    "BitPool",
    "default_pool",
    "random_bits",
    "sample_index",
    "sample_indices",
]


#Tiny smoke test when run directly
if __name__ == "__main__":
    xs = BitPool().uniform_ints(10, size=5000)
    hist = np.bincount(xs, minlength=10)
    print("mod-10 histogram:", hist.tolist())
