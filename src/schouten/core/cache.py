"""Read-through cache for sieved prime sequences.

Keys are sieve bounds, values are read-only prime arrays. Entries are
only stored once fully built, so a reader never sees a partial sequence.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable

import numpy as np


def freeze(primes: np.ndarray) -> np.ndarray:
    """Mark an array read-only and return it."""
    primes.flags.writeable = False
    return primes


class SieveCache:
    """Bounded LRU cache of prime sequences keyed by sieve bound.

    Attributes:
        maxsize: Maximum number of bounds kept. 0 disables caching,
            None keeps everything.
        hits: Number of lookups served from the cache.
        misses: Number of lookups that had to compute.
    """

    def __init__(self, maxsize: int | None = 128):
        """Initialize the cache.

        Args:
            maxsize: Entry limit (0 = disabled, None = unbounded).

        Raises:
            ValueError: If maxsize is negative.
        """
        if maxsize is not None and maxsize < 0:
            raise ValueError(f"maxsize must be >= 0, got {maxsize}")

        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[int, np.ndarray] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.maxsize != 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, bound: int) -> bool:
        return bound in self._entries

    def get(self, bound: int) -> np.ndarray | None:
        """Return the sequence stored for exactly this bound, if any."""
        with self._lock:
            primes = self._entries.get(bound)
            if primes is not None:
                self._entries.move_to_end(bound)
            return primes

    def get_covering(self, bound: int) -> np.ndarray | None:
        """Return primes <= bound from the smallest entry that covers it.

        The returned array is a read-only view into the cached entry.
        """
        with self._lock:
            covering = [b for b in self._entries if b >= bound]
            if not covering:
                return None

            best = min(covering)
            self._entries.move_to_end(best)
            primes = self._entries[best]

        if best == bound:
            return primes
        return primes[:np.searchsorted(primes, bound, side="right")]

    def put(self, bound: int, primes: np.ndarray) -> np.ndarray:
        """Freeze and store a fully built sequence, evicting LRU entries."""
        primes = freeze(primes)
        if not self.enabled:
            return primes

        with self._lock:
            self._entries[bound] = primes
            self._entries.move_to_end(bound)
            if self.maxsize is not None:
                while len(self._entries) > self.maxsize:
                    self._entries.popitem(last=False)
        return primes

    def get_or_compute(
        self,
        bound: int,
        compute: Callable[[int], np.ndarray],
    ) -> np.ndarray:
        """Serve a bound from the cache, computing and storing it on a miss."""
        if self.enabled:
            primes = self.get_covering(bound)
            if primes is not None:
                self.hits += 1
                return primes

        self.misses += 1
        return self.put(bound, compute(bound))

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __repr__(self) -> str:
        return f"SieveCache(maxsize={self.maxsize}, entries={len(self)})"
