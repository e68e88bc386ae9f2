"""Small in-memory TTL cache with a size bound."""

from __future__ import annotations

import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """Store cached value with expiration metadata."""

    value: V
    expires_at: float


class TTLCache(Generic[K, V]):
    """Least-recently-inserted entries are evicted once ``max_entries`` is reached."""

    def __init__(
        self,
        ttl_seconds: float = 900.0,
        max_entries: int = 64,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._data: "OrderedDict[K, CacheEntry[V]]" = OrderedDict()

    def set(self, key: K, value: V) -> None:
        self._data.pop(key, None)
        self._data[key] = CacheEntry(value=value, expires_at=self._clock() + self.ttl_seconds)
        while len(self._data) > self.max_entries:
            self._data.popitem(last=False)

    def get(self, key: K) -> Optional[V]:
        """Retrieve a cached value if it has not expired."""
        entry = self._data.get(key)
        if entry is None:
            return None
        if entry.expires_at < self._clock():
            self._data.pop(key, None)
            return None
        return entry.value
