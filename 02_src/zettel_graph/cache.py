"""In-memory TTL cache fronting repeated graph builds."""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple


@dataclass(frozen=True)
class CacheStats:
    label: str
    size: int
    hits: int
    misses: int
    ttl_seconds: int


class TTLCache:
    """Thread-safe key/value store whose entries expire after ``ttl_seconds``.

    A miss or an expired entry only means the caller recomputes.
    """

    def __init__(
        self,
        ttl_seconds: int = 300,
        *,
        label: str = "graph_cache",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = max(1, int(ttl_seconds))
        self.label = label
        self._clock = clock
        self._lock = threading.Lock()
        self._store: Dict[str, Tuple[float, Any]] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self._misses += 1
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._store[key]
                self._misses += 1
                return None
            self._hits += 1
            return value

    def set(self, key: str, value: Any, *, ttl_seconds: Optional[int] = None) -> None:
        ttl = max(1, int(ttl_seconds or self.ttl_seconds))
        with self._lock:
            self._store[key] = (self._clock() + ttl, value)

    def get_or_compute(self, key: str, compute: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is None:
            value = compute()
            self.set(key, value)
        return value

    def invalidate(self, key: Optional[str] = None) -> None:
        with self._lock:
            if key is None:
                self._store.clear()
            else:
                self._store.pop(key, None)

    def describe(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                label=self.label,
                size=len(self._store),
                hits=self._hits,
                misses=self._misses,
                ttl_seconds=self.ttl_seconds,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
