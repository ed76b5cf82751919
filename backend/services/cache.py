"""Simple in-memory TTL cache for upstream Unsplash responses.

Note: Each uvicorn worker has its own cache instance, and there is no locking.
Two requests that miss on the same key at the same time will both fetch from
Unsplash; the later write wins. Entries are never evicted, only overwritten by
the next successful fetch for the same key.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_TTL_SECONDS = 60 * 10


@dataclass
class CacheEntry:
    data: Any
    fetched_at: float


class CacheStore:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self.collections: CacheEntry | None = None
        self.photos_by_collection_id: dict[str, CacheEntry] = {}

    def _is_fresh(self, entry: CacheEntry | None) -> bool:
        return entry is not None and self._clock() - entry.fetched_at < self.ttl_seconds

    def get_collections(self) -> Any | None:
        if self._is_fresh(self.collections):
            return self.collections.data
        return None

    def put_collections(self, data: Any) -> None:
        self.collections = CacheEntry(data=data, fetched_at=self._clock())

    def get_photos(self, collection_id: str) -> Any | None:
        entry = self.photos_by_collection_id.get(collection_id)
        if self._is_fresh(entry):
            return entry.data
        return None

    def put_photos(self, collection_id: str, data: Any) -> None:
        self.photos_by_collection_id[collection_id] = CacheEntry(data=data, fetched_at=self._clock())

    def stats(self) -> dict:
        """Entry counts for the readiness probe."""
        return {
            "collections_cached": self.collections is not None,
            "photo_collections_cached": len(self.photos_by_collection_id),
        }
