"""Cache-aside layer for single-RSVP reads.

The mapping is process-wide, unbounded and never expires; an entry lives
until a write evicts it or the process restarts.

Consistency rests on one rule: ``get_or_load`` for an id and the
store-write-plus-``evict`` pair for the same id run under the same lock.
A reader therefore either finishes loading before the write starts (and
the write's evict removes what it cached) or starts loading after the
evict (and sees the committed write). Locks are striped by id so unrelated
ids rarely contend and no per-id lock table has to grow.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from rsvp_service.config import settings
from rsvp_service.schemas.rsvp import CacheStats, RSVPRecord

logger = logging.getLogger(__name__)

Loader = Callable[[int], Optional[RSVPRecord]]


class RSVPCache:
    def __init__(self, stripes: int = 64):
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._entries: dict[int, RSVPRecord] = {}
        self._stripes = [threading.Lock() for _ in range(stripes)]
        # Guards the counters only; entries are guarded by the id stripes
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def _lock_for(self, rsvp_id: int) -> threading.Lock:
        return self._stripes[hash(rsvp_id) % len(self._stripes)]

    def get_or_load(self, rsvp_id: int, loader: Loader) -> Optional[RSVPRecord]:
        """Return the cached record, or load, cache and return it.

        Absent results are never cached. Loader exceptions propagate and
        leave the mapping untouched.
        """
        with self._lock_for(rsvp_id):
            return self._get_or_load_unlocked(rsvp_id, loader)

    def _get_or_load_unlocked(self, rsvp_id: int, loader: Loader) -> Optional[RSVPRecord]:
        cached = self._entries.get(rsvp_id)
        if cached is not None:
            with self._stats_lock:
                self._hits += 1
            logger.debug("RSVP cache hit: %s", rsvp_id)
            return cached

        with self._stats_lock:
            self._misses += 1
        logger.debug("RSVP cache miss: %s", rsvp_id)
        record = loader(rsvp_id)
        if record is not None:
            self._entries[rsvp_id] = record
        return record

    def evict(self, rsvp_id: int) -> None:
        """Drop any entry for rsvp_id. Idempotent."""
        with self._lock_for(rsvp_id):
            self._evict_unlocked(rsvp_id)

    def _evict_unlocked(self, rsvp_id: int) -> None:
        if self._entries.pop(rsvp_id, None) is not None:
            with self._stats_lock:
                self._evictions += 1
            logger.debug("RSVP cache evict: %s", rsvp_id)

    @contextmanager
    def writing(self, rsvp_id: int) -> Iterator[None]:
        """Run a store write for rsvp_id, evicting its entry once the write succeeds.

        The stripe is held for the whole block, so no reader can cache the
        pre-write value after the write commits. If the block raises, nothing
        is evicted and the exception propagates.
        """
        with self._lock_for(rsvp_id):
            yield
            self._evict_unlocked(rsvp_id)

    def __contains__(self, rsvp_id: int) -> bool:
        return rsvp_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Forget every entry and reset counters (process restart equivalent)."""
        for lock in self._stripes:
            lock.acquire()
        try:
            self._entries.clear()
            with self._stats_lock:
                self._hits = self._misses = self._evictions = 0
        finally:
            for lock in self._stripes:
                lock.release()

    def stats(self) -> CacheStats:
        with self._stats_lock:
            return CacheStats(
                size=len(self._entries),
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )


# Singleton cache instance used by the service layer
rsvp_cache = RSVPCache(stripes=settings.CACHE_LOCK_STRIPES)
