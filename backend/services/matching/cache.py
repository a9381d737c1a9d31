"""Match result cache.

Keys are candidate-major (``match_score:{candidate_id}:{job_id}``) so that
every entry for one candidate shares a prefix and can be dropped with a
single prefix scan. Cache failures never fail scoring: reads degrade to a
miss, writes and invalidations are logged and skipped.

Prefix invalidation is best-effort. A scoring call racing an invalidation
may store a result computed from the old profile; the TTL bounds how long
such an entry can live.
"""

import logging
import time
from typing import Callable, Optional, Protocol, runtime_checkable

from cachetools import TLRUCache

from models.responses import MatchResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_PREFIX = "match_score"
DEFAULT_MAX_ENTRIES = 10_000


def _entry_expiry(key: str, entry: tuple[str, int], now: float) -> float:
    return now + entry[1]


def escape_key_part(value: str) -> str:
    """Percent-escape ``%`` and ``:`` so an id cannot extend another id's prefix."""
    return str(value).replace("%", "%25").replace(":", "%3A")


@runtime_checkable
class CacheStore(Protocol):
    """Key-value store with TTL and prefix invalidation."""

    async def get(self, key: str) -> Optional[str]:
        ...

    async def put(self, key: str, value: str, ttl_seconds: int) -> None:
        ...

    async def invalidate(self, key: str) -> None:
        ...

    async def invalidate_by_prefix(self, prefix: str) -> int:
        ...


class InMemoryCacheStore:
    """Process-local CacheStore backed by a bounded cachetools.TLRUCache.

    Every entry keeps the TTL it was written with. Expired entries are purged
    on each write, and the least recently used entries are evicted once
    ``maxsize`` is reached.
    """

    def __init__(
        self,
        maxsize: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache = TLRUCache(maxsize=maxsize, ttu=_entry_expiry, timer=clock)

    async def get(self, key: str) -> Optional[str]:
        entry = self._cache.get(key)
        return None if entry is None else entry[0]

    async def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self._cache[key] = (value, ttl_seconds)

    async def invalidate(self, key: str) -> None:
        self._cache.pop(key, None)

    async def invalidate_by_prefix(self, prefix: str) -> int:
        self._cache.expire()
        removed = 0
        for key in list(self._cache.keys()):
            if key.startswith(prefix) and self._cache.pop(key, None) is not None:
                removed += 1
        return removed

    def __len__(self) -> int:
        self._cache.expire()
        return len(self._cache)


class MatchCache:
    """MatchResult cache on top of any CacheStore."""

    def __init__(
        self,
        store: CacheStore,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self.store = store
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix

    def candidate_prefix(self, candidate_id: str) -> str:
        return f"{self.prefix}:{escape_key_part(candidate_id)}:"

    def key(self, job_id: str, candidate_id: str) -> str:
        return f"{self.candidate_prefix(candidate_id)}{escape_key_part(job_id)}"

    async def get(self, job_id: str, candidate_id: str) -> Optional[MatchResult]:
        key = self.key(job_id, candidate_id)
        try:
            cached = await self.store.get(key)
        except Exception as e:
            logger.warning("Failed to read cached match score %s: %s", key, e)
            return None

        if cached is None:
            return None
        try:
            return MatchResult.model_validate_json(cached)
        except ValueError as e:
            logger.warning("Discarding unreadable cached match score %s: %s", key, e)
            return None

    async def put(
        self,
        job_id: str,
        candidate_id: str,
        result: MatchResult,
        ttl_seconds: Optional[int] = None,
    ) -> None:
        key = self.key(job_id, candidate_id)
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        try:
            await self.store.put(key, result.model_dump_json(), ttl)
        except Exception as e:
            logger.error("Failed to cache match score %s: %s", key, e)

    async def invalidate(self, job_id: str, candidate_id: str) -> None:
        key = self.key(job_id, candidate_id)
        try:
            await self.store.invalidate(key)
        except Exception as e:
            logger.error("Failed to invalidate match score %s: %s", key, e)

    async def invalidate_all_for_candidate(self, candidate_id: str) -> int:
        prefix = self.candidate_prefix(candidate_id)
        try:
            removed = await self.store.invalidate_by_prefix(prefix)
        except Exception as e:
            logger.error("Failed to invalidate match scores for candidate %s: %s", candidate_id, e)
            return 0
        if removed:
            logger.info("Invalidated %d match scores for candidate %s", removed, candidate_id)
        return removed
