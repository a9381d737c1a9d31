from config import settings
from services.matching.cache import InMemoryCacheStore, MatchCache
from services.matching.engine import ScoringEngine
from services.matching.loader import InMemorySnapshotLoader, SnapshotLoader
from services.matching.service import MatchingService


def build_matching_service(
    loader: SnapshotLoader | None = None,
    cache: MatchCache | None = None,
) -> MatchingService:
    """Wire a MatchingService from settings.

    Defaults to in-process stores; callers plug in their own loader and cache
    store backed by the platform's database and key-value store.
    """
    return MatchingService(
        loader=loader or InMemorySnapshotLoader(),
        cache=cache or MatchCache(
            InMemoryCacheStore(maxsize=settings.match_cache_max_entries),
            ttl_seconds=settings.match_cache_ttl_seconds,
            prefix=settings.match_cache_prefix,
        ),
        engine=ScoringEngine(settings.match_weights),
        batch_concurrency=settings.match_batch_concurrency,
        batch_max_jobs=settings.match_batch_max_jobs,
    )
