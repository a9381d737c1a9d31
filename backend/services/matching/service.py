"""Matching service: the entry points the rest of the platform calls.

Single pair:
    cache.get ── hit ──────────────────────────────→ MatchResult
        └─ miss → loader (job, candidate) → engine.score → cache.put → MatchResult

Many jobs:   BatchEvaluator fans the single-pair path out per job.
Profile edit: invalidate_candidate_matches drops every cached pair for
              the candidate.
"""

import asyncio
import logging
from typing import Iterable, Optional

from models.responses import MatchResult
from services.matching.batch import DEFAULT_CONCURRENCY, DEFAULT_MAX_JOBS, BatchEvaluator
from services.matching.cache import MatchCache
from services.matching.engine import ScoringEngine
from services.matching.errors import SnapshotNotFoundError
from services.matching.loader import SnapshotLoader

logger = logging.getLogger(__name__)


class MatchingService:
    def __init__(
        self,
        loader: SnapshotLoader,
        cache: MatchCache,
        engine: Optional[ScoringEngine] = None,
        batch_concurrency: int = DEFAULT_CONCURRENCY,
        batch_max_jobs: int = DEFAULT_MAX_JOBS,
    ) -> None:
        self.loader = loader
        self.cache = cache
        self.engine = engine or ScoringEngine()
        self.batch = BatchEvaluator(
            self.get_match_score,
            concurrency=batch_concurrency,
            max_jobs=batch_max_jobs,
        )

    async def get_match_score(self, job_id: str, candidate_id: str) -> MatchResult:
        """Score one job for one candidate.

        Raises SnapshotNotFoundError when either side cannot be loaded.
        """
        cached = await self.cache.get(job_id, candidate_id)
        if cached is not None:
            logger.debug("Cache hit for match score: job=%s, candidate=%s", job_id, candidate_id)
            return cached

        job, candidate = await asyncio.gather(
            self.loader.load_job_snapshot(job_id),
            self.loader.load_candidate_snapshot(candidate_id),
        )
        if job is None:
            raise SnapshotNotFoundError("job", job_id)
        if candidate is None:
            raise SnapshotNotFoundError("candidate", candidate_id)

        result = self.engine.score(job, candidate)
        await self.cache.put(job_id, candidate_id, result)
        return result

    async def get_match_scores_for_jobs(
        self, job_ids: Iterable[str], candidate_id: str
    ) -> dict[str, MatchResult]:
        """Score a page of jobs; jobs that fail are omitted from the result."""
        return await self.batch.score_many(job_ids, candidate_id)

    async def invalidate_match_score(self, job_id: str, candidate_id: str) -> None:
        await self.cache.invalidate(job_id, candidate_id)

    async def invalidate_candidate_matches(self, candidate_id: str) -> int:
        """Drop every cached score for the candidate after a profile change."""
        return await self.cache.invalidate_all_for_candidate(candidate_id)
