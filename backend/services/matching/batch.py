"""Batch evaluator: score many jobs for one candidate.

Each job runs through the single-pair, cache-checked path as an independent
task. A semaphore bounds how many tasks are in flight, which in turn bounds
concurrent snapshot loads. A failing job is logged and left out of the
result; it never aborts the batch.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Iterable

from models.responses import MatchResult
from services.matching.errors import SnapshotNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 20
DEFAULT_MAX_JOBS = 100

ScorePair = Callable[[str, str], Awaitable[MatchResult]]


def unique_job_ids(job_ids: Iterable[str]) -> list[str]:
    """De-duplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(job_ids))


class BatchEvaluator:
    def __init__(
        self,
        score_pair: ScorePair,
        concurrency: int = DEFAULT_CONCURRENCY,
        max_jobs: int = DEFAULT_MAX_JOBS,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if max_jobs < 1:
            raise ValueError("max_jobs must be at least 1")
        self._score_pair = score_pair
        self.concurrency = concurrency
        self.max_jobs = max_jobs

    async def score_many(self, job_ids: Iterable[str], candidate_id: str) -> dict[str, MatchResult]:
        ids = unique_job_ids(job_ids)
        if len(ids) > self.max_jobs:
            logger.warning(
                "Batch of %d jobs exceeds limit %d for candidate %s; scoring first %d",
                len(ids), self.max_jobs, candidate_id, self.max_jobs,
            )
            ids = ids[: self.max_jobs]
        if not ids:
            return {}

        semaphore = asyncio.Semaphore(self.concurrency)
        results: dict[str, MatchResult] = {}

        async def _score_one(job_id: str) -> None:
            async with semaphore:
                try:
                    results[job_id] = await self._score_pair(job_id, candidate_id)
                except SnapshotNotFoundError as e:
                    logger.warning("Skipping job %s in batch: %s", job_id, e)
                except Exception:
                    logger.exception(
                        "Failed to calculate match score: job=%s candidate=%s", job_id, candidate_id
                    )

        await asyncio.gather(*(_score_one(job_id) for job_id in ids))
        logger.debug("Batch scored %d/%d jobs for candidate %s", len(results), len(ids), candidate_id)
        return results
