"""Tests for the batch evaluator."""

import asyncio

import pytest

from models.responses import MatchResult
from services.matching.batch import BatchEvaluator, unique_job_ids
from services.matching.errors import SnapshotNotFoundError


def _scorer(missing=(), broken=()):
    calls = []

    async def score_pair(job_id, candidate_id):
        calls.append(job_id)
        await asyncio.sleep(0)
        if job_id in missing:
            raise SnapshotNotFoundError("job", job_id)
        if job_id in broken:
            raise RuntimeError("boom")
        return MatchResult(score=len(job_id))

    return score_pair, calls


class TestScoreMany:
    @pytest.mark.asyncio
    async def test_partial_failure_omits_missing_job(self):
        score_pair, _ = _scorer(missing={"job-2"})
        results = await BatchEvaluator(score_pair).score_many(["job-1", "job-2", "job-3"], "cand-1")
        assert set(results) == {"job-1", "job-3"}

    @pytest.mark.asyncio
    async def test_unexpected_errors_do_not_abort_batch(self):
        score_pair, _ = _scorer(broken={"job-1"})
        results = await BatchEvaluator(score_pair).score_many(["job-1", "job-2"], "cand-1")
        assert list(results) == ["job-2"]

    @pytest.mark.asyncio
    async def test_duplicates_scored_once(self):
        score_pair, calls = _scorer()
        results = await BatchEvaluator(score_pair).score_many(["a", "b", "a"], "cand-1")
        assert sorted(calls) == ["a", "b"]
        assert len(results) == 2

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        score_pair, calls = _scorer()
        assert await BatchEvaluator(score_pair).score_many([], "cand-1") == {}
        assert calls == []

    @pytest.mark.asyncio
    async def test_max_jobs_caps_batch(self):
        score_pair, calls = _scorer()
        evaluator = BatchEvaluator(score_pair, max_jobs=2)
        results = await evaluator.score_many(["a", "b", "c"], "cand-1")
        assert set(results) == {"a", "b"}
        assert "c" not in calls

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self):
        in_flight = 0
        peak = 0

        async def score_pair(job_id, candidate_id):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.001)
            in_flight -= 1
            return MatchResult()

        evaluator = BatchEvaluator(score_pair, concurrency=3)
        results = await evaluator.score_many([f"job-{i}" for i in range(12)], "cand-1")
        assert len(results) == 12
        assert peak <= 3


class TestValidation:
    def test_rejects_non_positive_limits(self):
        score_pair, _ = _scorer()
        with pytest.raises(ValueError):
            BatchEvaluator(score_pair, concurrency=0)
        with pytest.raises(ValueError):
            BatchEvaluator(score_pair, max_jobs=0)

    def test_unique_job_ids_keeps_order(self):
        assert unique_job_ids(["c", "a", "c", "b", "a"]) == ["c", "a", "b"]
