"""Snapshot loading contract and an in-memory implementation."""

from typing import Any, Optional, Protocol, runtime_checkable

from models.snapshots import CandidateSnapshot, JobSnapshot
from services.matching.snapshot_builder import build_candidate_snapshot, build_job_snapshot


@runtime_checkable
class SnapshotLoader(Protocol):
    """Data-store collaborator. Returns None when the entity does not exist."""

    async def load_job_snapshot(self, job_id: str) -> Optional[JobSnapshot]:
        ...

    async def load_candidate_snapshot(self, candidate_id: str) -> Optional[CandidateSnapshot]:
        ...


class InMemorySnapshotLoader:
    """SnapshotLoader over dicts of snapshots keyed by id."""

    def __init__(
        self,
        jobs: Optional[dict[str, JobSnapshot]] = None,
        candidates: Optional[dict[str, CandidateSnapshot]] = None,
    ) -> None:
        self.jobs: dict[str, JobSnapshot] = dict(jobs or {})
        self.candidates: dict[str, CandidateSnapshot] = dict(candidates or {})

    def add_job_record(self, job_id: str, record: Any) -> JobSnapshot:
        snapshot = build_job_snapshot(record)
        self.jobs[job_id] = snapshot
        return snapshot

    def add_candidate_record(self, candidate_id: str, record: Any) -> CandidateSnapshot:
        snapshot = build_candidate_snapshot(record)
        self.candidates[candidate_id] = snapshot
        return snapshot

    async def load_job_snapshot(self, job_id: str) -> Optional[JobSnapshot]:
        return self.jobs.get(job_id)

    async def load_candidate_snapshot(self, candidate_id: str) -> Optional[CandidateSnapshot]:
        return self.candidates.get(candidate_id)
