"""Shared test configuration, pytest markers and matching fixtures."""

import pytest

from models.snapshots import CandidateSkill, CandidateSnapshot, JobSnapshot, RequiredSkill
from services.matching import factor_registry
from services.matching.cache import InMemoryCacheStore, MatchCache
from services.matching.errors import CacheUnavailableError
from services.matching.loader import InMemorySnapshotLoader


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: wires the full matching service with in-memory stores"
    )


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingCacheStore:
    """CacheStore whose every operation fails, like an unreachable server."""

    def __init__(self) -> None:
        self.calls = 0

    async def get(self, key):
        self.calls += 1
        raise CacheUnavailableError("connection refused")

    async def put(self, key, value, ttl_seconds):
        self.calls += 1
        raise CacheUnavailableError("connection refused")

    async def invalidate(self, key):
        self.calls += 1
        raise CacheUnavailableError("connection refused")

    async def invalidate_by_prefix(self, prefix):
        self.calls += 1
        raise CacheUnavailableError("connection refused")


@pytest.fixture(autouse=True)
def _reset_factor_registry():
    """Clear factor registry before each test."""
    factor_registry.clear()
    yield
    factor_registry.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def failing_store():
    return FailingCacheStore()


@pytest.fixture
def match_cache(clock):
    return MatchCache(InMemoryCacheStore(clock=clock))


@pytest.fixture
def senior_python_job():
    """Remote senior role requiring Python 5 (mandatory), no stack, no salary."""
    return JobSnapshot(
        required_skills=(RequiredSkill(name="Python", required_level=5, is_mandatory=True),),
        experience_level="senior",
        work_arrangement="remote",
    )


@pytest.fixture
def python_candidate():
    """Python 5, four years of experience, wants remote work."""
    return CandidateSnapshot(
        skills=(CandidateSkill(name="Python", proficiency=5),),
        years_experience=4,
        work_location_preferences={"remote"},
    )


@pytest.fixture
def loader(senior_python_job, python_candidate):
    return InMemorySnapshotLoader(
        jobs={"job-1": senior_python_job},
        candidates={"cand-1": python_candidate},
    )
