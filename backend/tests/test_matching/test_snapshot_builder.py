"""Tests for building snapshots from platform records."""

from datetime import datetime

import pytest

from services.matching.engine import ScoringEngine
from services.matching.loader import InMemorySnapshotLoader
from services.matching.snapshot_builder import (
    build_candidate_snapshot,
    build_job_snapshot,
    most_recent_experience,
)

JOB_RECORD = {
    "id": "job-id-1",
    "title": "Senior LLM Engineer",
    "experienceLevel": "senior",
    "workLocation": "remote",
    "salaryMin": 80000,
    "salaryMax": "120000",
    "primaryLlms": ["GPT-4", "Claude"],
    "frameworks": ["LangChain", "LlamaIndex"],
    "programmingLanguages": ["Python", "TypeScript"],
    "location": "New York, NY",
    "skills": [
        {"skillName": "Python", "skillType": "programming", "requiredLevel": 4, "isRequired": True},
        {"skillName": "Machine Learning", "skillType": "technical", "requiredLevel": 4, "isRequired": True},
        {"skillName": "NLP", "skillType": "technical", "requiredLevel": 3, "isRequired": False},
    ],
    "company": {
        "benefits": ["Health Insurance", "Remote Work", "Equity"],
        "cultureDescription": "Innovation-focused startup",
    },
}

USER_RECORD = {
    "id": "user-id-1",
    "skills": [
        {"skillName": "Python", "proficiency": 5},
        {"skillName": "Machine Learning", "proficiency": 4},
        {"skillName": "NLP", "proficiency": 3},
    ],
    "userModels": [
        {"model": {"name": "GPT-4", "slug": "gpt-4"}, "proficiency": 4},
        {"model": {"name": "Claude", "slug": "claude"}, "proficiency": 4},
    ],
    "workExperiences": [
        {
            "title": "Data Analyst",
            "startDate": datetime(2010, 1, 1),
            "techStack": {"frameworks": ["Pandas"], "languages": ["R"]},
        },
        {
            "title": "ML Engineer",
            "startDate": datetime(2015, 1, 1),
            "endDate": None,
            "techStack": {"frameworks": ["LangChain", "LlamaIndex"], "languages": ["Python", "TypeScript"]},
        },
    ],
    "profile": {"yearsExperience": 8},
    "jobPreferences": {
        "workLocations": ["remote", "hybrid"],
        "preferredLocations": ["New York"],
        "salaryExpectationMin": 90000,
        "salaryExpectationMax": 130000,
        "openToRelocation": False,
        "companyPreferences": {},
    },
}


class TestBuildJobSnapshot:
    def test_maps_fields(self):
        job = build_job_snapshot(JOB_RECORD)
        assert len(job.required_skills) == 3
        assert job.required_skills[0].is_mandatory is True
        assert job.required_skills[2].required_level == 3
        assert job.primary_models == {"GPT-4", "Claude"}
        assert job.experience_level == "senior"
        assert job.work_arrangement == "remote"
        assert job.salary_max == 120000.0
        assert job.company_benefits == ("Health Insurance", "Remote Work", "Equity")

    def test_sparse_record(self):
        job = build_job_snapshot({"experienceLevel": "mid", "salaryMin": "n/a"})
        assert job.required_skills == ()
        assert job.salary_min is None
        assert job.company_benefits == ()


class TestBuildCandidateSnapshot:
    def test_maps_fields(self):
        candidate = build_candidate_snapshot(USER_RECORD)
        assert candidate.models == {"GPT-4", "Claude"}
        assert candidate.years_experience == 8
        assert candidate.work_location_preferences == {"remote", "hybrid"}
        assert candidate.preferred_locations == {"New York"}
        assert candidate.salary_expectation_min == 90000

    def test_stack_comes_from_most_recent_experience(self):
        candidate = build_candidate_snapshot(USER_RECORD)
        assert candidate.frameworks_from_experience == {"LangChain", "LlamaIndex"}
        assert candidate.languages_from_experience == {"Python", "TypeScript"}

    def test_without_relations(self):
        candidate = build_candidate_snapshot({"skills": []})
        assert candidate.years_experience == 0
        assert not candidate.has_location_preferences
        assert candidate.models == frozenset()

    def test_most_recent_experience_empty(self):
        assert most_recent_experience([]) is None
        assert most_recent_experience(None) is None


class TestRecordsEndToEnd:
    def test_full_profile_score(self):
        job = build_job_snapshot(JOB_RECORD)
        candidate = build_candidate_snapshot(USER_RECORD)
        result = ScoringEngine().score(job, candidate)

        bd = result.breakdown
        assert (bd.skills, bd.tech_stack, bd.experience, bd.location) == (100, 100, 100, 100)
        assert bd.salary == 90
        assert bd.cultural_fit == 60
        # 40 + 20 + 15 + 10 + 9 + 3
        assert result.score == 97
        assert len(result.explanation) == 3

    @pytest.mark.asyncio
    async def test_loader_accepts_records(self):
        loader = InMemorySnapshotLoader()
        loader.add_job_record("job-id-1", JOB_RECORD)
        loader.add_candidate_record("user-id-1", USER_RECORD)
        assert (await loader.load_job_snapshot("job-id-1")).experience_level == "senior"
        assert (await loader.load_candidate_snapshot("user-id-1")).years_experience == 8
        assert await loader.load_job_snapshot("unknown") is None
