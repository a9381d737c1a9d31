"""Immutable job and candidate views used by the matching engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"


class WorkArrangement(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


def _clean_strings(values) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(v.strip() for v in values if isinstance(v, str) and v.strip())


class RequiredSkill(BaseModel):
    """A skill listed on a job posting."""
    model_config = ConfigDict(frozen=True)

    name: str
    required_level: float = 1  # 1-5
    is_mandatory: bool = False


class CandidateSkill(BaseModel):
    """A skill on a candidate profile."""
    model_config = ConfigDict(frozen=True)

    name: str
    proficiency: float = 1  # 1-5


class JobSnapshot(BaseModel):
    """Scoring-relevant attributes of a job posting at scoring time.

    ``experience_level`` and ``work_arrangement`` are kept as plain strings so
    that values outside the known enums still load; the factors score those
    as neutral.
    """
    model_config = ConfigDict(frozen=True)

    required_skills: tuple[RequiredSkill, ...] = ()
    primary_models: frozenset[str] = frozenset()
    frameworks: frozenset[str] = frozenset()
    programming_languages: frozenset[str] = frozenset()
    experience_level: str = ""
    work_arrangement: str = ""
    location: str = ""
    salary_min: float | None = None
    salary_max: float | None = None
    company_benefits: tuple[str, ...] = ()

    @field_validator("primary_models", "frameworks", "programming_languages", mode="before")
    @classmethod
    def _normalize_sets(cls, v):
        return _clean_strings(v)

    @field_validator("experience_level", "work_arrangement", mode="before")
    @classmethod
    def _normalize_enum_text(cls, v):
        if isinstance(v, Enum):
            v = v.value
        return (v or "").strip().lower()

    @field_validator("location", mode="before")
    @classmethod
    def _normalize_location(cls, v):
        return (v or "").strip()

    @field_validator("company_benefits", mode="before")
    @classmethod
    def _normalize_benefits(cls, v):
        return tuple(b.strip() for b in (v or ()) if isinstance(b, str) and b.strip())


class CandidateSnapshot(BaseModel):
    """Scoring-relevant attributes of a candidate profile at scoring time."""
    model_config = ConfigDict(frozen=True)

    skills: tuple[CandidateSkill, ...] = ()
    models: frozenset[str] = frozenset()
    frameworks_from_experience: frozenset[str] = frozenset()
    languages_from_experience: frozenset[str] = frozenset()
    years_experience: float = 0.0
    work_location_preferences: frozenset[str] = frozenset()
    open_to_relocation: bool = False
    preferred_locations: frozenset[str] = frozenset()
    salary_expectation_min: float | None = None
    salary_expectation_max: float | None = None

    @field_validator(
        "models",
        "frameworks_from_experience",
        "languages_from_experience",
        "preferred_locations",
        mode="before",
    )
    @classmethod
    def _normalize_sets(cls, v):
        return _clean_strings(v)

    @field_validator("work_location_preferences", mode="before")
    @classmethod
    def _normalize_work_locations(cls, v):
        if v is None:
            return frozenset()
        if isinstance(v, (str, Enum)):
            v = [v]
        cleaned = set()
        for item in v:
            if isinstance(item, Enum):
                item = item.value
            if isinstance(item, str) and item.strip():
                cleaned.add(item.strip().lower())
        return frozenset(cleaned)

    @field_validator("years_experience", mode="before")
    @classmethod
    def _default_years(cls, v):
        return 0.0 if v is None else v

    @property
    def has_location_preferences(self) -> bool:
        return bool(
            self.work_location_preferences
            or self.preferred_locations
            or self.open_to_relocation
        )
