"""Build typed snapshots from loosely-typed platform records.

Job and user records arrive as nested dicts shaped like the platform's
persistence rows (camelCase keys, optional relations). This module is the
only place that reaches into those shapes; the scoring engine only ever sees
JobSnapshot and CandidateSnapshot.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from models.snapshots import CandidateSkill, CandidateSnapshot, JobSnapshot, RequiredSkill

logger = logging.getLogger(__name__)


def _get(record: Any, *names: str, default: Any = None) -> Any:
    """First present attribute/key among ``names`` (camelCase or snake_case)."""
    if record is None:
        return default
    for name in names:
        if isinstance(record, dict):
            if record.get(name) is not None:
                return record[name]
        elif getattr(record, name, None) is not None:
            return getattr(record, name)
    return default


def _to_number(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(Decimal(str(value)))
    except (InvalidOperation, ValueError):
        logger.warning("Ignoring non-numeric value %r", value)
        return None
    return number


def _strings(values: Any) -> list[str]:
    return [v for v in (values or []) if isinstance(v, str)]


def _start_date_key(entry: Any) -> str:
    start = _get(entry, "startDate", "start_date")
    if isinstance(start, (datetime, date)):
        return start.isoformat()
    return str(start or "")


def most_recent_experience(work_experiences: Any) -> Any:
    """The work history entry with the latest start date, or None."""
    entries = list(work_experiences or [])
    if not entries:
        return None
    return max(entries, key=_start_date_key)


def build_job_snapshot(record: Any) -> JobSnapshot:
    skills = [
        RequiredSkill(
            name=_get(s, "skillName", "skill_name", "name", default=""),
            required_level=_to_number(_get(s, "requiredLevel", "required_level")) or 1,
            is_mandatory=bool(_get(s, "isRequired", "is_required", "is_mandatory", default=False)),
        )
        for s in (_get(record, "skills", "required_skills", default=[]))
    ]
    company = _get(record, "company")

    return JobSnapshot(
        required_skills=tuple(skills),
        primary_models=_strings(_get(record, "primaryLlms", "primary_models")),
        frameworks=_strings(_get(record, "frameworks")),
        programming_languages=_strings(_get(record, "programmingLanguages", "programming_languages")),
        experience_level=_get(record, "experienceLevel", "experience_level", default=""),
        work_arrangement=_get(record, "workLocation", "work_arrangement", default=""),
        location=_get(record, "location", default=""),
        salary_min=_to_number(_get(record, "salaryMin", "salary_min")),
        salary_max=_to_number(_get(record, "salaryMax", "salary_max")),
        company_benefits=_strings(_get(company, "benefits", default=[])),
    )


def build_candidate_snapshot(record: Any) -> CandidateSnapshot:
    skills = [
        CandidateSkill(
            name=_get(s, "skillName", "skill_name", "name", default=""),
            proficiency=_to_number(_get(s, "proficiency")) or 0,
        )
        for s in (_get(record, "skills", default=[]))
    ]

    models = []
    for user_model in _get(record, "userModels", "user_models", default=[]):
        name = _get(_get(user_model, "model"), "name")
        if isinstance(name, str):
            models.append(name)

    latest = most_recent_experience(_get(record, "workExperiences", "work_experiences"))
    tech_stack = _get(latest, "techStack", "tech_stack", default={})
    frameworks = _get(tech_stack, "frameworks", default=[])
    languages = _get(tech_stack, "languages", default=[])

    profile = _get(record, "profile")
    prefs = _get(record, "jobPreferences", "job_preferences")

    return CandidateSnapshot(
        skills=tuple(skills),
        models=models,
        frameworks_from_experience=_strings(frameworks if isinstance(frameworks, list) else []),
        languages_from_experience=_strings(languages if isinstance(languages, list) else []),
        years_experience=_to_number(_get(profile, "yearsExperience", "years_experience")) or 0.0,
        work_location_preferences=_strings(_get(prefs, "workLocations", "work_locations")),
        open_to_relocation=bool(_get(prefs, "openToRelocation", "open_to_relocation", default=False)),
        preferred_locations=_strings(_get(prefs, "preferredLocations", "preferred_locations")),
        salary_expectation_min=_to_number(_get(prefs, "salaryExpectationMin", "salary_expectation_min")),
        salary_expectation_max=_to_number(_get(prefs, "salaryExpectationMax", "salary_expectation_max")),
    )
