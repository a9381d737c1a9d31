"""Skills factor: weighted coverage of the job's required skills.

Mandatory skills weigh 2, optional skills 1. Each skill the candidate holds
contributes weight * min(proficiency / required_level, 1); missing skills
contribute nothing.
"""

from models.snapshots import CandidateSnapshot, JobSnapshot, RequiredSkill
from services.matching.base import BaseFactor, band

MANDATORY_WEIGHT = 2.0
OPTIONAL_WEIGHT = 1.0

_THRESHOLDS = (80, 60, 40)
_TEMPLATES = (
    "Strong skills match: {matched}/{total} required skills",
    "Good skills match: {matched}/{total} skills matched",
    "Moderate skills match: {matched}/{total} skills matched",
    "Limited skills match: {matched}/{total} skills matched",
)


def _job_skill_map(job: JobSnapshot) -> dict[str, RequiredSkill]:
    return {s.name.strip().lower(): s for s in job.required_skills if s.name.strip()}


def _candidate_skill_map(candidate: CandidateSnapshot) -> dict[str, float]:
    return {s.name.strip().lower(): s.proficiency for s in candidate.skills if s.name.strip()}


def proficiency_ratio(proficiency: float, required_level: float) -> float:
    """Ratio of held to required proficiency, clamped to [0, 1]."""
    if required_level <= 0:
        return 1.0
    return max(0.0, min(proficiency / required_level, 1.0))


class SkillsFactor(BaseFactor):
    name = "skills"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        job_skills = _job_skill_map(job)
        if not job_skills:
            return 100.0

        user_skills = _candidate_skill_map(candidate)
        if not user_skills:
            return 0.0

        total_weight = 0.0
        matched_weight = 0.0
        for skill_name, job_skill in job_skills.items():
            weight = MANDATORY_WEIGHT if job_skill.is_mandatory else OPTIONAL_WEIGHT
            total_weight += weight
            if skill_name in user_skills:
                matched_weight += weight * proficiency_ratio(
                    user_skills[skill_name], job_skill.required_level
                )

        return matched_weight / total_weight * 100

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        job_skills = _job_skill_map(job)
        user_skills = _candidate_skill_map(candidate)
        matched = sum(1 for name in job_skills if name in user_skills)
        return band(score, _THRESHOLDS, _TEMPLATES).format(matched=matched, total=len(job_skills))
