"""Experience factor: candidate years against the job level's reference range."""

from models.snapshots import CandidateSnapshot, ExperienceLevel, JobSnapshot
from services.matching.base import NEUTRAL_SCORE, BaseFactor, band

# Inclusive (min, max) years per level. Lead and principal overlap on purpose.
LEVEL_YEARS: dict[str, tuple[float, float]] = {
    ExperienceLevel.ENTRY.value: (0, 1),
    ExperienceLevel.JUNIOR.value: (1, 3),
    ExperienceLevel.MID.value: (3, 6),
    ExperienceLevel.SENIOR.value: (6, 10),
    ExperienceLevel.LEAD.value: (8, 15),
    ExperienceLevel.PRINCIPAL.value: (10, 99),
}

PENALTY_PER_YEAR = 15.0

_THRESHOLDS = (90, 70, 50)
_TEMPLATES = (
    "Perfect experience match for {level} level ({years} years)",
    "Good experience fit: {years} years for {level} role",
    "Acceptable experience level: {years} years experience",
    "Experience level may not align with {level} requirements",
)


def format_years(years: float) -> str:
    return f"{years:g}"


def distance_to_range(years: float, low: float, high: float) -> float:
    if years < low:
        return low - years
    if years > high:
        return years - high
    return 0.0


class ExperienceFactor(BaseFactor):
    name = "experience"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        required = LEVEL_YEARS.get(job.experience_level)
        if required is None:
            return NEUTRAL_SCORE

        years = max(candidate.years_experience, 0.0)
        distance = distance_to_range(years, *required)
        if distance == 0:
            return 100.0
        return max(100.0 - distance * PENALTY_PER_YEAR, 0.0)

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        return band(score, _THRESHOLDS, _TEMPLATES).format(
            level=job.experience_level,
            years=format_years(max(candidate.years_experience, 0.0)),
        )
