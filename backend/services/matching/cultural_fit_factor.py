"""Cultural fit factor: company benefits against a reference benefit list."""

from models.snapshots import CandidateSnapshot, JobSnapshot
from services.matching.base import NEUTRAL_SCORE, BaseFactor, band

# Fixed stand-in for candidate benefit preferences, which profiles do not
# capture yet.
PREFERRED_BENEFITS = (
    "health insurance",
    "remote work",
    "flexible hours",
    "professional development",
    "equity",
)

_THRESHOLDS = (80, 60, 40)
_TEMPLATES = (
    "Strong cultural fit with {benefits} matching benefits",
    "Good cultural alignment with company values",
    "Some cultural fit indicators present",
    "Limited cultural fit information available",
)


def matched_benefits(company_benefits) -> list[str]:
    lowered = [b.lower() for b in company_benefits]
    return [p for p in PREFERRED_BENEFITS if any(p in b for b in lowered)]


class CulturalFitFactor(BaseFactor):
    name = "cultural_fit"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        if not job.company_benefits:
            return NEUTRAL_SCORE
        return len(matched_benefits(job.company_benefits)) / len(PREFERRED_BENEFITS) * 100

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        return band(score, _THRESHOLDS, _TEMPLATES).format(benefits=len(job.company_benefits))
