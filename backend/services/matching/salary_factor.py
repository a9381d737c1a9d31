"""Salary factor: job midpoint against the candidate's expected midpoint."""

from typing import Optional

from models.snapshots import CandidateSnapshot, JobSnapshot
from services.matching.base import NEUTRAL_SCORE, BaseFactor, band

_THRESHOLDS = (90, 70, 50)
_TEMPLATES = (
    "Salary range meets or exceeds your expectations",
    "Competitive salary within your expected range",
    "Salary is close to your expectations",
    "Salary may be below your expectations",
)


def salary_midpoint(low: Optional[float], high: Optional[float]) -> Optional[float]:
    """Midpoint of a salary range, or the single bound present.

    Non-positive bounds count as missing. An inverted range is unusable and
    yields None.
    """
    low = low if low is not None and low > 0 else None
    high = high if high is not None and high > 0 else None
    if low is not None and high is not None:
        if low > high:
            return None
        return (low + high) / 2
    return low if low is not None else high


def shortfall_score(shortfall_pct: float) -> float:
    if shortfall_pct <= 10:
        return 90.0
    if shortfall_pct <= 20:
        return 70.0
    if shortfall_pct <= 30:
        return 50.0
    return max(30.0 - shortfall_pct, 0.0)


class SalaryFactor(BaseFactor):
    name = "salary"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        job_mid = salary_midpoint(job.salary_min, job.salary_max)
        user_mid = salary_midpoint(
            candidate.salary_expectation_min, candidate.salary_expectation_max
        )
        if job_mid is None or user_mid is None:
            return NEUTRAL_SCORE

        if job_mid >= user_mid:
            return 100.0

        shortfall = (user_mid - job_mid) / user_mid * 100
        return shortfall_score(shortfall)

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        return band(score, _THRESHOLDS, _TEMPLATES)
