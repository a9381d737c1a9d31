"""Location factor: work arrangement and place compatibility."""

from models.snapshots import CandidateSnapshot, JobSnapshot, WorkArrangement
from services.matching.base import NEUTRAL_SCORE, BaseFactor, band

REMOTE = WorkArrangement.REMOTE.value
HYBRID = WorkArrangement.HYBRID.value
ONSITE = WorkArrangement.ONSITE.value
UNSPECIFIED_ARRANGEMENT = "unspecified"

_THRESHOLDS = (90, 70, 50)
_TEMPLATES = (
    "Ideal {arrangement} work arrangement matches your preference",
    "Compatible {arrangement} work location",
    "{arrangement} work location is workable",
    "{arrangement} arrangement may not match your preference",
)


def locations_overlap(job_location: str, preferred_locations) -> bool:
    """Case-insensitive substring containment in either direction."""
    job_loc = job_location.strip().lower()
    if not job_loc:
        return False
    for preferred in preferred_locations:
        pref = preferred.strip().lower()
        if pref and (pref in job_loc or job_loc in pref):
            return True
    return False


class LocationFactor(BaseFactor):
    name = "location"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        if not candidate.has_location_preferences:
            return NEUTRAL_SCORE

        accepted = candidate.work_location_preferences
        arrangement = job.work_arrangement

        if arrangement == REMOTE:
            return 100.0 if REMOTE in accepted else 80.0

        if arrangement == HYBRID:
            if HYBRID in accepted or REMOTE in accepted:
                return 90.0
            if ONSITE in accepted:
                return 70.0
            return 50.0

        if arrangement == ONSITE:
            if ONSITE not in accepted and not candidate.open_to_relocation:
                return 20.0
            if locations_overlap(job.location, candidate.preferred_locations):
                return 100.0
            if candidate.open_to_relocation:
                return 60.0
            return 30.0

        return NEUTRAL_SCORE

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        return band(score, _THRESHOLDS, _TEMPLATES).format(
            arrangement=job.work_arrangement or UNSPECIFIED_ARRANGEMENT
        )
