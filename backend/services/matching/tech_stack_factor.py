"""Tech stack factor: Jaccard overlap of models, frameworks and languages."""

from models.snapshots import CandidateSnapshot, JobSnapshot
from services.matching.base import BaseFactor, band

# Models dominate: the platform is LLM-centric.
CATEGORY_WEIGHTS = {
    "models": 0.5,
    "frameworks": 0.3,
    "languages": 0.2,
}

_THRESHOLDS = (80, 60, 40)
_TEMPLATES = (
    "Excellent tech stack alignment with {count} matching LLMs",
    "Good tech stack match: experience with {models}",
    "Some tech stack overlap: {count} matching technologies",
    "Limited tech stack alignment with required tools",
)


def _lower(values) -> set[str]:
    return {v.lower() for v in values}


def jaccard_similarity(a, b) -> float:
    """|A & B| / |A | B|, case-insensitive. Two empty sets are a perfect match."""
    set_a = _lower(a)
    set_b = _lower(b)
    if not set_a and not set_b:
        return 1.0
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def category_similarity(job_values, candidate_values) -> float:
    """Jaccard similarity, except a category the job leaves empty is fully met."""
    if not job_values:
        return 1.0
    return jaccard_similarity(candidate_values, job_values)


def matched_models(job: JobSnapshot, candidate: CandidateSnapshot) -> list[str]:
    """Job model names (original casing) the candidate also lists, sorted."""
    user_models = _lower(candidate.models)
    return sorted(
        (m for m in job.primary_models if m.lower() in user_models),
        key=lambda m: (m.lower(), m),
    )


class TechStackFactor(BaseFactor):
    name = "tech_stack"

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        similarities = {
            "models": category_similarity(job.primary_models, candidate.models),
            "frameworks": category_similarity(
                job.frameworks, candidate.frameworks_from_experience
            ),
            "languages": category_similarity(
                job.programming_languages, candidate.languages_from_experience
            ),
        }
        combined = sum(similarities[k] * w for k, w in CATEGORY_WEIGHTS.items())
        return combined * 100

    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        models = matched_models(job, candidate)
        return band(score, _THRESHOLDS, _TEMPLATES).format(
            count=len(models), models=", ".join(models)
        )
