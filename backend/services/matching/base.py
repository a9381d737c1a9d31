"""Abstract base class for matching factors."""

from abc import ABC, abstractmethod

from models.snapshots import CandidateSnapshot, JobSnapshot

NEUTRAL_SCORE = 50.0


class BaseFactor(ABC):
    """Base class for a single scoring factor.

    Subclasses must implement:
        - name: identifier used in factor_registry and MatchWeights
        - score(job, candidate): 0-100 sub-score, pure and deterministic
        - reason(score, job, candidate): user-facing sentence for the score band
    """

    name: str = ""

    @abstractmethod
    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> float:
        """Return the factor sub-score in [0, 100]."""

    @abstractmethod
    def reason(self, score: float, job: JobSnapshot, candidate: CandidateSnapshot) -> str:
        """Render the explanation sentence for an already computed score."""


def band(score: float, thresholds: tuple[float, float, float], templates: tuple[str, str, str, str]) -> str:
    """Pick the template for the first threshold the score reaches."""
    for threshold, template in zip(thresholds, templates):
        if score >= threshold:
            return template
    return templates[-1]


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))
