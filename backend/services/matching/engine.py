"""Scoring engine: six factor calculators and a weighted aggregator.

Flow:
    JobSnapshot + CandidateSnapshot
      ├─ factor.score()   x6  → raw 0-100 sub-scores
      ├─ weighted sum         → total
      ├─ factor.reason()  x6  → FactorScore list
      └─ build_explanation()  → top-3 reasons
                    ↓
               MatchResult
"""

import logging
import math

import numpy as np

from models.responses import MatchBreakdown, MatchResult
from models.schemas.factor_score import FactorScore
from models.schemas.match_weights import FACTOR_NAMES, MatchWeights
from models.snapshots import CandidateSnapshot, JobSnapshot
from services.matching.base import clamp
from services.matching.explanation import build_explanation
from services.matching.factor_registry import all_factors

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest int with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


class ScoringEngine:
    """Pure scorer for one (job, candidate) pair. Holds no mutable state."""

    def __init__(self, weights: MatchWeights | None = None) -> None:
        self.weights = weights or MatchWeights()
        self._factors = all_factors()

    def factor_scores(self, job: JobSnapshot, candidate: CandidateSnapshot) -> list[FactorScore]:
        weights = self.weights.as_dict()
        scores: list[FactorScore] = []
        for factor in self._factors:
            raw = clamp(factor.score(job, candidate))
            weight = weights[factor.name]
            scores.append(
                FactorScore(
                    name=factor.name,
                    score=raw,
                    weight=weight,
                    contribution=raw * weight,
                    reason=factor.reason(raw, job, candidate),
                )
            )
        return scores

    def score(self, job: JobSnapshot, candidate: CandidateSnapshot) -> MatchResult:
        factors = self.factor_scores(job, candidate)

        sub_scores = np.array([f.score for f in factors])
        weight_vec = np.array([f.weight for f in factors])
        total = float(np.dot(sub_scores, weight_vec))

        by_name = {f.name: round_half_up(f.score) for f in factors}
        breakdown = MatchBreakdown(**{name: by_name[name] for name in FACTOR_NAMES})

        result = MatchResult(
            score=int(clamp(round_half_up(total))),
            breakdown=breakdown,
            explanation=build_explanation(factors),
        )
        logger.debug("Scored pair: total=%.2f breakdown=%s", total, by_name)
        return result
