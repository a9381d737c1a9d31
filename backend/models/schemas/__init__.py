"""Shared Pydantic contracts for the matching engine."""

from models.schemas.factor_score import FactorScore
from models.schemas.match_weights import FACTOR_NAMES, MatchWeights

__all__ = [
    "FACTOR_NAMES",
    "FactorScore",
    "MatchWeights",
]
