"""Per-factor output passed from the scoring engine to the explanation generator."""

from pydantic import BaseModel, ConfigDict


class FactorScore(BaseModel):
    """One factor's raw sub-score and its weighted contribution."""
    model_config = ConfigDict(frozen=True)

    name: str
    score: float = 0.0  # 0-100, unrounded
    weight: float = 0.0
    contribution: float = 0.0  # score * weight
    reason: str = ""
