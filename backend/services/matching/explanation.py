"""Explanation generator: top factor drivers as user-facing sentences.

Template-based, no model involved. Output is deterministic for a given pair
of snapshots so it can be golden-tested.
"""

from models.schemas.factor_score import FactorScore

MAX_REASONS = 3


def rank_factors(factors: list[FactorScore]) -> list[FactorScore]:
    """Sort by weighted contribution, highest first.

    The sort is stable, so ties keep the canonical factor order.
    """
    return sorted(factors, key=lambda f: f.contribution, reverse=True)


def build_explanation(factors: list[FactorScore], limit: int = MAX_REASONS) -> tuple[str, ...]:
    return tuple(f.reason for f in rank_factors(factors)[:limit])
