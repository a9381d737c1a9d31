"""Lazy factor registry for the matching engine.

Module-level singletons created on first use, in FACTOR_NAMES order.
"""

import logging

from models.schemas.match_weights import FACTOR_NAMES
from services.matching.base import BaseFactor

logger = logging.getLogger(__name__)

_registry: dict[str, BaseFactor] = {}


def _create_factor(name: str) -> BaseFactor:
    """Factory: create a factor by name with deferred imports."""
    if name == "skills":
        from services.matching.skills_factor import SkillsFactor
        return SkillsFactor()
    elif name == "tech_stack":
        from services.matching.tech_stack_factor import TechStackFactor
        return TechStackFactor()
    elif name == "experience":
        from services.matching.experience_factor import ExperienceFactor
        return ExperienceFactor()
    elif name == "location":
        from services.matching.location_factor import LocationFactor
        return LocationFactor()
    elif name == "salary":
        from services.matching.salary_factor import SalaryFactor
        return SalaryFactor()
    elif name == "cultural_fit":
        from services.matching.cultural_fit_factor import CulturalFitFactor
        return CulturalFitFactor()
    else:
        raise ValueError(f"Unknown factor: {name}")


def get_factor(name: str) -> BaseFactor:
    """Get a factor by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_factor(name)
        logger.debug("Registered matching factor: %s", name)
    return _registry[name]


def all_factors() -> list[BaseFactor]:
    """All six factors in canonical order (the explanation tie-break order)."""
    return [get_factor(name) for name in FACTOR_NAMES]


def clear() -> None:
    """Drop all factor instances. Useful for testing."""
    _registry.clear()
