"""Factor weights for the matching engine."""

from pydantic import BaseModel, ConfigDict, PositiveFloat, model_validator

FACTOR_NAMES = [
    "skills",
    "tech_stack",
    "experience",
    "location",
    "salary",
    "cultural_fit",
]

_SUM_TOLERANCE = 1e-6


class MatchWeights(BaseModel):
    """Positive per-factor weights that must sum to 1.0.

    Validated on construction, so an invalid configuration fails at startup
    instead of on the first scoring call.
    """
    model_config = ConfigDict(frozen=True)

    skills: PositiveFloat = 0.40
    tech_stack: PositiveFloat = 0.20
    experience: PositiveFloat = 0.15
    location: PositiveFloat = 0.10
    salary: PositiveFloat = 0.10
    cultural_fit: PositiveFloat = 0.05

    @model_validator(mode="after")
    def _check_sum(self) -> "MatchWeights":
        total = sum(self.as_dict().values())
        if abs(total - 1.0) > _SUM_TOLERANCE:
            raise ValueError(f"match weights must sum to 1.0, got {total:.6f}")
        return self

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FACTOR_NAMES}
