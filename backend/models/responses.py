from pydantic import BaseModel, ConfigDict


class MatchBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: int = 0
    tech_stack: int = 0
    experience: int = 0
    location: int = 0
    salary: int = 0
    cultural_fit: int = 0


class MatchResult(BaseModel):
    """Scored, explained output of comparing one job to one candidate.

    Cached verbatim, so the JSON shape of this model is also the cache
    payload format.
    """
    model_config = ConfigDict(frozen=True)

    score: int = 0  # 0-100
    breakdown: MatchBreakdown = MatchBreakdown()
    explanation: tuple[str, ...] = ()  # at most 3, strongest contribution first
