from pydantic_settings import BaseSettings

from models.schemas.match_weights import MatchWeights


class Settings(BaseSettings):
    debug: bool = False

    # Result cache
    match_cache_ttl_seconds: int = 24 * 60 * 60
    match_cache_prefix: str = "match_score"
    match_cache_max_entries: int = 10_000  # in-process store only

    # Batch evaluation
    match_batch_concurrency: int = 20  # in-flight snapshot loads per batch
    match_batch_max_jobs: int = 100  # page-sized; extra ids are not scored

    # Factor weights, overridable as MATCH_WEIGHTS__SKILLS=0.5 etc.
    match_weights: MatchWeights = MatchWeights()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }


settings = Settings()
