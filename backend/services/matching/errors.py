"""Exceptions raised by the matching service."""


class MatchingError(Exception):
    """Base class for matching failures surfaced to callers."""


class SnapshotNotFoundError(MatchingError):
    """A job or candidate snapshot could not be loaded."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"Match unavailable: {kind} {entity_id} not found")


class CacheUnavailableError(MatchingError):
    """Raised by cache stores when the backing store cannot be reached.

    MatchCache always recovers from it; it never reaches callers.
    """
