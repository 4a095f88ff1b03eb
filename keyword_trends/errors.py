from __future__ import annotations


KEYWORD_REQUIRED = "Keyword is required"


class KeywordTrendsError(Exception):
    """Base class for failures surfaced by the keyword trends API."""


class QueryValidationError(KeywordTrendsError):
    """Raised when the search keyword is missing or blank."""

    def __init__(self, message: str = KEYWORD_REQUIRED) -> None:
        super().__init__(message)


class BackendError(KeywordTrendsError):
    """Raised when the search backend call fails for any reason."""


class MalformedAggregation(KeywordTrendsError):
    """Raised when the backend answered but the aggregation payload has an unexpected shape."""
