"""Core module - modelli dati ed eccezioni."""
from core.models import (
    SearchQuery,
    WebSearchQuery,
    PostalAddress,
    Coordinates,
    Rating,
    PoiRecord,
    WebResult,
    LocalSearchOutcome,
    text_response,
)
from core.exceptions import (
    LocalSearchError,
    InvalidArgumentError,
    RateLimitError,
    ConfigurationError,
    UpstreamError,
)

__all__ = [
    "SearchQuery",
    "WebSearchQuery",
    "PostalAddress",
    "Coordinates",
    "Rating",
    "PoiRecord",
    "WebResult",
    "LocalSearchOutcome",
    "text_response",
    "LocalSearchError",
    "InvalidArgumentError",
    "RateLimitError",
    "ConfigurationError",
    "UpstreamError",
]
