"""Orchestrator module - coordinamento delle ricerche Brave."""
from orchestrator.local_search import LocalSearchOrchestrator
from orchestrator.web_search import handle_web_search, get_default_client, reset_default_client
from orchestrator.rate_limiter import RateLimiter, get_rate_limiter, reset_rate_limiter

__all__ = [
    "LocalSearchOrchestrator",
    "handle_web_search",
    "get_default_client",
    "reset_default_client",
    "RateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
]
