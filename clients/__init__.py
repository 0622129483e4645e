"""Clients module - connettori alla Brave Search API."""
from clients.base import BaseApiClient
from clients.brave_client import BraveSearchClient

__all__ = [
    "BaseApiClient",
    "BraveSearchClient",
]
