"""
Web Search - ricerca web generica, usata anche come fallback
della ricerca locale.
"""
from typing import Any, Dict, Optional
import logging

from clients.brave_client import BraveSearchClient
from core.models import WebSearchQuery, text_response
from exporters.text_formatter import format_web_results
from orchestrator.rate_limiter import get_rate_limiter

logger = logging.getLogger(__name__)

# Client di default condiviso dai tool (una sola session per processo)
_default_client: Optional[BraveSearchClient] = None


def get_default_client() -> BraveSearchClient:
    """
    Restituisce il client Brave di default, creato alla prima richiesta.

    Returns:
        BraveSearchClient singleton, collegato al rate limiter di processo
    """
    global _default_client
    if _default_client is None:
        _default_client = BraveSearchClient(rate_limiter=get_rate_limiter())
    return _default_client


def reset_default_client() -> None:
    """Chiude la session del client di default e lo scarta."""
    global _default_client
    if _default_client is not None:
        _default_client.close()
    _default_client = None


def handle_web_search(
    args: Any,
    client: Optional[BraveSearchClient] = None
) -> Dict[str, Any]:
    """
    Entry point del tool brave_web_search.

    Args:
        args: Argomenti non tipizzati {query: str, count?: number, offset?: number}
        client: Client Brave (default: client condiviso, vedi get_default_client)

    Returns:
        Envelope {content: [{type: "text", text}], isError: False}

    Raises:
        InvalidArgumentError: argomenti malformati
        RateLimitError: dal rate limiter
        UpstreamError: risposta non-2xx
    """
    query = WebSearchQuery.from_args(args)
    if client is None:
        client = get_default_client()

    results = client.web_search(query.text, query.count, query.offset)
    return text_response(format_web_results(results))
