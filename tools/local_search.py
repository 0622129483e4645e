"""Tool brave_local_search: descrittore e handler."""
from typing import Any, Dict, Optional

from orchestrator.local_search import LocalSearchOrchestrator

LOCAL_SEARCH_TOOL: Dict[str, Any] = {
    "name": "brave_local_search",
    "description": (
        "Searches for local businesses and places using Brave's Local Search API. "
        "Best for queries related to physical locations, businesses, restaurants, services, etc. "
        "Returns detailed information including:\n"
        "- Business names and addresses\n"
        "- Ratings and review counts\n"
        "- Phone numbers and opening hours\n"
        "Use this when the query implies 'near me' or mentions specific locations. "
        "Automatically falls back to web search if no local results are found."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Local search query (e.g. 'pizza near Central Park')",
            },
            "count": {
                "type": "number",
                "description": "Number of results (1-20, default 5)",
                "default": 5,
            },
        },
        "required": ["query"],
    },
}


# Orchestratore di default, creato alla prima chiamata del tool
_default_orchestrator: Optional[LocalSearchOrchestrator] = None


def get_default_orchestrator() -> LocalSearchOrchestrator:
    """Restituisce l'orchestratore condiviso (stesso client e stessa session)."""
    global _default_orchestrator
    if _default_orchestrator is None:
        _default_orchestrator = LocalSearchOrchestrator()
    return _default_orchestrator


def reset_default_orchestrator() -> None:
    global _default_orchestrator
    _default_orchestrator = None


def handle_request(
    args: Any,
    orchestrator: Optional[LocalSearchOrchestrator] = None
) -> Dict[str, Any]:
    """Esegue brave_local_search (orchestratore condiviso se non fornito)."""
    orchestrator = orchestrator or get_default_orchestrator()
    return orchestrator.handle_request(args)
