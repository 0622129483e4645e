"""Tool brave_web_search: descrittore e handler."""
from typing import Any, Dict, Optional

from clients.brave_client import BraveSearchClient
from orchestrator.web_search import handle_web_search

WEB_SEARCH_TOOL: Dict[str, Any] = {
    "name": "brave_web_search",
    "description": (
        "Performs a web search using the Brave Search API, ideal for general queries, "
        "news, articles, and online content. Use this for broad information gathering, "
        "recent events, or when you need diverse web sources. "
        "Maximum 20 results per request, with offset for pagination."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query (max 400 chars, 50 words)",
            },
            "count": {
                "type": "number",
                "description": "Number of results (1-20, default 10)",
                "default": 10,
            },
            "offset": {
                "type": "number",
                "description": "Pagination offset (max 9, default 0)",
                "default": 0,
            },
        },
        "required": ["query"],
    },
}


def handle_request(
    args: Any,
    client: Optional[BraveSearchClient] = None
) -> Dict[str, Any]:
    """Esegue brave_web_search."""
    return handle_web_search(args, client=client)
