"""
Tools module - registro dei tool esposti.

Ogni tool ha un descrittore (name, description, inputSchema)
e un handler che restituisce l'envelope {content, isError}.
"""
from typing import Any, Callable, Dict, List

from core.exceptions import InvalidArgumentError
from tools.local_search import LOCAL_SEARCH_TOOL, handle_request as handle_local_search
from tools.web_search import WEB_SEARCH_TOOL, handle_request as handle_web_search

TOOLS: List[Dict[str, Any]] = [WEB_SEARCH_TOOL, LOCAL_SEARCH_TOOL]

_HANDLERS: Dict[str, Callable[..., Dict[str, Any]]] = {
    WEB_SEARCH_TOOL["name"]: handle_web_search,
    LOCAL_SEARCH_TOOL["name"]: handle_local_search,
}


def call_tool(name: str, args: Any) -> Dict[str, Any]:
    """
    Invoca un tool per nome.

    Raises:
        InvalidArgumentError: se il tool non esiste
    """
    handler = _HANDLERS.get(name)
    if handler is None:
        raise InvalidArgumentError(f"Unknown tool: {name}")
    return handler(args)


__all__ = [
    "TOOLS",
    "LOCAL_SEARCH_TOOL",
    "WEB_SEARCH_TOOL",
    "call_tool",
    "handle_local_search",
    "handle_web_search",
]
