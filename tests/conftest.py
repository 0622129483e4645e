"""
Fixtures pytest per Brave Local Search.
"""
import pytest
from pathlib import Path
from typing import Any, Dict, List, Optional
import sys

# Aggiungi la directory root al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from clients.brave_client import BraveSearchClient
from core.exceptions import RateLimitError
from orchestrator.rate_limiter import reset_rate_limiter
from orchestrator.web_search import reset_default_client
from tools.local_search import reset_default_orchestrator

BASE_URL = "https://api.test/res/v1"


class FakeResponse:
    """Risposta minima compatibile con requests.Response."""

    def __init__(self, status_code: int = 200, json_data: Any = None,
                 text: str = "", reason: str = "OK"):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        return self._json


class FakeSession:
    """
    Session finta: risponde in base al path e registra le chiamate.

    routes: path relativo (es. "local/pois") -> FakeResponse, oppure lista
    di FakeResponse restituite in ordine per chiamate successive
    """

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params=None, timeout=None) -> FakeResponse:
        path = url[len(BASE_URL) + 1:]
        self.calls.append({"path": path, "params": params, "timeout": timeout})
        route = self.routes[path]
        if isinstance(route, list):
            return route.pop(0)
        return route

    def close(self) -> None:
        self.closed = True

    def calls_to(self, path: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["path"] == path]


class CountingRateLimiter:
    """Gate permissivo che conta le invocazioni (o fallisce se richiesto)."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = 0

    def check(self) -> None:
        self.calls += 1
        if self.fail:
            raise RateLimitError("Rate limit exceeded")


def make_client(session: FakeSession,
                rate_limiter: Optional[CountingRateLimiter] = None) -> BraveSearchClient:
    """Client Brave collegato alla session finta."""
    return BraveSearchClient(
        rate_limiter=rate_limiter or CountingRateLimiter(),
        api_key="test-key",
        session=session,
        base_url=BASE_URL,
        timeout=5,
    )


@pytest.fixture(autouse=True)
def clean_singletons():
    """Scarta rate limiter, client e orchestratore condivisi tra un test e l'altro."""
    reset_default_orchestrator()
    reset_default_client()
    reset_rate_limiter()
    yield
    reset_default_orchestrator()
    reset_default_client()
    reset_rate_limiter()


@pytest.fixture
def locations_payload() -> Dict[str, Any]:
    """Risposta web/search con due location valide, una nulla e un duplicato."""
    return {
        "type": "search",
        "locations": {
            "results": [
                {"id": "loc-a", "title": "Cafe X"},
                {"id": None, "title": "Senza id"},
                {"id": "loc-b", "title": "Pizzeria Y"},
                {"id": "loc-a", "title": "Cafe X (dup)"},
            ]
        },
    }


@pytest.fixture
def pois_payload() -> Dict[str, Any]:
    """Risposta local/pois per loc-a e loc-b."""
    return {
        "results": [
            {
                "id": "loc-a",
                "name": "Cafe X",
                "address": {"addressLocality": "Springfield"},
            },
            {
                "id": "loc-b",
                "name": "Pizzeria Y",
                "address": {
                    "streetAddress": "742 Evergreen Terrace",
                    "addressLocality": "Springfield",
                    "addressRegion": "OR",
                    "postalCode": "97403",
                },
                "coordinates": {"latitude": 44.05, "longitude": -123.09},
                "phone": "+1 555 0100",
                "rating": {"ratingValue": 4.5, "ratingCount": 120},
                "openingHours": ["Mo-Fr 11:00-22:00", "Sa 12:00-23:00"],
                "priceRange": "$$",
            },
        ]
    }


@pytest.fixture
def descriptions_payload() -> Dict[str, Any]:
    """Risposta local/descriptions: solo loc-a ha una descrizione."""
    return {"type": "local_descriptions", "descriptions": {"loc-a": "Cozy cafe"}}


@pytest.fixture
def web_payload() -> Dict[str, Any]:
    """Risposta web/search generica."""
    return {
        "web": {
            "results": [
                {"title": "Pizza guide", "description": "Best pizza", "url": "https://a.example"},
                {"title": "Pizza map", "description": "Where to eat", "url": "https://b.example"},
            ]
        }
    }
