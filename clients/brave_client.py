"""
Client per la Brave Search API.

Copre i tre endpoint usati dalla ricerca locale (web/search filtrato
su locations, local/pois, local/descriptions) e la ricerca web generica.
"""
from typing import Dict, List, Optional
import logging

import requests

from clients.base import BaseApiClient
from config import config, MAX_COUNT, SEARCH_LANG
from core.exceptions import ConfigurationError
from core.models import PoiRecord, WebResult
from utils.http_config import create_session

logger = logging.getLogger(__name__)


class BraveSearchClient(BaseApiClient):
    """
    Client per la Brave Search API.

    Tutte le chiamate sono sincrone e thread-safe: il fan-out della
    ricerca locale invoca get_pois e get_descriptions da due thread.
    """

    def __init__(
        self,
        rate_limiter,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        api_key = api_key if api_key is not None else config.brave_api_key
        if session is None:
            if not api_key:
                raise ConfigurationError("BRAVE_API_KEY environment variable is required")
            session = create_session(api_key)

        super().__init__(
            name="brave",
            base_url=base_url or config.brave_api_base_url,
            session=session,
            rate_limiter=rate_limiter,
            timeout=timeout or config.request_timeout,
        )

    def search_location_ids(self, query: str, count: int) -> List[str]:
        """
        Cerca location candidate e ne restituisce gli id.

        Args:
            query: Testo della ricerca
            count: Numero di risultati richiesti (limitato a MAX_COUNT)

        Returns:
            Id non vuoti, deduplicati, nell'ordine restituito dall'API
        """
        data = self._get("web/search", {
            "q": query,
            "search_lang": SEARCH_LANG,
            "result_filter": "locations",
            "count": str(min(count, MAX_COUNT)),
        })

        results = ((data or {}).get("locations") or {}).get("results") or []
        ids = [r.get("id") for r in results if isinstance(r, dict)]
        location_ids = list(dict.fromkeys(i for i in ids if i))

        self.logger.info(f"Locations search for '{query}': {len(location_ids)} ids")
        return location_ids

    def get_pois(self, ids: List[str]) -> List[PoiRecord]:
        """
        Recupera le schede POI per gli id indicati.

        Args:
            ids: Id restituiti da search_location_ids

        Returns:
            Lista di PoiRecord (eventualmente vuota)
        """
        data = self._get("local/pois", self.repeated("ids", ids))
        results = (data or {}).get("results") or []
        return [PoiRecord.from_dict(r) for r in results if isinstance(r, dict)]

    def get_descriptions(self, ids: List[str]) -> Dict[str, str]:
        """
        Recupera le descrizioni testuali per gli id indicati.

        Returns:
            Mappa id -> descrizione (gli id senza descrizione sono assenti)
        """
        data = self._get("local/descriptions", self.repeated("ids", ids))
        descriptions = (data or {}).get("descriptions") or {}
        return {k: v for k, v in descriptions.items() if v}

    def web_search(self, query: str, count: int, offset: int = 0) -> List[WebResult]:
        """
        Ricerca web generica.

        Args:
            query: Testo della ricerca
            count: Numero di risultati (limitato a MAX_COUNT)
            offset: Offset di paginazione

        Returns:
            Lista di WebResult
        """
        data = self._get("web/search", {
            "q": query,
            "count": str(min(count, MAX_COUNT)),
            "offset": str(offset),
        })
        results = ((data or {}).get("web") or {}).get("results") or []
        self.logger.info(f"Web search for '{query}': {len(results)} results")
        return [WebResult.from_dict(r) for r in results if isinstance(r, dict)]
