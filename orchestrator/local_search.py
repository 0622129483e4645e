"""
Local Search - Orchestratore della ricerca di attività locali.

Individua gli id delle location, recupera in parallelo schede POI e
descrizioni, e ripiega sulla ricerca web se non ci sono location.
"""
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from clients.brave_client import BraveSearchClient
from core.models import (
    SearchQuery,
    PoiRecord,
    LocalSearchOutcome,
    text_response,
)
from exporters.text_formatter import format_local_results
from orchestrator.rate_limiter import RateLimiter
from orchestrator.web_search import handle_web_search, get_default_client

logger = logging.getLogger(__name__)

# Type alias: tool di fallback, stessi argomenti e stessa envelope
FallbackHandler = Callable[[Dict[str, Any]], Dict[str, Any]]


class LocalSearchOrchestrator:
    """
    Orchestratore della ricerca locale.

    Responsabilità:
    - Validare gli argomenti prima di qualsiasi chiamata di rete
    - Cercare gli id delle location candidate
    - Delegare al fallback web se non ci sono location
    - Recuperare POI e descrizioni in parallelo (tutto-o-niente)
    - Formattare il risultato come testo
    """

    def __init__(
        self,
        client: Optional[BraveSearchClient] = None,
        rate_limiter: Optional[RateLimiter] = None,
        fallback: Optional[FallbackHandler] = None
    ):
        """
        Inizializza l'orchestratore.

        Args:
            client: Client Brave (default: client condiviso; uno nuovo se
                viene passato un rate_limiter dedicato)
            rate_limiter: Gate dedicato (default: quello del client)
            fallback: Handler invocato con {query, count} se non ci sono location
                (default: tool brave_web_search sullo stesso client)
        """
        if client is None:
            client = (
                BraveSearchClient(rate_limiter=rate_limiter)
                if rate_limiter is not None else get_default_client()
            )
        self.client = client
        self.fallback = fallback or partial(handle_web_search, client=self.client)

    def handle_request(self, args: Any) -> Dict[str, Any]:
        """
        Entry point del tool brave_local_search.

        Args:
            args: Argomenti non tipizzati {query: str, count?: number}

        Returns:
            Envelope {content: [{type: "text", text}], isError: False}

        Raises:
            InvalidArgumentError: argomenti malformati (nessuna chiamata di rete)
            RateLimitError: dal rate limiter
            UpstreamError: risposta non-2xx da uno qualsiasi degli endpoint
        """
        query = SearchQuery.from_args(args)
        outcome = self.search(query)

        if outcome.used_fallback:
            return outcome.fallback
        return text_response(format_local_results(outcome.pois, outcome.descriptions))

    def search(self, query: SearchQuery) -> LocalSearchOutcome:
        """
        Esegue la ricerca locale e restituisce l'esito strutturato.

        Args:
            query: Argomenti già validati

        Returns:
            LocalSearchOutcome con POI e descrizioni, o con la risposta di fallback
        """
        location_ids = self.client.search_location_ids(query.text, query.count)

        if not location_ids:
            logger.info(f"No locations for '{query.text}', falling back to web search")
            return LocalSearchOutcome(query=query, fallback=self.fallback(query.to_args()))

        pois, descriptions = self._fetch_details(location_ids)
        logger.info(
            f"Local search for '{query.text}': {len(pois)} POIs, "
            f"{len(descriptions)} descriptions"
        )

        return LocalSearchOutcome(
            query=query,
            location_ids=location_ids,
            pois=pois,
            descriptions=descriptions,
        )

    def _fetch_details(self, ids: List[str]) -> Tuple[List[PoiRecord], Dict[str, str]]:
        """
        Recupera POI e descrizioni in parallelo.

        Il join termina al primo errore o quando entrambe le chiamate sono
        concluse; la chiamata sorella non viene cancellata, il suo esito
        viene ignorato.

        Args:
            ids: Id delle location (deduplicati, ordine preservato)

        Returns:
            Tupla (lista POI, mappa id -> descrizione)
        """
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="brave-details")
        try:
            pois_future = executor.submit(self.client.get_pois, ids)
            desc_future = executor.submit(self.client.get_descriptions, ids)

            done, _ = wait([pois_future, desc_future], return_when=FIRST_EXCEPTION)
            for future in done:
                error = future.exception()
                if error is not None:
                    logger.error(f"Detail fetch failed: {error}")
                    raise error

            return pois_future.result(), desc_future.result()
        finally:
            executor.shutdown(wait=False)
