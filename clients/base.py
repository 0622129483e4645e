"""
Classe base per i client HTTP verso API esterne.

Gestisce session, rate limit e controllo dello status HTTP
in un unico punto, comune a tutti gli endpoint.
"""
from typing import Any, Dict, List, Sequence, Tuple, Union
import logging

import requests

from core.exceptions import UpstreamError


# Parametri query: dict semplice o lista di coppie (chiavi ripetute)
QueryParams = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]


class BaseApiClient:
    """
    Client base per una API JSON su HTTP.

    Pattern: Template Method

    Ogni chiamata passa prima dal rate limiter condiviso, poi dalla
    session; una risposta non-2xx diventa UpstreamError con status e body.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        session: requests.Session,
        rate_limiter,
        timeout: int = 30
    ):
        """
        Inizializza il client.

        Args:
            name: Nome identificativo del client
            base_url: URL base dell'API (senza slash finale)
            session: Session requests già configurata con gli header
            rate_limiter: Gate con metodo check(), invocato prima di ogni chiamata
            timeout: Timeout in secondi per singola richiesta
        """
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.rate_limiter = rate_limiter
        self.timeout = timeout
        self.logger = logging.getLogger(f"client.{name}")

    def _get(self, path: str, params: QueryParams) -> Any:
        """
        Esegue una GET e restituisce il JSON decodificato.

        Args:
            path: Path relativo all'URL base (es. "web/search")
            params: Parametri query; una lista di coppie preserva chiavi ripetute

        Returns:
            Body JSON decodificato

        Raises:
            RateLimitError: dal rate limiter, prima di qualsiasi I/O
            UpstreamError: se la risposta non è 2xx
        """
        self.rate_limiter.check()

        url = f"{self.base_url}/{path.lstrip('/')}"
        self.logger.debug(f"GET {url}")
        response = self.session.get(url, params=params, timeout=self.timeout)

        if not response.ok:
            self.logger.warning(f"GET {path} failed with status {response.status_code}")
            raise UpstreamError(response.status_code, response.reason or "", response.text)

        return response.json()

    def close(self) -> None:
        """Chiude la session e rilascia il connection pool."""
        self.session.close()

    @staticmethod
    def repeated(key: str, values: List[str]) -> List[Tuple[str, str]]:
        """Parametro ripetuto: key=v1&key=v2, saltando valori vuoti."""
        return [(key, v) for v in values if v]
