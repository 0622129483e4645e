"""
HTTP Configuration Module - Session requests per la Brave Search API.

Configura:
- Header richiesti dall'API (JSON, gzip, subscription token)
- Connection pooling condiviso dai thread del fan-out
- Nessun retry automatico: gli errori HTTP risalgono al chiamante
"""
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
import logging

logger = logging.getLogger(__name__)

# Header inviati a tutte le richieste
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Encoding": "gzip",
}

SUBSCRIPTION_TOKEN_HEADER = "X-Subscription-Token"


def create_session(
    api_key: str,
    pool_connections: int = 4,
    pool_maxsize: int = 8,
) -> requests.Session:
    """
    Create a requests Session for the Brave Search API.

    Args:
        api_key: Brave subscription token
        pool_connections: Number of connection pools to cache
        pool_maxsize: Max connections kept per pool

    Returns:
        Configured requests.Session
    """
    session = requests.Session()

    # Retries disabled, including on connect errors
    retry_strategy = Retry(total=0, raise_on_status=False)

    adapter = HTTPAdapter(
        max_retries=retry_strategy,
        pool_connections=pool_connections,
        pool_maxsize=pool_maxsize,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update(DEFAULT_HEADERS)
    session.headers[SUBSCRIPTION_TOKEN_HEADER] = api_key

    logger.debug("Brave API session created")
    return session
