"""
Eccezioni custom per la ricerca locale Brave.
"""


class LocalSearchError(Exception):
    """Errore generico della ricerca."""
    pass


class InvalidArgumentError(LocalSearchError):
    """Argomenti del tool non validi (errore del chiamante, non ritentabile)."""
    pass


class RateLimitError(LocalSearchError):
    """Rate limit raggiunto (per-secondo o quota mensile)."""
    pass


class ConfigurationError(LocalSearchError):
    """Configurazione mancante o non valida (es. API key assente)."""
    pass


class UpstreamError(LocalSearchError):
    """
    Risposta HTTP non-2xx dalla Brave Search API.

    Conserva status code, reason e body grezzo della risposta.
    """

    def __init__(self, status_code: int, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Brave API error: {status_code} {reason}\n{body}")
