"""
Rate Limiter globale per le chiamate alla Brave Search API.

Thread-safe per uso con ThreadPoolExecutor.
"""
from datetime import datetime
from time import time, sleep
from threading import Lock
from typing import Optional
import logging

from config import config
from core.exceptions import RateLimitError

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Rate limiter globale per la Brave Search API.

    Thread-safe per uso concorrente con ThreadPoolExecutor.
    Applica due limiti condivisi da tutte le chiamate del processo:
    - finestra di un secondo (per_second richieste)
    - quota mensile (per_month richieste per mese di calendario)

    Quando la finestra per-secondo è piena il gate attende il secondo
    successivo (block=True) oppure solleva RateLimitError (block=False).
    La quota mensile esaurita solleva sempre RateLimitError.
    """

    def __init__(self, per_second: int = 1, per_month: int = 15000, block: bool = True):
        self._lock = Lock()
        self.per_second = per_second
        self.per_month = per_month
        self.block = block

        self._window_start: float = 0.0
        self._second_count: int = 0
        self._month: str = ""
        self._month_count: int = 0

    def check(self) -> None:
        """
        Registra una chiamata, attendendo o fallendo se necessario.

        Raises:
            RateLimitError: quota mensile esaurita, o finestra piena con block=False
        """
        with self._lock:
            now = time()
            month = datetime.fromtimestamp(now).strftime("%Y-%m")
            if month != self._month:
                self._month = month
                self._month_count = 0

            if self._month_count >= self.per_month:
                raise RateLimitError(
                    f"Rate limit exceeded: monthly quota of {self.per_month} requests used"
                )

            if now - self._window_start >= 1.0:
                self._window_start = now
                self._second_count = 0

            if self._second_count >= self.per_second:
                if not self.block:
                    raise RateLimitError(
                        f"Rate limit exceeded: more than {self.per_second} requests per second"
                    )
                wait_time = 1.0 - (now - self._window_start)
                logger.debug(f"Rate limiting Brave API: waiting {wait_time:.2f}s")
                sleep(wait_time)
                self._window_start = time()
                self._second_count = 0

            self._second_count += 1
            self._month_count += 1

    def set_limits(
        self,
        per_second: Optional[int] = None,
        per_month: Optional[int] = None
    ) -> None:
        """
        Aggiorna i limiti.

        Args:
            per_second: Richieste massime per secondo
            per_month: Richieste massime per mese
        """
        with self._lock:
            if per_second is not None:
                self.per_second = per_second
            if per_month is not None:
                self.per_month = per_month
        logger.info(
            f"Updated Brave rate limits: {self.per_second}/s, {self.per_month}/month"
        )

    @property
    def month_count(self) -> int:
        """Richieste registrate nel mese corrente."""
        return self._month_count

    def reset(self) -> None:
        """Azzera finestra per-secondo e contatore mensile."""
        with self._lock:
            self._window_start = 0.0
            self._second_count = 0
            self._month = ""
            self._month_count = 0


# Singleton instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """
    Restituisce l'istanza singleton del rate limiter.

    Returns:
        RateLimiter singleton, configurato da config.rate_limit
    """
    global _rate_limiter
    if _rate_limiter is None:
        limits = config.rate_limit
        _rate_limiter = RateLimiter(
            per_second=limits.per_second,
            per_month=limits.per_month,
            block=limits.block,
        )
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Scarta il singleton (teardown nei test o riconfigurazione)."""
    global _rate_limiter
    _rate_limiter = None
