"""
Configurazione logging per l'applicazione.

Livello, file e directory arrivano da AppConfig; con debug attivo
vengono tracciate anche le richieste HTTP di urllib3.
"""
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from config import AppConfig, config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Logger delle librerie HTTP usate dal client Brave
HTTP_LOGGERS = ("urllib3", "requests")


def log_file_path(app_config: AppConfig, day: Optional[date] = None) -> Path:
    """Percorso del file di log giornaliero, es. logs/brave_local_search_20261019.log."""
    day = day or date.today()
    return Path(app_config.log_dir) / f"{app_config.log_name}_{day.strftime('%Y%m%d')}.log"


def setup_logging(app_config: AppConfig = config) -> logging.Logger:
    """
    Configura il root logger a partire dalla configurazione applicativa.

    Idempotente: gli handler esistenti vengono sostituiti, così un
    rerun di Streamlit non duplica le righe di log.

    Args:
        app_config: Configurazione (log_level, log_to_file, log_dir, log_name, debug)

    Returns:
        Root logger configurato
    """
    level = logging.DEBUG if app_config.debug else getattr(
        logging, app_config.log_level.upper(), logging.INFO
    )
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if app_config.log_to_file:
        path = log_file_path(app_config)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as e:
            root_logger.warning(f"Could not create log file {path}: {e}")
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    http_level = logging.DEBUG if app_config.debug else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    root_logger.debug(
        f"Logging configured for {app_config.app_name} v{app_config.version} at "
        f"{logging.getLevelName(level)}"
    )
    return root_logger
