"""Exporters module - formattazione dei risultati."""
from exporters.text_formatter import (
    format_poi,
    format_local_results,
    format_web_results,
    NO_LOCAL_RESULTS,
)

__all__ = [
    "format_poi",
    "format_local_results",
    "format_web_results",
    "NO_LOCAL_RESULTS",
]
