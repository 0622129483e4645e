"""Utility module."""
from utils.http_config import create_session
from utils.logger import setup_logging

__all__ = [
    "create_session",
    "setup_logging",
]
