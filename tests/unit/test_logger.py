"""
Test per la configurazione del logging.
"""
import logging
import pytest
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from config import AppConfig
from utils.logger import setup_logging, log_file_path


@pytest.fixture
def restore_root_logger():
    """Ripristina handler e livello del root logger dopo il test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    urllib3_level = logging.getLogger("urllib3").level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(urllib3_level)


class TestSetupLogging:
    """Test per setup_logging."""

    def test_log_file_path(self, tmp_path):
        app_config = AppConfig(log_dir=str(tmp_path), log_name="brave_test")
        path = log_file_path(app_config, date(2026, 10, 19))
        assert path == tmp_path / "brave_test_20261019.log"

    def test_file_handler_from_config(self, tmp_path, restore_root_logger):
        """Test file di log creato in log_dir con il nome da configurazione."""
        app_config = AppConfig(
            log_level="INFO", log_to_file=True, debug=False,
            log_dir=str(tmp_path / "logs"), log_name="brave_test",
        )
        root = setup_logging(app_config)
        logging.getLogger("test").info("hello")

        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()

        log_path = log_file_path(app_config)
        assert log_path.exists()
        assert "hello" in log_path.read_text(encoding="utf-8")
        assert root.level == logging.INFO
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_debug_enables_http_logging(self, restore_root_logger):
        app_config = AppConfig(log_level="WARNING", log_to_file=False, debug=True)
        root = setup_logging(app_config)

        assert root.level == logging.DEBUG
        assert logging.getLogger("urllib3").level == logging.DEBUG

    def test_idempotent(self, restore_root_logger):
        """Test chiamate ripetute: un solo handler console."""
        app_config = AppConfig(log_to_file=False, debug=False)
        setup_logging(app_config)
        root = setup_logging(app_config)
        assert len(root.handlers) == 1
