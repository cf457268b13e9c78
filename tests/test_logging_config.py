import logging
import os

import pytest

from pizza_sales_dashboard.utils import logging_config


@pytest.fixture
def fresh_root_logger(monkeypatch):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(logging_config, "_logging_initialized", False)
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_creates_log_file(fresh_root_logger, tmp_path):
    log_dir = tmp_path / "logs"
    logger = logging_config.setup_logging(log_level=logging.DEBUG, log_dir=str(log_dir))

    assert logger is fresh_root_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    files = os.listdir(log_dir)
    assert len(files) == 1 and files[0].startswith("pizza_dashboard_")


def test_setup_logging_is_idempotent(fresh_root_logger, tmp_path):
    logging_config.setup_logging(log_dir=str(tmp_path))
    logging_config.setup_logging(log_level=logging.WARNING, log_dir=str(tmp_path))

    assert len(fresh_root_logger.handlers) == 2
    assert fresh_root_logger.level == logging.WARNING


def test_get_logger_does_not_configure_handlers():
    logger = logging_config.get_logger("pizza_sales_dashboard.tests")
    assert logger.name == "pizza_sales_dashboard.tests"
    assert logger.handlers == []


def test_setup_logging_quiets_http_libraries(fresh_root_logger, tmp_path):
    saved = {name: logging.getLogger(name).level for name in logging_config.QUIET_LOGGERS}
    try:
        logging_config.setup_logging(log_level=logging.DEBUG, log_dir=str(tmp_path))
        assert logging.getLogger("urllib3").level == logging.WARNING
        assert fresh_root_logger.level == logging.DEBUG
    finally:
        for name, level in saved.items():
            logging.getLogger(name).setLevel(level)
