"""
Logging for dashboard sessions.

A CLI run and a Streamlit session each call ``setup_logging`` once; the
root logger then writes to the console and to one session log file under
``PIZZA_DASHBOARD_LOG_DIR``. Modules only ever ask for a named logger.
"""
import os
import logging
import threading

from pizza_sales_dashboard.utils.date_helpers import get_timestamp_str

# Guards the root logger across Streamlit reruns of the same process
_logging_initialized = False
_logging_lock = threading.Lock()

DEFAULT_LOG_DIR = os.environ.get("PIZZA_DASHBOARD_LOG_DIR", "logs")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Chatty libraries behind the dataset fetch and the web page
QUIET_LOGGERS = ("urllib3", "requests", "streamlit.watcher")


def _session_log_file(log_dir):
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, f"pizza_dashboard_{get_timestamp_str()}.log")


def setup_logging(log_level=logging.INFO, log_dir=None):
    """
    Attach the console and session-file handlers to the root logger.

    Later calls in the same process (a Streamlit rerun, a second CLI
    invocation in tests) keep the existing handlers and only change the level.

    Args:
        log_level: Logging level (default: INFO)
        log_dir: Directory for the session log (default: PIZZA_DASHBOARD_LOG_DIR or "logs")

    Returns:
        logging.Logger: The root logger
    """
    global _logging_initialized

    with _logging_lock:
        root = logging.getLogger()
        root.setLevel(log_level)
        if _logging_initialized:
            return root

        log_file = _session_log_file(log_dir or DEFAULT_LOG_DIR)

        for handler in root.handlers[:]:
            root.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT)
        for handler in (logging.FileHandler(log_file), logging.StreamHandler()):
            handler.setLevel(log_level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

        # Keep per-request connection chatter out of the dashboard log
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

        root.info(f"Dashboard session logging to {log_file}")
        _logging_initialized = True
        return root


def get_logger(name):
    """Named logger; handlers come from setup_logging, never from import."""
    return logging.getLogger(name)
