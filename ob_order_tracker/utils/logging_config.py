"""
Logging configuration for the order tracker.

All package loggers hang off the ``ob_order_tracker`` logger, which gets one
console handler and one timestamped log file per process.
"""
import logging
import os
import threading
from datetime import datetime

PACKAGE_LOGGER = "ob_order_tracker"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DIR = os.environ.get("OB_TRACKER_LOG_DIR", "logs")

_configured = False
_configure_lock = threading.Lock()


def _build_handlers(log_dir: str, log_level):
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"ob_order_tracker_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(), logging.FileHandler(log_file, encoding="utf-8")]
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
    return handlers, log_file


def setup_logging(log_level=logging.INFO, log_dir=None):
    """
    Configure package logging once; later calls only change the level.

    Args:
        log_level: Logging level (default: INFO)
        log_dir: Directory for log files (default: OB_TRACKER_LOG_DIR or "logs")

    Returns:
        logging.Logger: The package logger
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)

    with _configure_lock:
        if _configured:
            logger.setLevel(log_level)
            for handler in logger.handlers:
                handler.setLevel(log_level)
            return logger

        handlers, log_file = _build_handlers(log_dir or DEFAULT_LOG_DIR, log_level)
        logger.setLevel(log_level)
        for handler in handlers:
            logger.addHandler(handler)

        _configured = True

    logger.info(f"Logging initialized. Log file: {log_file}")
    return logger


def get_logger(name):
    """
    Get a logger for a module, configuring package logging on first use.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if not _configured:
        setup_logging()

    return logging.getLogger(name)
