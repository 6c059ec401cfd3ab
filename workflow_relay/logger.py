"""
Logging configuration for the application.
"""
import logging
import sys


LOGGER_NAME = "workflow_relay"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    (Re)configure the relay logger to write to stdout.

    Safe to call more than once: previous handlers are replaced, so
    create_app can apply the debug setting after import.
    """
    level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    relay_logger = logging.getLogger(LOGGER_NAME)
    relay_logger.setLevel(level)
    relay_logger.handlers = [handler]
    return relay_logger


logger = setup_logging()
