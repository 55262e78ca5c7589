import logging
import sys

LOGGER_NAME = "gallpy"


def setup_logger(debug: bool = False, stream=None) -> logging.Logger:
    """Configure and return the gallpy logger. Calling again replaces the handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(message)s", "%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger


def get_logger(logger=None) -> logging.Logger:
    return logger if logger is not None else logging.getLogger(LOGGER_NAME)
