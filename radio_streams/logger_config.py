import logging
import sys


def setup_logger(level: str = "INFO", stream=None):
    """Configures the root logger for the application."""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Console handler, stdout unless another stream is given
    handler = logging.StreamHandler(stream or sys.stdout)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    # Add the handler only once
    if not logger.handlers:
        logger.addHandler(handler)
