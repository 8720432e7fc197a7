# utils/logging_config.py
import logging

from utils.constants import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT


def configure_logging(level: int = LOG_LEVEL) -> None:
    """Configure logging to print to console."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT
    )
