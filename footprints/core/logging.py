"""Logging setup shared by the API and the scripts."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging once for a host process."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
