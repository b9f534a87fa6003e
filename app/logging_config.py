"""
Lobby Chat – logging setup.

Logs go to stdout so container platforms pick them up.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level_name: str = "INFO") -> None:
    """Configure the root logger, unless something (e.g. uvicorn) already did."""
    level = getattr(logging, level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # SQL echo is controlled by DEBUG, not by the root level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
