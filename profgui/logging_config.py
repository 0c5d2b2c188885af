"""Logging setup for the API process."""

import logging

from profgui.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = None) -> None:
    """Configure the root logger once, at application start."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQL echo is noisy at INFO; keep it to warnings unless debugging queries.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
