"""Process-wide logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger (once) and set its level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
