from __future__ import annotations

import logging

from arcade_connect4.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging once for the console entry points.
    Library modules only ever call logging.getLogger(__name__).
    """
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT)
