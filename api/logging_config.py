from __future__ import annotations
import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configura el logging raíz una sola vez a partir de settings.log_level."""
    lvl = (level or settings.log_level or "INFO").upper()
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("api").setLevel(lvl)
