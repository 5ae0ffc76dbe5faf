from __future__ import annotations

import logging

from slack_puncher.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # httpx logs every request at INFO, including the full query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)
