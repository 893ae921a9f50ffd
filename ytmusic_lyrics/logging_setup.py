from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# HTTP plumbing under ytmusicapi; only interesting with --debug
_TRANSPORT_LOGGERS = ("urllib3", "requests")


def resolve_level(debug: bool) -> int:
    level_name = os.getenv("YTMUSIC_LYRICS_LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if debug else logging.INFO


def setup_logging(debug: bool) -> None:
    level = resolve_level(debug)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    transport_level = logging.DEBUG if debug else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(level, transport_level))
