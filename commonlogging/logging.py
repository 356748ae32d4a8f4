# commonlogging/logging.py
import enum
import logging
from typing import FrozenSet, Optional

from commonlogging.config import Settings


class Level(enum.IntEnum):
    """Severities the facade knows about, valued as stdlib logging levels."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


_ALIASES = {"WARNING": Level.WARN, "FINE": Level.DEBUG, "SEVERE": Level.ERROR}


def parse_level(name: str) -> Level:
    key = name.strip().upper()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Level[key]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def enabled_levels(threshold: str) -> FrozenSet[Level]:
    """Every level at or above `threshold`, e.g. "WARN" -> {WARN, ERROR}."""
    floor = parse_level(threshold)
    return frozenset(lvl for lvl in Level if lvl >= floor)


def configure_logging(settings: Optional[Settings] = None):
    s = settings or Settings()
    logging.basicConfig(
        level=parse_level(s.LOG_LEVEL).value,
        format=s.LOG_FORMAT,
    )
