# commonlogging/sinks.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, FrozenSet
import logging

from commonlogging.logging import Level


@dataclass(frozen=True)
class StdlibLogSink:
    """
    LogSink backed by a stdlib logger.
    Gating uses the injected `enabled` set, not the logger's own level.
    """
    logger: logging.Logger
    enabled: FrozenSet[Level]

    def is_enabled(self, level: Level) -> bool:
        return level in self.enabled

    def emit(self, level: Level, message: str) -> None:
        self.logger.log(level.value, message)

    def emit_error(self, message: str, error: Any) -> None:
        if isinstance(error, BaseException):
            self.logger.error(message, exc_info=error)
        else:
            self.logger.error(message, extra={"cause": error})
