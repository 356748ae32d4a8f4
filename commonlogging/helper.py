# commonlogging/helper.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from commonlogging.formatting import format_message
from commonlogging.logging import Level
from commonlogging.masking import mask_document, mask_email
from commonlogging.ports import LogSink


@dataclass(frozen=True)
class LogHelper:
    """
    LoggerPort implementation over a LogSink.

    info/warn/debug check the level first and only then format, so a disabled
    level costs no string conversion. error is never gated or formatted.
    """
    sink: LogSink

    def info(self, message: str, *args: Any) -> None:
        self._log(Level.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(Level.WARN, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._log(Level.DEBUG, message, args)

    def error(self, message: str, error: Any) -> None:
        self.sink.emit_error(message, error)

    def mask_email(self, email: Optional[str]) -> str:
        return mask_email(email)

    def mask_document(self, document_id: Optional[str]) -> str:
        return mask_document(document_id)

    def _log(self, level: Level, message: str, args: tuple) -> None:
        if self.sink.is_enabled(level):
            self.sink.emit(level, format_message(message, *args))
