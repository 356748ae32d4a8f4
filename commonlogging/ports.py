# commonlogging/ports.py
"""Capability interfaces: what callers depend on, and what the facade writes to."""
from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from commonlogging.logging import Level


@runtime_checkable
class LogSink(Protocol):
    """The underlying logger. Owns handlers, layout and its own thread safety."""

    def is_enabled(self, level: Level) -> bool: ...

    def emit(self, level: Level, message: str) -> None: ...

    def emit_error(self, message: str, error: Any) -> None: ...


@runtime_checkable
class LoggerPort(Protocol):
    """Logging plus PII masking, as seen by application code."""

    def info(self, message: str, *args: Any) -> None: ...

    def warn(self, message: str, *args: Any) -> None: ...

    def debug(self, message: str, *args: Any) -> None: ...

    def error(self, message: str, error: Any) -> None: ...

    def mask_email(self, email: Optional[str]) -> str: ...

    def mask_document(self, document_id: Optional[str]) -> str: ...
