from commonlogging.formatting import format_message
from commonlogging.helper import LogHelper
from commonlogging.logging import Level, configure_logging, enabled_levels
from commonlogging.masking import INVALID_EMAIL, MASKED_DOCUMENT, mask_document, mask_email
from commonlogging.ports import LoggerPort, LogSink
from commonlogging.sinks import StdlibLogSink

__all__ = [
    "INVALID_EMAIL",
    "MASKED_DOCUMENT",
    "Level",
    "LogHelper",
    "LogSink",
    "LoggerPort",
    "StdlibLogSink",
    "configure_logging",
    "enabled_levels",
    "format_message",
    "mask_document",
    "mask_email",
]
