# commonlogging/di.py
from dataclasses import dataclass
import logging
from commonlogging.config import Settings
from commonlogging.helper import LogHelper
from commonlogging.logging import enabled_levels
from commonlogging.sinks import StdlibLogSink

@dataclass
class Container:
    settings: Settings
    sink: StdlibLogSink
    log_helper: LogHelper

def build_container(settings: Settings | None = None) -> Container:
    s = settings or Settings()
    sink = StdlibLogSink(
        logger=logging.getLogger(s.LOGGER_NAME),
        enabled=enabled_levels(s.LOG_LEVEL),
    )
    return Container(s, sink, LogHelper(sink))
