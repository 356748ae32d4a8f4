# tests/test_helper.py
from commonlogging.helper import LogHelper
from commonlogging.logging import Level
from commonlogging.ports import LoggerPort, LogSink


class RecordingSink:
    def __init__(self, *enabled: Level):
        self.enabled = set(enabled)
        self.records = []

    def is_enabled(self, level):
        return level in self.enabled

    def emit(self, level, message):
        self.records.append((level, message))

    def emit_error(self, message, error):
        self.records.append((Level.ERROR, message, error))


class Loud:
    """Argument whose str() conversion is observable."""
    def __init__(self):
        self.calls = 0

    def __str__(self):
        self.calls += 1
        return "loud"


def test_helper_satisfies_ports():
    sink = RecordingSink()
    assert isinstance(sink, LogSink)
    assert isinstance(LogHelper(sink), LoggerPort)


def test_enabled_levels_are_formatted_and_emitted():
    sink = RecordingSink(Level.DEBUG, Level.INFO, Level.WARN)
    log = LogHelper(sink)
    log.info("Starting {} for {}", "job", 42)
    log.warn("retry {}", 3)
    log.debug("plain")
    assert sink.records == [
        (Level.INFO, "Starting job for 42"),
        (Level.WARN, "retry 3"),
        (Level.DEBUG, "plain"),
    ]


def test_disabled_level_skips_formatting():
    sink = RecordingSink(Level.WARN)
    log = LogHelper(sink)
    arg = Loud()
    log.info("value {}", arg)
    log.debug("value {}", arg)
    assert arg.calls == 0
    assert sink.records == []

    log.warn("value {}", arg)
    assert arg.calls == 1
    assert sink.records == [(Level.WARN, "value loud")]


def test_error_is_never_gated_or_formatted():
    sink = RecordingSink()
    log = LogHelper(sink)
    err = RuntimeError("boom")
    log.error("failed {}", err)
    assert sink.records == [(Level.ERROR, "failed {}", err)]
    assert sink.records[0][2] is err


def test_helper_masks_through_module_functions():
    log = LogHelper(RecordingSink())
    assert log.mask_email("test.user@pragma.com.co") == "t***r@pragma.com.co"
    assert log.mask_document("1234567890") == "1****7890"
    assert log.mask_email(None) == "invalid-email-format"
