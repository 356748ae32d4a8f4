# tests/test_formatting.py
from commonlogging.formatting import format_message


def test_format_fills_placeholders_in_order():
    assert format_message("Starting {} for {}", "job", 42) == "Starting job for 42"


def test_format_without_args_returns_template():
    assert format_message("left {} as is") == "left {} as is"


def test_format_without_placeholders_ignores_args():
    assert format_message("no placeholders", "ignored") == "no placeholders"


def test_format_none_renders_null():
    assert format_message("value={}", None) == "value=null"


def test_format_more_placeholders_than_args():
    assert format_message("{} and {} and {}", "a") == "a and {} and {}"


def test_format_extra_args_are_ignored():
    assert format_message("only {}", 1, 2, 3) == "only 1"


def test_format_argument_text_is_literal():
    assert format_message("price {}", "$1\\0") == "price $1\\0"
