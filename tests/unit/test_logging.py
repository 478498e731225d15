from __future__ import annotations

import json
import logging

from recordkeeper.utils.logging import _json_formatter, configure_logging

EXPECTED_COUNT = 5
EXPECTED_LINE = 12


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.count = EXPECTED_COUNT
    record.path = "inventory.json"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["count"] == EXPECTED_COUNT
    assert payload["path"] == "inventory.json"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"line_number": EXPECTED_LINE}

    payload = json.loads(_json_formatter(record))

    assert payload["line_number"] == EXPECTED_LINE
    assert "extra" not in payload


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging(level="WARNING", json_logs=True)
    assert logging.getLogger().level == logging.WARNING
