"""Tests for culture.core.logging: JSON formatter and setup."""

from __future__ import annotations

import json
import logging

from culture.core.logging import KEY_PREVIEW_LENGTH, JSONFormatter, printable, setup_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("culture.test", logging.INFO, __file__, 1, "loaded %d", (3,), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_basic_fields(self) -> None:
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "culture.test"
        assert payload["message"] == "loaded 3"
        assert "timestamp" in payload

    def test_known_extras_merged(self) -> None:
        out = JSONFormatter().format(_record(event="catalog_loaded", language="fr", count=3))
        payload = json.loads(out)
        assert payload["event"] == "catalog_loaded"
        assert payload["language"] == "fr"
        assert payload["count"] == 3

    def test_unknown_extras_ignored(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(something="x")))
        assert "something" not in payload

    def test_irc_control_bytes_in_caret_notation(self) -> None:
        out = JSONFormatter().format(_record(key="\x02bold\x02 \x1fline\x1f"))
        assert "\x02" not in out
        assert json.loads(out)["key"] == "^Bbold^B ^_line^_"

    def test_message_control_bytes_rendered(self) -> None:
        record = logging.LogRecord("culture.test", logging.INFO, __file__, 1, "\x02%s\x02", ("x",), None)
        assert json.loads(JSONFormatter().format(record))["message"] == "^Bx^B"

    def test_long_key_shortened(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(key="k" * 100)))
        assert payload["key"] == "k" * KEY_PREVIEW_LENGTH + "..."

    def test_non_string_extras_untouched(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(limit=511)))
        assert payload["limit"] == 511

    def test_single_line(self) -> None:
        out = JSONFormatter().format(_record(key="a\nb"))
        assert "\n" not in out


class TestSetupLogging:
    def test_installs_json_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


def test_printable_leaves_plain_text() -> None:
    assert printable("plain text") == "plain text"
    assert printable("\x03red\x0f") == "^Cred^O"
