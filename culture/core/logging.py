"""JSON-lines logging for the translation framework.

One JSON object per line on stdout.  Message keys and catalog text are
IRC message templates, so the formatter renders IRC formatting control
bytes in caret notation (``\\x02`` → ``^B``) and shortens long keys.

The host daemon calls ``culture.i18n.startup()``, which configures
logging from ``Settings.LOG_LEVEL``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "event",
    "language",
    "key",
    "domain",
    "path",
    "count",
    "limit",
)

# Bold, colour, reset, reverse, italic, underline.
_IRC_CONTROL = str.maketrans({
    "\x02": "^B",
    "\x03": "^C",
    "\x0f": "^O",
    "\x16": "^V",
    "\x1d": "^]",
    "\x1f": "^_",
})

KEY_PREVIEW_LENGTH = 60


def printable(text: str) -> str:
    """Render IRC formatting bytes in *text* in caret notation."""
    return text.translate(_IRC_CONTROL)


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": printable(record.getMessage()),
        }

        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is None:
                continue
            if isinstance(value, str):
                if key == "key" and len(value) > KEY_PREVIEW_LENGTH:
                    value = value[:KEY_PREVIEW_LENGTH] + "..."
                value = printable(value)
            payload[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure the root logger to emit JSON lines to stdout.

    Args:
        log_level: Minimum log level name (e.g. ``"INFO"``, ``"DEBUG"``).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())
