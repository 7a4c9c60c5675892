"""Logging setup for the RAWG client and demo app.

Records become one JSON object per line: ``timestamp``, ``level``, ``logger``
and ``message``, plus ``endpoint``, ``status_code`` and ``outcome`` when a
call attached them through ``extra``.

The API key travels in the query string and httpx logs full request URLs at
INFO, so every message and traceback passes through :func:`redact` first.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

REDACTED = "[REDACTED]"

# ?key=abc, &api_key=abc
_QUERY_SECRET = re.compile(
    r"([?&](?:key|api_key|token|secret|password)=)[^&\s\"']+",
    re.IGNORECASE,
)

# "api key: abc", "token=abc"
_FREE_TEXT_SECRET = re.compile(
    r"(api.key|secret|password|token|authorization)\s*[=:]\s*\S+",
    re.IGNORECASE,
)

CALL_FIELDS = ("endpoint", "status_code", "outcome")


def redact(text: str) -> str:
    """Replace credential values in *text* with a placeholder."""
    text = _QUERY_SECRET.sub(rf"\1{REDACTED}", text)
    return _FREE_TEXT_SECRET.sub(REDACTED, text)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, credentials redacted."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, object] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
        }
        entry.update(
            (field, getattr(record, field))
            for field in CALL_FIELDS
            if hasattr(record, field)
        )
        if record.exc_info:
            entry["exception"] = redact(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


class RedactingFormatter(logging.Formatter):
    """Plain-text formatter for local runs."""

    def format(self, record: logging.LogRecord) -> str:
        return redact(super().format(record))


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Route all loggers through a single stderr handler.

    Unknown level names fall back to INFO. Calling this again replaces the
    previous handler rather than adding a second one.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter()
        if json_format
        else RedactingFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
