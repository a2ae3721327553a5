"""
Event reporting for the parse pipeline.

The extraction code never logs on its own.  It calls a :class:`Reporter`
at a handful of well-defined points and the reporter decides what to do
with the event:

``LoggingReporter``
    Forward the event to :mod:`logging` (the default).

``JsonlReporter``
    Forward to :mod:`logging` and also append the event to a JSON Lines
    file, by default under ``reports/``, so a run can be reviewed later.

``NullReporter``
    Drop everything.

The ``EVENTS`` dictionary maps event codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

EVENTS: Dict[str, str] = {
    "FEED_DATE_MISSING": "error parsing published date",
    "CONTROL_CHARS_REMOVED": "Removed invalid XML characters",
    "ITEM_IGNORED": "Ignoring item",
    "ITEM_EXTRACTED": "Extracted item",
    "TERM_EXTRACTED": "Extracted term",
    "SUMMARY": "WebsiteInfo parsed",
}

_DEFAULT_REPORT = os.path.join("reports", "parse.jsonl")


def _format(code: str, data: Dict[str, Any]) -> str:
    message = EVENTS.get(code, code)
    if not data:
        return message
    details = " ".join(f"{key}={value!r}" for key, value in data.items())
    return f"{message}: {details}"


class Reporter:
    """Receives pipeline events.  Subclasses override :meth:`report`."""

    def report(self, code: str, level: str = "INFO", **data: Any) -> None:
        raise NotImplementedError


class NullReporter(Reporter):
    def report(self, code: str, level: str = "INFO", **data: Any) -> None:
        return None


class LoggingReporter(Reporter):
    """Send events to a standard library logger."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self.log = log

    def report(self, code: str, level: str = "INFO", **data: Any) -> None:
        levelno = logging.getLevelName(level.upper())
        if not isinstance(levelno, int):
            levelno = logging.INFO
        self.log.log(levelno, _format(code, data))


class JsonlReporter(LoggingReporter):
    """Log events and append them to a JSON Lines file.

    Parameters
    ----------
    path:
        Location of the report file.  The parent directory is created on
        the first write.
    min_level:
        Events below this level are logged but not written to the file,
        which keeps per-item ``DEBUG`` events out of the report.
    """

    def __init__(self, path: str = _DEFAULT_REPORT, *, min_level: str = "INFO",
                 log: logging.Logger = logger) -> None:
        super().__init__(log)
        self.path = path
        self.min_level = logging.getLevelName(min_level.upper())

    def _write_jsonl(self, data: Dict[str, Any]) -> None:
        """Append ``data`` as a JSON object followed by a newline."""
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, default=str)
            f.write("\n")

    def report(self, code: str, level: str = "INFO", **data: Any) -> None:
        super().report(code, level, **data)
        levelno = logging.getLevelName(level.upper())
        if isinstance(levelno, int) and levelno < self.min_level:
            return
        entry: Dict[str, Any] = {
            "code": code,
            "level": level.upper(),
            "message": EVENTS.get(code, code),
        }
        entry.update(data)
        self._write_jsonl(entry)
