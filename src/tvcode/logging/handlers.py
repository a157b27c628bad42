"""JSON log formatting for tvcode.

One object per line, so a batch run can be filtered by file with ``jq``:

    {"timestamp": "...", "level": "WARNING", "logger": "tvcode.tools.detection",
     "message": "...", "file": "/videos/movie.mkv", "context": {...}}
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

# Set by FileContextFilter; reported as "file" instead of under "context".
_FILE_ATTRS = frozenset({"file_path", "file_tag"})


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        file_path = getattr(record, "file_path", None)
        if file_path:
            entry["file"] = file_path

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in _FILE_ATTRS
            and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
