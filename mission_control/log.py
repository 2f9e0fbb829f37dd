"""Subsystem logger: one stderr line per record, fields as compact JSON."""

import json
import sys
from datetime import datetime
from typing import Any, Dict, Optional


def _log(msg: str):
    print(msg, file=sys.stderr)


def error_text(err: BaseException) -> str:
    # asyncio.TimeoutError stringifies to ""
    return str(err) or err.__class__.__name__


class SubsystemLogger:
    """Minimal LoggerPort implementation tagged with a subsystem name.

    Output looks like::

        [2026-01-01T12:00:00.000000] WARN [gateway/mission-control] MC claim task failed {"status": 404, "taskId": 42}
    """

    def __init__(self, subsystem: str):
        self.subsystem = subsystem

    def format(self, level: str, msg: str, fields: Optional[Dict[str, Any]] = None) -> str:
        line = f"[{datetime.now().isoformat()}] {level} [{self.subsystem}] {msg}"
        if fields:
            line += " " + json.dumps(fields, ensure_ascii=False, default=str)
        return line

    def info(self, msg: str, fields: Optional[Dict[str, Any]] = None) -> None:
        _log(self.format("INFO", msg, fields))

    def warn(self, msg: str, fields: Optional[Dict[str, Any]] = None) -> None:
        _log(self.format("WARN", msg, fields))
