"""Structured logging with key-value fields."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_RESERVED_FIELD = "ignored"


def _fields(args: tuple[Any, ...]) -> dict[str, Any]:
    """Pair up alternating keys and values; a dangling key is kept under 'ignored'."""
    pairs = dict(zip(args[0::2], args[1::2]))
    fields = {str(key): value for key, value in pairs.items()}
    if len(args) % 2:
        fields[_RESERVED_FIELD] = args[-1]
    return fields


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        line = f"{ts}\t{record.levelname}\t{record.getMessage()}"
        fields = getattr(record, "fields", None)
        if fields:
            line += "\t" + json.dumps(fields, ensure_ascii=False, default=str)
        return line


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname.lower(),
            "ts": record.created,
            "msg": record.getMessage(),
        }
        entry.update(getattr(record, "fields", None) or {})
        return json.dumps(entry, ensure_ascii=False, default=str)


class Logger:
    """Logger taking a message followed by alternating keys and values."""

    def __init__(
        self,
        name: str = "burovichok",
        *,
        level: int = logging.DEBUG,
        json_format: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._log = logging.Logger(name, level)
        self._log.propagate = False
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(_JSONFormatter() if json_format else _ConsoleFormatter())
        self._log.addHandler(handler)

    @property
    def level(self) -> int:
        """The lowest level that is written."""
        return self._log.level

    def _write(self, level: int, msg: str, args: tuple[Any, ...]) -> None:
        if self._log.isEnabledFor(level):
            self._log.log(level, msg, extra={"fields": _fields(args)})

    def infow(self, msg: str, *args: Any) -> None:
        """Log at info level with key-value fields."""
        self._write(logging.INFO, msg, args)

    def debugw(self, msg: str, *args: Any) -> None:
        """Log at debug level with key-value fields."""
        self._write(logging.DEBUG, msg, args)

    def errorw(self, msg: str, *args: Any) -> None:
        """Log at error level with key-value fields."""
        self._write(logging.ERROR, msg, args)


def new_logger(env: str) -> Logger:
    """Create a logger: JSON at info level for "prod", console at debug otherwise."""
    if env == "prod":
        return Logger(level=logging.INFO, json_format=True)
    return Logger(level=logging.DEBUG, json_format=False)