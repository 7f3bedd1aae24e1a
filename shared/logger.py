"""
PassForge Structured Logger
============================

:class:`ForgeLogger` sends Rich-formatted records to stderr and, when a
log file is configured, plain or JSON-lines records to a rotating file.

Generated secrets must never reach a log record. Callers log lengths,
strategy names and counts; any structured field named like a secret
(``password``, ``passphrase``, ``keywords``, ``salt``) is replaced with
``"<redacted>"`` before the record is emitted.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

REDACTED = "<redacted>"
SECRET_FIELDS = frozenset({"password", "passphrase", "keywords", "salt"})

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, scope, fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "component": getattr(record, "component", None),
        }
        operation = getattr(record, "operation", None)
        if operation is not None:
            entry["operation"] = operation
        fields = getattr(record, "fields", None)
        if fields:
            entry["fields"] = fields
        return json.dumps(entry, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(path: Path, level: int, json_lines: bool) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path), maxBytes=5_242_880, backupCount=3, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONLineFormatter() if json_lines
        else logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )
    return handler


def redact(fields: dict[str, Any]) -> dict[str, Any]:
    """Copy of *fields* with every secret-named value masked."""
    return {
        key: REDACTED if key.lower() in SECRET_FIELDS else value
        for key, value in fields.items()
    }


class ForgeLogger:
    """Logger for one PassForge component (``passforge.<component>``).

    Usage::

        log = ForgeLogger("engine", log_file="passforge.log", json_logs=True)
        with log.operation("generate"):
            log.info("Generated password", length=16, strategy="random")

    Keyword arguments to :meth:`info` and :meth:`debug` become structured
    fields on the record; they are redacted by name, never by value.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = getattr(logging, log_level.upper(), logging.WARNING)
        self._logger = logging.getLogger(f"passforge.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_stderr_handler(level))
        if log_file is not None:
            self._logger.addHandler(_file_handler(Path(log_file), level, json_logs))
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def from_config(cls, component: str, settings: Any, *, quiet: bool = False) -> ForgeLogger:
        """Build a logger from a :class:`shared.config.GlobalConfig`."""
        return cls(
            component,
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
            console_output=not quiet,
        )

    @property
    def underlying(self) -> logging.Logger:
        return self._logger

    @contextmanager
    def operation(self, name: str) -> Iterator[ForgeLogger]:
        """Tag records emitted inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and again with the elapsed seconds."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.debug("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._emit(logging.DEBUG, msg, args, fields)

    def info(self, msg: str, *args: Any, **fields: Any) -> None:
        self._emit(logging.INFO, msg, args, fields)

    def _emit(self, level: int, msg: str, args: tuple[Any, ...], fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level,
            msg,
            *args,
            extra={
                "component": self._component,
                "operation": self._operation,
                "fields": redact(fields),
            },
        )
