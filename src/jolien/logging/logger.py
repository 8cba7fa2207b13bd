# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolien
"""
Structured logging for the ``jolien`` logger namespace.

Loggers are plain :mod:`logging` loggers under ``jolien.*``. Their records
are rendered by :class:`StructuredFormatter`, which appends every field a
call passed through ``extra=`` and every value bound with
:func:`log_context`, either as ``key=value`` pairs or as JSON fields.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import threading
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from jolien.logging.config import LoggingSettings
from jolien.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT_LOGGER_NAME = "jolien"

_log_context: ContextVar[dict[str, Any]] = ContextVar("jolien_log_context", default={})

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

_configure_lock = threading.Lock()
_configured = False


class StructuredFormatter(logging.Formatter):
    """Render records with their structured fields appended.

    Args:
        json_format: Emit one JSON object per record instead of text
        include_timestamp: Add the record time
        include_level: Add the level name
    """

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        parts = ["%(name)s: %(message)s"]
        if include_timestamp:
            parts.insert(0, "%(asctime)s")
        if include_level and not json_format:
            parts.append("[%(levelname)s]")
        super().__init__(fmt=" ".join(parts), datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        fields = self._fields(record)
        if self.json_format:
            return self._render_json(record, fields)

        line = super().format(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={self._format_value(value)}" for key, value in fields.items())
        return f"{line} {pairs}"

    def _fields(self, record: logging.LogRecord) -> dict[str, Any]:
        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        fields.update(_log_context.get())
        return fields

    def _render_json(self, record: logging.LogRecord, fields: dict[str, Any]) -> str:
        payload: dict[str, Any] = {"message": record.getMessage(), "name": record.name}
        payload.update(fields)
        if self.include_level:
            payload["level"] = record.levelname
        if self.include_timestamp:
            payload["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            payload["error"] = str(record.exc_info[1])
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_json_default)

    def _format_value(self, value: Any) -> str:
        """Text rendering of one field value."""
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, str):
            return f'"{value}"' if " " in value else value
        if isinstance(value, type):
            return value.__qualname__
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_value(item) for item in value) + "]"
        if isinstance(value, (datetime.date, uuid.UUID)):
            return str(value) if isinstance(value, uuid.UUID) else value.isoformat()
        try:
            return json.dumps(value)
        except TypeError:
            return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, type):
        return obj.__qualname__
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, datetime.date):
        return obj.isoformat()
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    return str(obj)


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Install a handler on the ``jolien`` namespace root.

    Handlers left by an earlier call are replaced, so this can be called
    again to apply new settings.

    Args:
        settings: Logging settings; read from the environment if None

    Returns:
        The namespace root logger
    """
    global _configured

    settings = settings or LoggingSettings.load()
    root = logging.getLogger(ROOT_LOGGER_NAME)

    handler: logging.Handler
    if settings.console_enabled:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            StructuredFormatter(
                json_format=settings.json_format,
                include_timestamp=settings.include_timestamp,
                include_level=settings.include_level,
            )
        )
    else:
        handler = logging.NullHandler()

    with _configure_lock:
        root.setLevel(LogLevel.from_string(settings.level).to_stdlib_level())
        for old in list(root.handlers):
            root.removeHandler(old)
        root.addHandler(handler)
        _configured = True

    return root


def get_logger(name: str, settings: LoggingSettings | None = None) -> logging.Logger:
    """Return a logger in the ``jolien`` namespace.

    The namespace is configured from the environment on first use; passing
    ``settings`` reconfigures it.
    """
    if settings is not None or not _configured:
        configure_logging(settings)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


@contextlib.contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Bind ``values`` to every record formatted inside the block."""
    token = _log_context.set({**_log_context.get(), **values})
    try:
        yield
    finally:
        _log_context.reset(token)


def current_log_context() -> dict[str, Any]:
    """Copy of the values currently bound by :func:`log_context`."""
    return dict(_log_context.get())
