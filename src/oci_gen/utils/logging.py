"""Logging setup for oci-gen.

Module loggers live under the ``oci_gen`` logger. Context such as the file
being loaded or the capability being checked travels on the record through
:class:`ContextAdapter`, and :class:`StructuredFormatter` renders it as
``key=value`` pairs after the message.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from oci_gen.utils.errors import ValidationError

ROOT_LOGGER = "oci_gen"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PLAIN_FORMAT = "%(levelname)s: %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _render_value(value: Any) -> str:
    text = str(value)
    if not text or any(c.isspace() or c in '"=' for c in text):
        escaped = text.replace('"', '\\"')
        return f'"{escaped}"'
    return text


class StructuredFormatter(logging.Formatter):
    """Formatter that appends a record's context as key=value pairs.

    Values holding whitespace, quotes or ``=`` are double-quoted so that
    each line still splits cleanly into fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        pairs = " ".join(f"{key}={_render_value(value)}" for key, value in context.items())
        return f"{message} {pairs}"


def parse_level(level: str | int) -> int:
    """Resolve a level name such as "debug" or "WARN" to its numeric value.

    Raises:
        ValidationError: If the name is not a logging level
    """
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in LEVELS:
        raise ValidationError(
            f"Unknown log level {level!r}, expected one of {', '.join(LEVELS)}",
            field="logging.level",
        )
    return getattr(logging, name)


def configure_logging(
    level: str | int = "INFO",
    format_string: str | None = None,
    structured: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route oci-gen log records to a single stream handler.

    Args:
        level: Level name, case-insensitive, or a logging constant
        format_string: Custom format string
        structured: Append context fields to every line
        stream: Destination stream, stderr by default

    Returns:
        The package logger

    Raises:
        ValidationError: If level is not a logging level
    """
    numeric_level = parse_level(level)
    if format_string is None:
        format_string = STRUCTURED_FORMAT if structured else PLAIN_FORMAT

    formatter_class = StructuredFormatter if structured else logging.Formatter
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter_class(format_string))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers = [handler]
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for an oci-gen module, e.g. "seccomp" -> oci_gen.seccomp."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches its context fields to every record.

    Fields passed per call as ``extra={"context": {...}}`` are merged over
    the adapter's own.
    """

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        context = dict(self.extra or {})
        context.update(extra.get("context") or {})
        extra["context"] = context
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context: Any) -> ContextAdapter:
        """Return an adapter carrying these fields on top of the current ones."""
        return ContextAdapter(self.logger, {**(self.extra or {}), **context})


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a module logger that tags its records with context fields.

    Args:
        name: Module name, as for get_logger
        **context: Fields rendered after each message by StructuredFormatter
    """
    return ContextAdapter(get_logger(name), context)
