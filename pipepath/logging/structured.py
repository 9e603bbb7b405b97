"""Structured log formatting for pipepath loggers."""

from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Dict, Optional, TextIO

from ..config import Settings, settings as default_settings
from .redaction import PathRedactor

ROOT_LOGGER = "pipepath"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Render records as single-line JSON entries."""

    def __init__(self, redactor: Optional[PathRedactor] = None) -> None:
        super().__init__()
        self.redactor = redactor

    def _context(self, record: logging.LogRecord) -> Dict[str, Any]:
        context = {k: v for k, v in vars(record).items() if k not in _RESERVED_ATTRS}
        if self.redactor is not None:
            context = self.redactor.redact_dict(context)
        return context

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if self.redactor is not None:
            message = self.redactor.redact_string(message)

        entry = {
            "timestamp": record.created,
            "iso_timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z",
            "level": record.levelname.lower(),
            "component": record.name,
            "message": message,
            **self._context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, separators=(",", ":"))


class RedactingFormatter(logging.Formatter):
    """Plain-text formatter that applies :class:`PathRedactor` to the output."""

    def __init__(self, redactor: PathRedactor) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")
        self.redactor = redactor

    def format(self, record: logging.LogRecord) -> str:
        return self.redactor.redact_string(super().format(record))


def configure_logging(
    config: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a stream handler to the ``pipepath`` logger.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced rather than duplicated.

    Args:
        config: Settings to honour (defaults to the module-level settings)
        stream: Output stream (defaults to stderr)

    Returns:
        The configured ``pipepath`` logger
    """
    config = config or default_settings
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_pipepath_handler", False):
            logger.removeHandler(handler)

    redactor = PathRedactor() if config.log_redact else None
    handler = logging.StreamHandler(stream or sys.stderr)
    if config.log_json:
        handler.setFormatter(StructuredFormatter(redactor))
    elif redactor is not None:
        handler.setFormatter(RedactingFormatter(redactor))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._pipepath_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(config.log_level)
    return logger


__all__ = ["StructuredFormatter", "RedactingFormatter", "configure_logging", "ROOT_LOGGER"]
