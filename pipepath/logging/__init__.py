"""Structured logging for pipepath."""

from .redaction import PathRedactor
from .structured import ROOT_LOGGER, RedactingFormatter, StructuredFormatter, configure_logging

__all__ = [
    "PathRedactor",
    "StructuredFormatter",
    "RedactingFormatter",
    "configure_logging",
    "ROOT_LOGGER",
]
