"""Exceptions raised by pipepath."""

from __future__ import annotations


class PathInputError(ValueError):
    """Raised when path input is malformed or an argument is out of range."""


class MissingArgumentError(PathInputError):
    """Raised when a required argument is ``None``.

    Empty or whitespace-only strings are accepted by the operations that raise
    this; only an absent value is rejected.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.argument = name


def require(value, name: str):
    """Return ``value`` or raise :class:`MissingArgumentError` when it is None."""
    if value is None:
        raise MissingArgumentError(name)
    return value


__all__ = ["PathInputError", "MissingArgumentError", "require"]
