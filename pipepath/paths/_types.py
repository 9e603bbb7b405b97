"""Construction hints for path values."""

from __future__ import annotations

from enum import Enum


class PathKind(Enum):
    """How a path's absoluteness is decided at construction."""

    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    # Let the host's rooting rules decide.
    RELATIVE_OR_ABSOLUTE = "relative_or_absolute"


__all__ = ["PathKind"]
