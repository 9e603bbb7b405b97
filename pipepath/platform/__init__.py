"""Host platform adapters for filesystem queries.

``get_platform()`` picks the adapter for the running host once; callers never
branch on the platform themselves. The ``PP_PLATFORM`` setting overrides the
detection.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import Optional

from ..config import settings
from ._types import FilePermission
from .base import PlatformAdapter
from .posix import PosixPlatform
from .windows import WindowsPlatform

logger = logging.getLogger(__name__)


def _platform_family(system: str) -> str:
    if system in ("windows", "posix"):
        return system
    return "windows" if system.startswith("win") else "posix"


@lru_cache(maxsize=None)
def _adapter_for(family: str) -> PlatformAdapter:
    adapter: PlatformAdapter = WindowsPlatform() if family == "windows" else PosixPlatform()
    logger.debug("selected %s platform adapter", adapter.name)
    return adapter


def get_platform(system: Optional[str] = None) -> PlatformAdapter:
    """Return the adapter for ``system`` (``sys.platform`` style name).

    Without an argument the ``PP_PLATFORM`` setting decides, falling back to
    ``sys.platform`` when it is ``auto``.
    """
    if system is None:
        system = sys.platform if settings.platform == "auto" else settings.platform
    return _adapter_for(_platform_family(system))


__all__ = [
    "FilePermission",
    "PlatformAdapter",
    "PosixPlatform",
    "WindowsPlatform",
    "get_platform",
]
