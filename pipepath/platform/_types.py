"""Access rights understood by the platform adapters."""

from __future__ import annotations

from enum import Flag


class FilePermission(Flag):
    """Access rights that can be requested from ``FilePath.has_permission``.

    Members combine with ``|``; every requested right must be granted.
    """

    READ = 1
    WRITE = 2
    EXECUTE = 4


__all__ = ["FilePermission"]
