"""Platform adapter contract for filesystem queries."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from ..errors import PathInputError, require
from ._types import FilePermission


class PlatformAdapter(ABC):
    """One host's implementation of the existence, lock and permission checks.

    Adapters are stateless; a single instance per host is shared.
    """

    name: str = "abstract"

    def file_exists(self, path: str) -> bool:
        """Best-effort existence check that never raises."""
        if not path or not path.strip():
            return False
        try:
            return os.path.isfile(path)
        except (OSError, ValueError):
            return False

    @abstractmethod
    def is_locked(self, path: str) -> bool:
        """Return True on lock contention; propagate every other OSError."""

    def has_permission(self, path: str, permission: FilePermission) -> bool:
        require(permission, "permission")
        if not isinstance(permission, FilePermission):
            raise PathInputError(f"permission must be a FilePermission, got {permission!r}")
        if not permission:
            raise PathInputError("at least one permission must be requested")
        return self._check_permission(path, permission)

    @abstractmethod
    def _check_permission(self, path: str, permission: FilePermission) -> bool:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["PlatformAdapter"]
