"""POSIX adapter: access(2) permission checks and flock(2) lock probing."""

from __future__ import annotations

import errno
import logging
import os

from ._types import FilePermission
from .base import PlatformAdapter

logger = logging.getLogger(__name__)

_LOCK_CONTENTION = frozenset({errno.EWOULDBLOCK, errno.EAGAIN})


def access_mode(permission: FilePermission) -> int:
    """Map requested rights to combined ``os.access`` mode bits."""
    mode = 0
    if permission & FilePermission.READ:
        mode |= os.R_OK
    if permission & FilePermission.WRITE:
        mode |= os.W_OK
    if permission & FilePermission.EXECUTE:
        mode |= os.X_OK
    return mode


class PosixPlatform(PlatformAdapter):
    name = "posix"

    def is_locked(self, path: str) -> bool:
        import fcntl

        with open(path, "rb") as handle:
            try:
                fcntl.flock(handle.fileno(), fcntl.LOCK_SH | fcntl.LOCK_NB)
            except OSError as exc:
                if exc.errno in _LOCK_CONTENTION:
                    logger.debug("lock contention on %s", path)
                    return True
                raise
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
        return False

    def _check_permission(self, path: str, permission: FilePermission) -> bool:
        effective = os.access in os.supports_effective_ids
        return os.access(path, access_mode(permission), effective_ids=effective)


__all__ = ["PosixPlatform", "access_mode"]
