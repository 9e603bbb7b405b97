"""Windows adapter: DACL permission checks and sharing-violation lock probing.

ACL access goes through pywin32 (``win32security``), imported when a check
runs so that the module stays importable on other hosts.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Tuple

from ._types import FilePermission
from .base import PlatformAdapter

logger = logging.getLogger(__name__)

ERROR_SHARING_VIOLATION = 32
ERROR_LOCK_VIOLATION = 33
_LOCK_ERRORS = frozenset({ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION})

# winnt.h access masks
FILE_READ_DATA = 0x0001
FILE_WRITE_DATA = 0x0002
FILE_APPEND_DATA = 0x0004
FILE_READ_EA = 0x0008
FILE_WRITE_EA = 0x0010
FILE_EXECUTE = 0x0020
FILE_READ_ATTRIBUTES = 0x0080
FILE_WRITE_ATTRIBUTES = 0x0100
READ_CONTROL = 0x00020000
ACCESS_ALLOWED_ACE_TYPE = 0

RIGHTS_READ = FILE_READ_DATA | FILE_READ_EA | FILE_READ_ATTRIBUTES | READ_CONTROL
RIGHTS_WRITE = FILE_WRITE_DATA | FILE_APPEND_DATA | FILE_WRITE_EA | FILE_WRITE_ATTRIBUTES
RIGHTS_EXECUTE = FILE_EXECUTE


def required_rights(permission: FilePermission) -> int:
    """Map requested rights to a Windows file access mask."""
    mask = 0
    if permission & FilePermission.READ:
        mask |= RIGHTS_READ
    if permission & FilePermission.WRITE:
        mask |= RIGHTS_WRITE
    if permission & FilePermission.EXECUTE:
        mask |= RIGHTS_EXECUTE
    return mask


def rules_grant(aces: Iterable[Tuple[int, int, Any]], sid: Any, mask: int) -> bool:
    """True if one allow entry for ``sid`` carries every bit of ``mask``.

    Args:
        aces: ``(ace_type, access_mask, sid)`` triples
        sid: Principal the entries must apply to
        mask: Required access mask
    """
    for ace_type, access_mask, ace_sid in aces:
        if ace_type != ACCESS_ALLOWED_ACE_TYPE or ace_sid != sid:
            continue
        if access_mask & mask == mask:
            return True
    return False


def is_lock_error(exc: OSError) -> bool:
    return getattr(exc, "winerror", None) in _LOCK_ERRORS


class WindowsPlatform(PlatformAdapter):
    name = "windows"

    def is_locked(self, path: str) -> bool:
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            if is_lock_error(exc):
                logger.debug("sharing violation on %s (winerror=%s)", path, exc.winerror)
                return True
            raise
        return False

    def _check_permission(self, path: str, permission: FilePermission) -> bool:
        import win32security

        descriptor = win32security.GetFileSecurity(
            path, win32security.DACL_SECURITY_INFORMATION
        )
        dacl = descriptor.GetSecurityDescriptorDacl()
        # A NULL DACL grants everyone full access.
        if dacl is None:
            return True
        users = win32security.CreateWellKnownSid(win32security.WinBuiltinUsersSid, None)
        return rules_grant(_iter_aces(dacl), users, required_rights(permission))


def _iter_aces(dacl):
    for index in range(dacl.GetAceCount()):
        (ace_type, _flags), access_mask, sid = dacl.GetAce(index)[:3]
        yield ace_type, access_mask, sid


__all__ = [
    "WindowsPlatform",
    "required_rights",
    "rules_grant",
    "is_lock_error",
    "ERROR_SHARING_VIOLATION",
    "ERROR_LOCK_VIOLATION",
]
