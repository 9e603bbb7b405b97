"""Windows adapter logic, exercised on any host.

ACL reads go through a stand-in ``win32security`` module installed per test.
"""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest

from pipepath import FilePermission
from pipepath.platform import windows
from pipepath.platform.windows import (
    RIGHTS_EXECUTE,
    RIGHTS_READ,
    RIGHTS_WRITE,
    WindowsPlatform,
    is_lock_error,
    required_rights,
    rules_grant,
)

USERS = "S-1-5-32-545"
ADMINS = "S-1-5-32-544"
ALLOW = 0
DENY = 1


def _os_error(winerror):
    exc = OSError(13, "simulated failure")
    exc.winerror = winerror
    return exc


class TestRequiredRights:
    def test_single_flags(self):
        assert required_rights(FilePermission.READ) == RIGHTS_READ
        assert required_rights(FilePermission.WRITE) == RIGHTS_WRITE
        assert required_rights(FilePermission.EXECUTE) == RIGHTS_EXECUTE

    def test_combined(self):
        requested = FilePermission.READ | FilePermission.EXECUTE
        assert required_rights(requested) == RIGHTS_READ | RIGHTS_EXECUTE


class TestRulesGrant:
    """An allow entry for Users must carry every requested right by itself."""

    def test_matching_allow_entry(self):
        aces = [(ALLOW, RIGHTS_READ | RIGHTS_EXECUTE, USERS)]
        assert rules_grant(aces, USERS, RIGHTS_READ)

    def test_partial_rights_denied(self):
        aces = [(ALLOW, RIGHTS_READ, USERS)]
        assert not rules_grant(aces, USERS, RIGHTS_READ | RIGHTS_WRITE)

    def test_rights_are_not_combined_across_entries(self):
        aces = [(ALLOW, RIGHTS_READ, USERS), (ALLOW, RIGHTS_WRITE, USERS)]
        assert not rules_grant(aces, USERS, RIGHTS_READ | RIGHTS_WRITE)

    def test_other_principals_ignored(self):
        aces = [(ALLOW, RIGHTS_READ | RIGHTS_WRITE, ADMINS)]
        assert not rules_grant(aces, USERS, RIGHTS_READ)

    def test_deny_entries_ignored(self):
        aces = [(DENY, RIGHTS_READ, USERS)]
        assert not rules_grant(aces, USERS, RIGHTS_READ)

    def test_empty_acl(self):
        assert not rules_grant([], USERS, RIGHTS_READ)


class _FakeDacl:
    def __init__(self, aces):
        self._aces = aces

    def GetAceCount(self):
        return len(self._aces)

    def GetAce(self, index):
        ace_type, mask, sid = self._aces[index]
        return ((ace_type, 0), mask, sid)


@pytest.fixture()
def fake_security(monkeypatch):
    """Install a minimal ``win32security`` whose DACL the test controls."""
    state = {"aces": [], "paths": []}

    class _Descriptor:
        def GetSecurityDescriptorDacl(self):
            if state["aces"] is None:
                return None
            return _FakeDacl(state["aces"])

    def get_file_security(path, info):
        state["paths"].append((path, info))
        return _Descriptor()

    module = types.ModuleType("win32security")
    module.DACL_SECURITY_INFORMATION = 4
    module.WinBuiltinUsersSid = 27
    module.GetFileSecurity = get_file_security
    module.CreateWellKnownSid = lambda kind, domain=None: USERS
    monkeypatch.setitem(sys.modules, "win32security", module)
    return state


class TestHasPermission:
    def test_reads_dacl_for_path(self, fake_security):
        fake_security["aces"] = [(ALLOW, RIGHTS_READ, USERS)]
        assert WindowsPlatform().has_permission("C:/site/a.txt", FilePermission.READ)
        assert fake_security["paths"] == [("C:/site/a.txt", 4)]

    def test_missing_right(self, fake_security):
        fake_security["aces"] = [(ALLOW, RIGHTS_READ, USERS)]
        assert not WindowsPlatform().has_permission("a.txt", FilePermission.WRITE)

    def test_all_rights_from_one_entry(self, fake_security):
        fake_security["aces"] = [(ALLOW, RIGHTS_READ | RIGHTS_WRITE | RIGHTS_EXECUTE, USERS)]
        requested = FilePermission.READ | FilePermission.WRITE | FilePermission.EXECUTE
        assert WindowsPlatform().has_permission("a.txt", requested)

    def test_null_dacl_grants_everything(self, fake_security):
        fake_security["aces"] = None
        assert WindowsPlatform().has_permission("a.txt", FilePermission.WRITE)

    def test_empty_dacl_grants_nothing(self, fake_security):
        fake_security["aces"] = []
        assert not WindowsPlatform().has_permission("a.txt", FilePermission.READ)


class TestIsLocked:
    @pytest.mark.parametrize("code", [32, 33])
    def test_lock_codes(self, monkeypatch, code):
        def fake_open(*args, **kwargs):
            raise _os_error(code)

        monkeypatch.setattr(windows, "open", fake_open, raising=False)
        assert WindowsPlatform().is_locked("C:/a.txt") is True

    def test_other_errors_propagate(self, monkeypatch):
        def fake_open(*args, **kwargs):
            raise _os_error(2)

        monkeypatch.setattr(windows, "open", fake_open, raising=False)
        with pytest.raises(OSError):
            WindowsPlatform().is_locked("C:/a.txt")

    def test_readable_file_is_not_locked(self, tmp_path: Path):
        target = tmp_path / "free.txt"
        target.write_text("x")
        assert WindowsPlatform().is_locked(str(target)) is False

    def test_is_lock_error(self):
        assert is_lock_error(_os_error(32))
        assert is_lock_error(_os_error(33))
        assert not is_lock_error(_os_error(5))
        assert not is_lock_error(FileNotFoundError(2, "missing"))
