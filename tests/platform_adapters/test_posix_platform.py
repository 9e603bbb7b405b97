"""POSIX lock and permission checks against real files."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from pipepath import FilePath, FilePermission, MissingArgumentError, PathInputError
from pipepath.platform import PosixPlatform
from pipepath.platform.posix import access_mode

pytestmark = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="POSIX adapter tests"
)

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    target = tmp_path / "data.bin"
    target.write_bytes(b"payload")
    target.chmod(0o644)
    return target


class TestAccessMode:
    def test_single_flags(self):
        assert access_mode(FilePermission.READ) == os.R_OK
        assert access_mode(FilePermission.WRITE) == os.W_OK
        assert access_mode(FilePermission.EXECUTE) == os.X_OK

    def test_combined_flags(self):
        requested = FilePermission.READ | FilePermission.WRITE | FilePermission.EXECUTE
        assert access_mode(requested) == os.R_OK | os.W_OK | os.X_OK


class TestIsLocked:
    def test_unlocked_file(self, data_file: Path):
        assert FilePath(str(data_file)).is_locked() is False

    def test_exclusive_lock_is_detected(self, data_file: Path):
        import fcntl

        with open(data_file, "rb") as holder:
            fcntl.flock(holder.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            assert PosixPlatform().is_locked(str(data_file)) is True
        assert PosixPlatform().is_locked(str(data_file)) is False

    def test_shared_lock_is_not_contention(self, data_file: Path):
        import fcntl

        with open(data_file, "rb") as holder:
            fcntl.flock(holder.fileno(), fcntl.LOCK_SH | fcntl.LOCK_NB)
            assert PosixPlatform().is_locked(str(data_file)) is False

    def test_missing_file_propagates(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            FilePath(str(tmp_path / "missing.bin")).is_locked()

    def test_lock_detection_is_logged(self, data_file: Path, caplog):
        import fcntl
        import logging

        caplog.set_level(logging.DEBUG, logger="pipepath")
        with open(data_file, "rb") as holder:
            fcntl.flock(holder.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            PosixPlatform().is_locked(str(data_file))
        assert any("lock contention" in record.getMessage() for record in caplog.records)


class TestHasPermission:
    def test_owner_can_read_and_write(self, data_file: Path):
        path = FilePath(str(data_file))
        assert path.has_permission(FilePermission.READ)
        assert path.has_permission(FilePermission.READ | FilePermission.WRITE)

    def test_execute_requires_execute_bit(self, data_file: Path):
        path = FilePath(str(data_file))
        assert not path.has_permission(FilePermission.EXECUTE)
        data_file.chmod(0o755)
        assert path.has_permission(FilePermission.EXECUTE)

    def test_all_requested_rights_must_be_granted(self, data_file: Path):
        path = FilePath(str(data_file))
        assert not path.has_permission(FilePermission.READ | FilePermission.EXECUTE)

    @pytest.mark.skipif(running_as_root, reason="root bypasses read/write bits")
    def test_no_bits_denies_read(self, data_file: Path):
        data_file.chmod(0o000)
        try:
            assert not FilePath(str(data_file)).has_permission(FilePermission.READ)
        finally:
            data_file.chmod(0o644)

    def test_missing_file_is_not_permitted(self, tmp_path: Path):
        assert not FilePath(str(tmp_path / "missing.bin")).has_permission(FilePermission.READ)

    def test_empty_request_rejected(self, data_file: Path):
        with pytest.raises(PathInputError):
            FilePath(str(data_file)).has_permission(FilePermission(0))

    def test_none_rejected(self, data_file: Path):
        with pytest.raises(MissingArgumentError):
            FilePath(str(data_file)).has_permission(None)

    def test_non_flag_rejected(self, data_file: Path):
        with pytest.raises(PathInputError):
            FilePath(str(data_file)).has_permission(4)
