from __future__ import annotations

import pytest

import pipepath.platform as platform_module
from pipepath.config import Settings
from pipepath.platform import PosixPlatform, WindowsPlatform, get_platform


@pytest.mark.parametrize("system", ["win32", "windows"])
def test_windows_family(system):
    assert isinstance(get_platform(system), WindowsPlatform)


@pytest.mark.parametrize("system", ["linux", "darwin", "freebsd13", "cygwin", "posix"])
def test_posix_family(system):
    assert isinstance(get_platform(system), PosixPlatform)


def test_adapter_shared_per_family():
    assert get_platform("linux") is get_platform("darwin")


def test_setting_overrides_detection(monkeypatch):
    monkeypatch.setattr(platform_module, "settings", Settings(platform="windows"))
    assert isinstance(get_platform(), WindowsPlatform)
    monkeypatch.setattr(platform_module, "settings", Settings(platform="posix"))
    assert isinstance(get_platform(), PosixPlatform)
