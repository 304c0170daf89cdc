"""
安装位置探测测试
用假的 winreg 模块模拟注册表
"""
import os
import sys
import types

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from vrchime.core.errors import DiscoveryError
from vrchime.utils import install_locator
from vrchime.utils.install_locator import (
    NullInstallLocator,
    RegistryInstallLocator,
    default_locator,
    executable_path,
)


class FakeKey:
    def __init__(self, values):
        self.values = values

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def fake_winreg(keys):
    module = types.ModuleType("winreg")
    module.HKEY_CURRENT_USER = "HKCU"

    def open_key(hive, subkey):
        if (hive, subkey) not in keys:
            raise FileNotFoundError(subkey)
        return FakeKey(keys[(hive, subkey)])

    def query_value_ex(key, name):
        if name not in key.values:
            raise FileNotFoundError(name)
        return key.values[name], 1

    module.OpenKey = open_key
    module.QueryValueEx = query_value_ex
    return module


def test_executable_path_uses_windows_separator():
    assert executable_path(r"C:\Program Files\VRChat") == r"C:\Program Files\VRChat\VRChat.exe"
    assert executable_path("D:/Games/VRChat") == r"D:\Games\VRChat\VRChat.exe"


def test_null_locator_always_misses():
    with pytest.raises(DiscoveryError):
        NullInstallLocator().find_install_dir()


def test_registry_locator_reads_default_value(monkeypatch):
    keys = {("HKCU", r"Software\VRChat"): {"": r"C:\Steam\steamapps\common\VRChat"}}
    monkeypatch.setitem(sys.modules, "winreg", fake_winreg(keys))

    assert RegistryInstallLocator().find_install_dir() == r"C:\Steam\steamapps\common\VRChat"


def test_registry_locator_missing_key(monkeypatch):
    monkeypatch.setitem(sys.modules, "winreg", fake_winreg({}))

    with pytest.raises(DiscoveryError, match="open registry key"):
        RegistryInstallLocator().find_install_dir()


@pytest.mark.parametrize("values", [{}, {"": ""}, {"": 5}])
def test_registry_locator_missing_value(monkeypatch, values):
    keys = {("HKCU", r"Software\VRChat"): values}
    monkeypatch.setitem(sys.modules, "winreg", fake_winreg(keys))

    with pytest.raises(DiscoveryError, match="read registry value"):
        RegistryInstallLocator().find_install_dir()


def test_default_locator_by_platform(monkeypatch):
    monkeypatch.setattr(install_locator.sys, "platform", "win32")
    assert isinstance(default_locator(), RegistryInstallLocator)

    monkeypatch.setattr(install_locator.sys, "platform", "linux")
    assert isinstance(default_locator(), NullInstallLocator)
