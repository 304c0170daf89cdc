"""
安装位置探测模块
通过平台机制（Windows 注册表）查找 VRChat 的安装目录
"""
import sys
from pathlib import PureWindowsPath

import structlog

from ..core.errors import DiscoveryError

logger = structlog.get_logger(__name__)

EXECUTABLE_NAME = "VRChat.exe"
REGISTRY_SUBKEY = r"Software\VRChat"


def executable_path(install_dir: str) -> str:
    """在安装目录后拼接可执行文件名（使用 Windows 路径分隔符）"""
    return str(PureWindowsPath(install_dir) / EXECUTABLE_NAME)


class InstallLocator:
    """安装目录探测接口"""

    def find_install_dir(self) -> str:
        """
        查找安装目录

        Returns:
            安装目录路径

        Raises:
            DiscoveryError: 未找到安装目录
        """
        raise NotImplementedError


class NullInstallLocator(InstallLocator):
    """不支持注册表的平台使用，永远找不到"""

    def find_install_dir(self) -> str:
        raise DiscoveryError(f"当前平台不支持注册表探测: {sys.platform}")


class RegistryInstallLocator(InstallLocator):
    """从 HKEY_CURRENT_USER\\Software\\VRChat 的默认值读取安装目录"""

    def __init__(self, subkey: str = REGISTRY_SUBKEY):
        self.subkey = subkey

    def find_install_dir(self) -> str:
        import winreg

        try:
            key = winreg.OpenKey(winreg.HKEY_CURRENT_USER, self.subkey)
        except OSError as e:
            raise DiscoveryError("Failed to open registry key") from e

        with key:
            try:
                # 空字符串表示键的默认值
                value, _ = winreg.QueryValueEx(key, "")
            except OSError as e:
                raise DiscoveryError("Failed to read registry value") from e

        if not isinstance(value, str) or not value:
            raise DiscoveryError("Failed to read registry value")

        logger.debug("从注册表读取到安装目录", subkey=self.subkey, install_dir=value)
        return value


def default_locator() -> InstallLocator:
    """根据当前平台选择探测实现"""
    if sys.platform.startswith("win"):
        return RegistryInstallLocator()
    return NullInstallLocator()
