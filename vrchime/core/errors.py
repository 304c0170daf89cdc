"""
VRChime 错误类型
配置读写、安装位置探测与实例启动共用的异常层级
"""
from __future__ import annotations


class VRChimeError(Exception):
    """VRChime 所有错误的基类。"""

    pass


class ConfigIOError(VRChimeError):
    """配置文件读取、写入或目录创建失败。"""

    pass


class SerializationError(VRChimeError):
    """配置文件内容无法解析。"""

    pass


class DiscoveryError(VRChimeError):
    """平台探测未找到安装位置（注册表键或值缺失）。"""

    pass


class InvalidInputError(VRChimeError):
    """启动请求缺少必填字段。"""

    pass


class PathNotFoundError(VRChimeError):
    """游戏路径在文件系统中不存在。"""

    def __init__(self, path: str):
        super().__init__(f"Error: VRChat.exe not found at {path}")
        self.path = path


class LaunchFailedError(VRChimeError):
    """
    第 index 个实例（从 1 开始）启动失败。

    启动是严格顺序进行的，所以失败前已经启动了 index - 1 个实例，
    这些实例不会被回滚。
    """

    def __init__(self, index: int, reason: str = ""):
        super().__init__(f"Error: Failed to launch VRChat instance {index}")
        self.index = index
        self.reason = reason

    @property
    def launched(self) -> int:
        return self.index - 1
