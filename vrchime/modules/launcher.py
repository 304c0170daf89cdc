"""
VRChat 多开启动模块
负责校验启动请求、保存游戏路径，并按顺序启动指定数量的 VRChat 实例。
启动后不跟踪进程。
"""
import os
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import structlog

from ..core.config import ConfigStore
from ..core.errors import InvalidInputError, LaunchFailedError, PathNotFoundError

logger = structlog.get_logger(__name__)

URL_ARGUMENT_TEMPLATE = "--url=create?hidden=true&name=BuildAndRun&url=file:///{payload}"


class ArgumentMode(str, Enum):
    """启动参数的传递方式"""

    # 参数字符串按空白拆分，包含空格的世界文件路径会被拆成多个参数
    LEGACY = "legacy"
    # 整个参数字符串作为单个参数传递
    ARGV = "argv"


def build_url_argument(payload_file: str) -> str:
    return URL_ARGUMENT_TEMPLATE.format(payload=payload_file)


def build_launch_args(payload_file: str, mode: ArgumentMode = ArgumentMode.LEGACY) -> List[str]:
    """
    构造单个实例的启动参数

    Args:
        payload_file: 世界文件（.vrcw）路径，原样嵌入
        mode: 参数传递方式

    Returns:
        传给进程的参数列表（不含可执行文件本身）
    """
    argument = build_url_argument(payload_file)
    if ArgumentMode(mode) is ArgumentMode.ARGV:
        return [argument]
    return argument.split()


@dataclass
class LaunchRequest:
    install_path: str
    payload_file: str
    instance_count: int = 1


@dataclass
class LaunchOutcome:
    launched: int
    pids: List[int] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Successfully launched {self.launched} VRChat instance(s)!"


class ProcessSpawner:
    """
    以独立进程启动程序，不连接管道，也不等待退出

    Popen 句柄保存在 processes 中，避免句柄在子进程运行时被回收
    （会触发 ResourceWarning）；这里不会对它们做任何管理。
    """

    def __init__(self):
        self.processes: List[subprocess.Popen] = []

    def spawn(self, executable: str, args: List[str]) -> int:
        process = subprocess.Popen([executable] + list(args))
        self.processes.append(process)
        return process.pid


class InstanceLauncher:
    """VRChat 实例启动器"""

    def __init__(
        self,
        store: ConfigStore,
        spawner: Optional[ProcessSpawner] = None,
        argument_mode: ArgumentMode = ArgumentMode.LEGACY,
    ):
        self.store = store
        self.spawner = spawner or ProcessSpawner()
        self.argument_mode = ArgumentMode(argument_mode)

    def validate(self, request: LaunchRequest) -> None:
        """
        校验启动请求，空值检查在任何文件系统访问之前完成

        Raises:
            InvalidInputError: 路径为空或实例数量为负
            PathNotFoundError: 游戏路径不存在
        """
        if not request.install_path or not request.payload_file:
            raise InvalidInputError("Error: Game path or file path is empty.")
        if request.instance_count < 0:
            raise InvalidInputError(f"Error: Invalid instance count {request.instance_count}")
        if not os.path.exists(request.install_path):
            raise PathNotFoundError(request.install_path)

    def launch(self, request: LaunchRequest) -> LaunchOutcome:
        """
        启动 request.instance_count 个实例

        先保存游戏路径，保存失败时一个实例都不启动。实例按顺序逐个启动，
        第 i 个失败时立即中止并抛出 LaunchFailedError(i)，之前已启动的实例继续运行。

        Returns:
            启动结果

        Raises:
            InvalidInputError, PathNotFoundError: 请求无效
            ConfigIOError: 游戏路径保存失败
            LaunchFailedError: 某个实例启动失败
        """
        self.validate(request)
        self.store.persist(request.install_path)

        pids: List[int] = []
        for i in range(request.instance_count):
            args = build_launch_args(request.payload_file, self.argument_mode)
            try:
                pid = self.spawner.spawn(request.install_path, args)
            except (OSError, ValueError) as e:
                logger.error(
                    "实例启动失败",
                    index=i + 1,
                    launched=len(pids),
                    game_path=request.install_path,
                    error=str(e),
                )
                raise LaunchFailedError(i + 1, str(e)) from e

            pids.append(pid)
            logger.info("实例已启动", index=i + 1, pid=pid, args=args)

        logger.info("全部实例启动完成", count=request.instance_count)
        return LaunchOutcome(launched=request.instance_count, pids=pids)
