"""
进程信息工具
只读地统计当前运行中的 VRChat 进程数量，用于界面显示
"""
import os

import psutil
import structlog

from .install_locator import EXECUTABLE_NAME

logger = structlog.get_logger(__name__)


def count_running_instances(executable_name: str = EXECUTABLE_NAME) -> int:
    """统计进程名与 executable_name 相同（不区分大小写）的进程数"""
    target = os.path.basename(executable_name).lower()
    count = 0
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name") or ""
        if name.lower() == target:
            count += 1
    logger.debug("统计运行中的实例", name=target, count=count)
    return count
