"""
版本检测工具模块
"""
from importlib.metadata import PackageNotFoundError, version

import structlog

logger = structlog.get_logger(__name__)

PACKAGE_NAME = "vrchime"
UNKNOWN_VERSION = "Unknown"


def get_app_version(package: str = PACKAGE_NAME) -> str:
    """
    获取已安装的程序版本

    Returns:
        版本号，未安装（例如直接从源码运行）时返回 "Unknown"
    """
    try:
        return version(package)
    except PackageNotFoundError:
        logger.debug("未找到已安装的包元数据", package=package)
        return UNKNOWN_VERSION
