"""
对外命令
界面层（终端菜单、WebUI 后端）只通过这里的三个操作访问核心逻辑
"""
from typing import Optional

import structlog

from .core.config import ConfigStore
from .core.p_config import p_config_manager
from .modules.launcher import ArgumentMode, InstanceLauncher, LaunchRequest
from .utils.version_detector import get_app_version

logger = structlog.get_logger(__name__)


def create_launcher(store: ConfigStore) -> InstanceLauncher:
    """按程序配置中的参数模式创建启动器"""
    mode = p_config_manager.get("launch.argument_mode", ArgumentMode.LEGACY.value)
    try:
        argument_mode = ArgumentMode(mode)
    except ValueError:
        logger.warning("无效的参数模式配置，使用 legacy", config_value=mode)
        argument_mode = ArgumentMode.LEGACY
    return InstanceLauncher(store, argument_mode=argument_mode)


def get_config(store: Optional[ConfigStore] = None) -> str:
    """获取当前配置（序列化文本）"""
    return (store or config_store).resolve().to_text()


def get_version() -> str:
    """获取程序版本"""
    return get_app_version()


def launch_instances(
    game_path: str,
    vrcw_file: str,
    client_count: int,
    launcher: Optional[InstanceLauncher] = None,
) -> str:
    """
    启动 client_count 个 VRChat 实例

    Returns:
        成功提示信息

    Raises:
        VRChimeError: 校验、保存或启动失败，由调用方负责展示
    """
    request = LaunchRequest(game_path, vrcw_file, client_count)
    outcome = (launcher or instance_launcher).launch(request)
    return outcome.message


# 全局实例
config_store = ConfigStore()
instance_launcher = create_launcher(config_store)
