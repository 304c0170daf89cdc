"""
VRChime 配置模块
负责游戏路径的解析（配置文件 → 注册表 → 空默认值）与保存
"""
import json
import os
import tempfile
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import toml
import tomli
import structlog

from .errors import ConfigIOError, DiscoveryError, SerializationError
from ..utils.install_locator import InstallLocator, default_locator, executable_path

logger = structlog.get_logger(__name__)

CONFIG_KEY = "game_path"


def _dump_basic_string(value: str) -> str:
    # JSON 字符串转义是 TOML 基本字符串的子集；DEL 在 TOML 中必须转义
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


class PathEncoder(toml.TomlEncoder):
    """toml 自带的字符串编码会把 \\x 原样写出，导致文件无法再读回"""

    def __init__(self):
        super().__init__()
        self.dump_funcs[str] = _dump_basic_string


def dumps_config(install_path: str) -> str:
    return toml.dumps({CONFIG_KEY: install_path}, encoder=PathEncoder())


def default_config_file() -> str:
    """配置文件的默认位置：系统临时目录下的 VRChime/config.toml"""
    return os.path.join(tempfile.gettempdir(), "VRChime", "config.toml")


@dataclass(frozen=True)
class ResolvedConfig:
    """解析得到的配置，install_path 为空字符串表示未解析到"""

    install_path: str = ""
    source: str = "default"

    def to_text(self) -> str:
        return dumps_config(self.install_path)


class ConfigStore:
    """游戏路径的持久化与解析"""

    def __init__(self, config_file: Optional[str] = None, locator: Optional[InstallLocator] = None):
        self.config_file = config_file or default_config_file()
        self.locator = locator or default_locator()

    def resolve(self) -> ResolvedConfig:
        """
        按顺序尝试各个来源，返回第一个找到的配置

        任何来源出错都只会降级到下一个来源，这个方法本身不会抛出异常。
        """
        for source, lookup in self._lookups():
            found = lookup()
            if found is not None:
                logger.info("已解析游戏路径", source=source, game_path=found.install_path)
                return found

        logger.info("配置文件和注册表均不可用，使用空配置")
        return ResolvedConfig("", source="default")

    def _lookups(self) -> List[Tuple[str, Callable[[], Optional[ResolvedConfig]]]]:
        return [
            ("file", self._from_file),
            ("registry", self._from_registry),
        ]

    def _from_file(self) -> Optional[ResolvedConfig]:
        if not os.path.exists(self.config_file):
            logger.debug("配置文件不存在", file=self.config_file)
            return None
        try:
            return self.read()
        except (ConfigIOError, SerializationError) as e:
            logger.warning("读取配置文件失败，尝试注册表", file=self.config_file, error=str(e))
            return None

    def _from_registry(self) -> Optional[ResolvedConfig]:
        try:
            install_dir = self.locator.find_install_dir()
        except DiscoveryError as e:
            logger.debug("注册表中未找到安装目录", error=str(e))
            return None
        # 注册表结果只返回，不写入配置文件
        return ResolvedConfig(executable_path(install_dir), source="registry")

    def read(self) -> ResolvedConfig:
        """
        读取已保存的配置文件

        Raises:
            ConfigIOError: 文件不存在或无法读取
            SerializationError: 文件内容不是合法的配置
        """
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(f"File error: {e}") from e

        try:
            data = tomli.loads(content)
        except tomli.TOMLDecodeError as e:
            raise SerializationError(f"TOML error: {e}") from e

        game_path = data.get(CONFIG_KEY, "")
        if not isinstance(game_path, str):
            raise SerializationError(f"TOML error: '{CONFIG_KEY}' 必须是字符串")

        return ResolvedConfig(game_path, source="file")

    def persist(self, path: str) -> None:
        """
        保存游戏路径，必要时创建父目录；重复调用会直接覆盖

        Raises:
            ConfigIOError: 目录创建或写入失败
        """
        try:
            parent = os.path.dirname(self.config_file)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                f.write(dumps_config(path))
        except OSError as e:
            logger.error("保存配置文件失败", file=self.config_file, error=str(e))
            raise ConfigIOError(f"File error: {e}") from e

        logger.info("配置文件保存成功", file=self.config_file, game_path=path)
