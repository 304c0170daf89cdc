"""
VRChime 程序配置模块
负责程序本身配置文件的加载、保存和管理（UI主题、日志、启动默认值等）
"""
import os
import copy
import toml
import structlog
from typing import Dict, Any, Optional

logger = structlog.get_logger(__name__)


class PConfig:
    """程序配置管理类"""

    CONFIG_FILE = "config/P-config.toml"

    DEFAULT_CONFIG = {
        "theme": {
            "primary": "#BADFFA",
            "success": "#4AF933",
            "warning": "#F2FF5D",
            "error": "#FF6B6B",
            "info": "#6DA0FD",
            "secondary": "#00FFBB",
            "exit": "#7E1DE4",
            "header": "#BADFFA",
            "border": "bright_black",
            "attention": "#FF45F6"
        },
        "logging": {
            "log_rotation_days": 30
        },
        "launch": {
            # legacy: 参数字符串按空白拆分；argv: 整个参数作为一个参数传递
            "argument_mode": "legacy",
            "default_instance_count": 1
        },
        "webui": {
            "backend_port": 7099
        }
    }

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or self.CONFIG_FILE
        self.config: Dict[str, Any] = {}
        self.load()

    def load(self) -> Dict[str, Any]:
        """加载配置文件，如果不存在或损坏则使用默认值"""
        try:
            if not os.path.exists(self.config_file):
                logger.warning("程序配置文件不存在，使用默认配置", file=self.config_file)
                self.config = copy.deepcopy(self.DEFAULT_CONFIG)
                self.save()
                return self.config

            with open(self.config_file, 'r', encoding='utf-8') as f:
                self.config = toml.load(f)
                logger.info("成功加载程序配置文件")

            # 合并新增的默认项
            if self._recursive_update(self.config, self.DEFAULT_CONFIG):
                logger.info("配置结构已更新，正在保存...")
                self.save()

            return self.config

        except (OSError, toml.TomlDecodeError) as e:
            logger.error("加载程序配置文件失败，使用默认配置", error=str(e))
            self.config = copy.deepcopy(self.DEFAULT_CONFIG)
            return self.config

    def save(self) -> bool:
        """保存当前配置到文件"""
        try:
            parent = os.path.dirname(self.config_file)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                toml.dump(self.config, f)
            logger.info("程序配置文件保存成功")
            return True
        except OSError as e:
            logger.error("保存程序配置文件失败", error=str(e))
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值，支持点分隔的嵌套键"""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """设置配置值，支持点分隔的嵌套键"""
        keys = key.split('.')
        d = self.config
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value

    def get_theme_colors(self) -> Dict[str, str]:
        """获取当前主题颜色"""
        return self.get("theme", self.DEFAULT_CONFIG["theme"])

    def reset_to_default(self) -> bool:
        """将配置重置为默认值并保存"""
        logger.info("正在将程序配置重置为默认值")
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        return self.save()

    def _recursive_update(self, target: Dict, source: Dict) -> bool:
        """递归补全缺失的默认项，返回是否有变更"""
        changed = False
        for k, v in source.items():
            if k not in target:
                target[k] = copy.deepcopy(v)
                changed = True
            elif isinstance(v, dict) and isinstance(target[k], dict):
                if self._recursive_update(target[k], v):
                    changed = True
        return changed


# 全局程序配置实例
p_config_manager = PConfig()
