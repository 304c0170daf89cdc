"""
日志配置模块
使用 structlog 提供结构化日志，支持控制台和JSONL文件输出。
"""
import os
import glob
import logging
import json
from functools import partial
from datetime import datetime, timedelta
import structlog
from rich.logging import RichHandler

from .p_config import p_config_manager

LOG_DIR = "log"

logger = structlog.get_logger(__name__)

_default_console_level = logging.WARNING


def rotate_logs(log_dir: str = LOG_DIR):
    """
    扫描日志目录并删除超过指定保留天数的旧日志文件。
    """
    retention_days = p_config_manager.get("logging.log_rotation_days", 30)
    if not isinstance(retention_days, int) or retention_days <= 0:
        logger.warning(
            "无效的日志保留天数配置，将使用默认值30天",
            config_value=retention_days
        )
        retention_days = 30

    cutoff_date = datetime.now() - timedelta(days=retention_days)

    if not os.path.isdir(log_dir):
        return

    for log_file in glob.glob(os.path.join(log_dir, "*.jsonl")):
        try:
            # 文件名形如 "2025-10-07_14-24-31.jsonl"
            timestamp_str = os.path.basename(log_file).split('.')[0]
            log_date = datetime.strptime(timestamp_str, "%Y-%m-%d_%H-%M-%S")
        except ValueError as e:
            logger.warning("无法解析日志文件名，跳过轮转检查", file=log_file, error=str(e))
            continue

        if log_date < cutoff_date:
            try:
                os.remove(log_file)
                logger.info("已删除旧日志文件", file=log_file)
            except OSError as e:
                logger.error("删除旧日志文件失败", file=log_file, error=str(e))


def setup_logging(level: str = "INFO", log_dir: str = LOG_DIR):
    """
    设置结构化日志，同时输出到控制台和JSONL文件。

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_dir: JSONL 日志目录
    """
    os.makedirs(log_dir, exist_ok=True)

    # 在配置日志系统前执行日志轮转
    rotate_logs(log_dir)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file_path = os.path.join(log_dir, f"{timestamp}.jsonl")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            # ensure_ascii=False 保证中文原样写入
            structlog.processors.JSONRenderer(serializer=partial(json.dumps, ensure_ascii=False)),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = RichHandler(
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        show_path=False
    )
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    console_handler.setLevel(_default_console_level)

    file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter('%(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers = [console_handler, file_handler]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取一个已配置的结构化日志器实例。"""
    return structlog.get_logger(name)
