import sys

import uvicorn

from vrchime.core.logging import setup_logging, get_logger
from vrchime.core.p_config import p_config_manager

logger = get_logger(__name__)

DEFAULT_BACKEND_PORT = 7099


def get_port_from_config() -> int:
    """从 P-config.toml 读取后端端口"""
    port = p_config_manager.get("webui.backend_port", DEFAULT_BACKEND_PORT)
    if not isinstance(port, int) or not 0 < port < 65536:
        logger.warning("无效的后端端口配置，将使用默认端口", config_value=port)
        return DEFAULT_BACKEND_PORT
    return port


def main():
    setup_logging()
    port = int(sys.argv[1]) if len(sys.argv) > 1 else get_port_from_config()
    logger.info("启动 WebUI 后端", port=port)
    print(f"后端服务 (FastAPI) 正在 http://127.0.0.1:{port} 启动...")
    uvicorn.run("webui.backend.main:app", host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
