from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from vrchime import commands
from vrchime.core.config import ConfigStore
from vrchime.core.errors import (
    ConfigIOError,
    InvalidInputError,
    LaunchFailedError,
    PathNotFoundError,
)
from vrchime.modules.launcher import InstanceLauncher

router = APIRouter()


class LaunchPayload(BaseModel):
    game_path: str = ""
    vrcw_file: str = ""
    client_count: int = Field(1, ge=0)


def get_config_store() -> ConfigStore:
    return commands.config_store


def get_instance_launcher() -> InstanceLauncher:
    return commands.instance_launcher


@router.get("/config", summary="获取当前配置")
def get_config(store: ConfigStore = Depends(get_config_store)):
    """返回解析到的游戏路径及其来源。"""
    resolved = store.resolve()
    return {
        "config": resolved.to_text(),
        "game_path": resolved.install_path,
        "source": resolved.source,
    }


@router.get("/version", summary="获取程序版本")
def get_version():
    return {"version": commands.get_version()}


@router.post("/launch", summary="启动 VRChat 实例")
def launch_instances(payload: LaunchPayload, launcher: InstanceLauncher = Depends(get_instance_launcher)):
    """
    按顺序启动 client_count 个实例。
    某个实例失败时，detail 中的 launched 为已经启动的实例数。
    """
    try:
        message = commands.launch_instances(
            payload.game_path, payload.vrcw_file, payload.client_count, launcher=launcher
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PathNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConfigIOError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except LaunchFailedError as e:
        raise HTTPException(
            status_code=500,
            detail={"message": str(e), "index": e.index, "launched": e.launched, "reason": e.reason},
        )

    return {"status": "success", "message": message, "launched": payload.client_count}
