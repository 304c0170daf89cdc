"""
WebUI 后端接口测试
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest
from fastapi.testclient import TestClient

from vrchime import commands
from vrchime.core.config import ConfigStore
from vrchime.modules.launcher import InstanceLauncher, ProcessSpawner
from vrchime.utils.install_locator import InstallLocator, NullInstallLocator
from webui.backend.api import launch as launch_api
from webui.backend.main import app


class FixedLocator(InstallLocator):
    def find_install_dir(self) -> str:
        return r"C:\Games\VRChat"


class FakeSpawner(ProcessSpawner):
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.calls = 0

    def spawn(self, executable, args):
        self.calls += 1
        if self.calls == self.fail_on:
            raise OSError("too many processes")
        return self.calls


@pytest.fixture
def store(tmp_path):
    return ConfigStore(str(tmp_path / "VRChime" / "config.toml"), FixedLocator())


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use(store, spawner):
    launcher = InstanceLauncher(store, spawner)
    app.dependency_overrides[launch_api.get_config_store] = lambda: store
    app.dependency_overrides[launch_api.get_instance_launcher] = lambda: launcher
    return launcher


@pytest.fixture
def game_exe(tmp_path):
    exe = tmp_path / "VRChat.exe"
    exe.write_bytes(b"")
    return str(exe)


def test_root(client):
    assert client.get("/api").status_code == 200


def test_get_config_from_registry(client, store):
    use(store, FakeSpawner())

    data = client.get("/api/config").json()
    assert data["game_path"] == "C:\\Games\\VRChat\\VRChat.exe"
    assert data["source"] == "registry"
    assert data["config"].startswith("game_path = ")


def test_get_version(client):
    data = client.get("/api/version").json()
    assert data["version"] == commands.get_version()
    assert data["version"]


def test_launch_success_persists_path(client, store, game_exe):
    spawner = FakeSpawner()
    use(store, spawner)

    response = client.post("/api/launch", json={"game_path": game_exe, "vrcw_file": "w.vrcw", "client_count": 2})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "message": "Successfully launched 2 VRChat instance(s)!",
        "launched": 2,
    }
    assert spawner.calls == 2
    assert client.get("/api/config").json()["source"] == "file"


def test_launch_empty_input(client, store):
    use(store, FakeSpawner())

    response = client.post("/api/launch", json={"game_path": "", "vrcw_file": "w.vrcw", "client_count": 1})
    assert response.status_code == 400


def test_launch_missing_path(client, store, tmp_path):
    use(store, FakeSpawner())

    response = client.post(
        "/api/launch",
        json={"game_path": str(tmp_path / "missing.exe"), "vrcw_file": "w.vrcw", "client_count": 1},
    )
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_launch_negative_count_is_rejected(client, store, game_exe):
    use(store, FakeSpawner())

    response = client.post("/api/launch", json={"game_path": game_exe, "vrcw_file": "w.vrcw", "client_count": -1})
    assert response.status_code == 422


def test_launch_partial_failure(client, store, game_exe):
    use(store, FakeSpawner(fail_on=3))

    response = client.post("/api/launch", json={"game_path": game_exe, "vrcw_file": "w.vrcw", "client_count": 4})

    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["index"] == 3
    assert detail["launched"] == 2
    assert detail["message"] == "Error: Failed to launch VRChat instance 3"


def test_launch_persist_failure(client, tmp_path, game_exe):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    spawner = FakeSpawner()
    use(ConfigStore(str(blocker / "config.toml"), NullInstallLocator()), spawner)

    response = client.post("/api/launch", json={"game_path": game_exe, "vrcw_file": "w.vrcw", "client_count": 1})

    assert response.status_code == 500
    assert spawner.calls == 0


def test_commands_get_config_with_injected_store(store):
    assert commands.get_config(store) == 'game_path = "C:\\\\Games\\\\VRChat\\\\VRChat.exe"\n'
