from __future__ import annotations

from main import build_command


def test_build_command_uses_port_and_host() -> None:
    cmd = build_command({"PORT": "9999", "HOST": "127.0.0.1"})
    assert cmd[:3] == ["uvicorn", "datefeed_api.main:create_app", "--factory"]
    assert cmd[cmd.index("--port") + 1] == "9999"
    assert cmd[cmd.index("--host") + 1] == "127.0.0.1"


def test_build_command_defaults() -> None:
    cmd = build_command({})
    assert cmd[cmd.index("--port") + 1] == "8000"
    assert cmd[cmd.index("--host") + 1] == "0.0.0.0"


def test_build_command_invalid_port_defaults() -> None:
    cmd = build_command({"PORT": "http"})
    assert cmd[cmd.index("--port") + 1] == "8000"
