import os
import sys

DEFAULT_PORT = "8000"
DEFAULT_HOST = "0.0.0.0"


def exec_cmd(cmd):
    os.execvp(cmd[0], cmd)


def build_command(environ):
    port = environ.get("PORT", "").strip() or DEFAULT_PORT
    host = environ.get("HOST", "").strip() or DEFAULT_HOST
    if not port.isdigit():
        print(f"Warning: PORT={port} is invalid; defaulting to {DEFAULT_PORT}")
        port = DEFAULT_PORT
    return [
        "uvicorn",
        "datefeed_api.main:create_app",
        "--factory",
        "--app-dir",
        "apps/api/src",
        "--host",
        host,
        "--port",
        port,
    ]


def main() -> None:
    cmd = build_command(os.environ)
    print(f"Datefeed launcher: host={cmd[-3]} port={cmd[-1]}")
    try:
        exec_cmd(cmd)
    except FileNotFoundError:
        print("uvicorn is not installed; install the project dependencies first")
        sys.exit(1)


if __name__ == "__main__":
    main()
