from __future__ import annotations

import os
from pathlib import Path

# repository_root/data (we are in backend/note_editor/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def data_dir() -> Path:
    return Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def server_host() -> str:
    return os.getenv("APP_HOST", "127.0.0.1")


def server_port() -> int:
    try:
        return int(os.getenv("APP_PORT", "8000"))
    except ValueError:
        return 8000
