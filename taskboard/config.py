import os


def _env(name: str, default: str) -> str:
    # empty values count as unset
    return os.environ.get(name) or default


HOST = _env("TASKBOARD_HOST", "0.0.0.0")
PORT = int(_env("TASKBOARD_PORT", "8080"))

# SQLite file; parent directories are created on open
DATABASE_PATH = _env("TASKBOARD_DB_PATH", "data/taskboard.db")

# Built frontend (index.html + assets/); API-only when missing
STATIC_DIR = _env("TASKBOARD_STATIC_DIR", "web/dist")

LOG_FORMAT = _env("TASKBOARD_LOG_FORMAT", "dev")
LOG_LEVEL = _env("TASKBOARD_LOG_LEVEL", "INFO")
