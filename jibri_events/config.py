"""Service configuration and path helpers.

Runtime files (database, logs, .env) live under the base directory: the
JIBRI_EVENTS_HOME env var if set, else the current working directory.
"""

import os
from pathlib import Path
from typing import Union


def get_base_dir() -> Path:
    """Directory that holds the service's runtime files."""
    home = os.getenv("JIBRI_EVENTS_HOME")
    return Path(home).expanduser().resolve() if home else Path.cwd()


BASE_DIR = get_base_dir()
DATA_DIR = BASE_DIR / "data"
LOGS_DIR = BASE_DIR / "logs"
DEFAULT_DB_PATH = DATA_DIR / "jibri_events.db"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_API_HOST = "localhost"
DEFAULT_API_PORT = 8000


PathLike = Union[str, Path]


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path."""
    if not env_value:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        return DEFAULT_DB_PATH

    if str(env_value) == ":memory:":
        return ":memory:"

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else BASE_DIR / candidate


def get_api_address() -> tuple[str, int]:
    """Read API_HOST / API_PORT from the environment."""
    host = os.getenv("API_HOST", DEFAULT_API_HOST)
    port = int(os.getenv("API_PORT", str(DEFAULT_API_PORT)))
    return host, port
