"""Project-level configuration and path helpers."""

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "calchat.log"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174"


PathLike = Union[str, Path]


def resolve_log_path(env_value: PathLike | None = None) -> Path:
    """Resolve LOG_FILE to an absolute path."""
    if not env_value:
        return DEFAULT_LOG_PATH

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


class Settings:
    """
    Settings read from the environment.

        - API_HOST / API_PORT where uvicorn binds
        - LOG_LEVEL root log level
        - LOG_FILE path of the rotating JSON log
        - CORS_ORIGINS comma separated list of allowed origins
    """

    def __init__(self, env_file: PathLike | None = None):
        load_dotenv(env_file or PROJECT_ROOT / ".env")

        self.api_host: str = os.getenv("API_HOST", "localhost")
        self.api_port: int = int(os.getenv("API_PORT", "8000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Path = resolve_log_path(os.getenv("LOG_FILE"))
        self.cors_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]

    @property
    def api_url(self) -> str:
        return f"http://{self.api_host}:{self.api_port}"
