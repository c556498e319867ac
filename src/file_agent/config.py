from __future__ import annotations

import locale
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FILE_AGENT_",
        "extra": "ignore",
    }

    # Root for every file operation; defaults to the working directory at startup
    base_dir: Path | None = None
    # Text encoding for reads/writes; None means the platform default
    encoding: str | None = None

    # HTTP adapter
    host: str = "0.0.0.0"
    port: int = 8000

    log_level: str = "INFO"


settings = Settings()


_base_dir_cache: Path | None = None


def get_base_dir() -> Path:
    """Return the process-wide base directory, resolved once."""
    global _base_dir_cache
    if _base_dir_cache is not None:
        return _base_dir_cache

    _base_dir_cache = (settings.base_dir or Path.cwd()).expanduser().resolve()
    return _base_dir_cache


def get_encoding() -> str:
    return settings.encoding or locale.getpreferredencoding(False)
