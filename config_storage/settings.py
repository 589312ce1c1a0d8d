from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True)
class Settings:
    # Location
    home_dir: Path
    file_name: str

    # Used when a storage is opened without a name
    default_storage_name: str

    # Serialization
    indent: int


def get_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    if env_file is not None:
        # Values already present in the environment win over the file.
        load_dotenv(env_file)

    home_dir = _env_path("CONFIG_STORAGE_HOME", Path.home())
    file_name = os.getenv("CONFIG_STORAGE_FILE_NAME", "config.json").strip() or "config.json"
    default_storage_name = os.getenv("CONFIG_STORAGE_DEFAULT_NAME", "config storage")
    indent = _env_int("CONFIG_STORAGE_INDENT", 4)

    return Settings(
        home_dir=home_dir,
        file_name=file_name,
        default_storage_name=default_storage_name,
        indent=indent,
    )
