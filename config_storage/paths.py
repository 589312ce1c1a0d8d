from __future__ import annotations

import re
from pathlib import Path

from .errors import InvalidStorageNameError
from .settings import Settings

_WHITESPACE_RUN_RE = re.compile(r"\s+")
_UNSAFE_CHARS_RE = re.compile(r"[^\w-]", re.ASCII)


def parse_folder_name(storage_name: str) -> str:
    """
    Turn a human-readable storage name into a hidden folder name:
    "  My  App " -> ".my-app", "$hello_world." -> ".hello_world".
    """
    name = _WHITESPACE_RUN_RE.sub("-", storage_name.strip())
    name = _UNSAFE_CHARS_RE.sub("", name).lower()
    if not name:
        raise InvalidStorageNameError(storage_name)
    return "." + name


def storage_folder(settings: Settings, storage_name: str) -> Path:
    return settings.home_dir / parse_folder_name(storage_name)


def storage_file(settings: Settings, storage_name: str) -> Path:
    return storage_folder(settings, storage_name) / settings.file_name
