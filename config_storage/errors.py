from __future__ import annotations

from pathlib import Path
from typing import Any

__all__ = [
    "ConfigStorageError",
    "InvalidKeyError",
    "InvalidStorageNameError",
    "MalformedDocumentError",
]


class ConfigStorageError(Exception):
    """Base error for everything raised by config_storage itself."""


class InvalidKeyError(ConfigStorageError, ValueError):
    """Raised before any I/O when a dotted key cannot address a value."""

    def __init__(self, key: Any, reason: str = "invalid key") -> None:
        super().__init__(f"{reason}: {key!r}")
        self.key = key
        self.reason = reason


class InvalidStorageNameError(ConfigStorageError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"storage name does not produce a usable folder name: {name!r}")
        self.name = name


class MalformedDocumentError(ConfigStorageError, ValueError):
    """The backing file is not a JSON object."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
