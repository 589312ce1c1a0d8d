from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    The file a storage is backed by: one JSON object at a fixed path.
    """

    @property
    def path(self) -> Path:
        ...

    def exists_folder(self) -> bool:
        """True if the parent folder exists; unexpected errors propagate."""
        ...

    def exists_file(self) -> bool:
        """True if the file is accessible; any failure counts as absent."""
        ...

    def create_folder(self) -> None:
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document atomically."""
        ...
