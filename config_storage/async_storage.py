from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from .settings import Settings
from .storage import ConfigurationStorage


class AsyncConfigurationStorage:
    """
    Async wrapper around ConfigurationStorage.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.

    Operations on one instance are serialized by the wrapped storage, so
    concurrent tasks interleave only between whole operations. Separate
    instances on the same file are not coordinated: the last write wins.
    """

    def __init__(self, storage: ConfigurationStorage) -> None:
        self._storage = storage

    @classmethod
    async def get_storage(
        cls,
        name: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> "AsyncConfigurationStorage":
        storage = await asyncio.to_thread(ConfigurationStorage.get_storage, name, settings=settings)
        return cls(storage)

    @property
    def path(self) -> Path:
        return self._storage.path

    @property
    def folder_path(self) -> Path:
        return self._storage.folder_path

    async def reload(self) -> None:
        await asyncio.to_thread(self._storage.reload)

    async def get_all(self) -> dict[str, Any]:
        return await asyncio.to_thread(self._storage.get_all)

    async def get(self, key: str, default: Any = None) -> Any:
        return await asyncio.to_thread(self._storage.get, key, default)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._storage.set, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._storage.delete, key)

    async def exists(self, key: str) -> bool:
        return await asyncio.to_thread(self._storage.exists, key)

    async def clean(self) -> None:
        await asyncio.to_thread(self._storage.clean)
