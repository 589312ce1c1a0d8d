from __future__ import annotations

import copy
import logging
import threading
from pathlib import Path
from typing import Any

from .disk_store import DiskJsonDocumentStore
from .interfaces import KeyValueDocumentStore
from .path_engine import MISSING, delete_path, exists_path, get_path, set_path, split_key
from .paths import storage_file
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ConfigurationStorage:
    """
    A nested JSON document kept in sync with one backing file and addressed
    with dotted keys ("window.size.width").

    Reads reload the whole file first. Writes apply to the document held in
    memory (no reload) and then rewrite the whole file, so a change made by
    someone else between two writes is lost. Use get_storage() to obtain an
    instance: it creates the folder and file when missing and loads them.

    Operations on one instance run one at a time; separate instances (or
    processes) sharing a file are not coordinated.
    """

    def __init__(self, store: KeyValueDocumentStore):
        self._store = store
        self._data: dict[str, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_storage(
        cls,
        name: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> "ConfigurationStorage":
        settings = settings or get_settings()
        storage_name = settings.default_storage_name if name is None else name
        path = storage_file(settings, storage_name)
        storage = cls(DiskJsonDocumentStore(path, indent=settings.indent))
        storage.initial_loading()
        return storage

    @property
    def path(self) -> Path:
        return self._store.path

    @property
    def folder_path(self) -> Path:
        return self._store.path.parent

    def initial_loading(self) -> None:
        with self._lock:
            if not self._store.exists_folder():
                self._store.create_folder()

            if not self._store.exists_file():
                self._store.save({})
                logger.info("CONFIG STORAGE INIT: created file %s", self.path)

            self.reload()

    def reload(self) -> None:
        with self._lock:
            # Parse fully before assigning: a failed read keeps the old document.
            self._data = self._store.load()

    def get_all(self) -> dict[str, Any]:
        with self._lock:
            self.reload()
            return copy.deepcopy(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        path = split_key(key)
        with self._lock:
            self.reload()
            value = get_path(path, self._data)
            if value is MISSING:
                return default
            return copy.deepcopy(value)

    def set(self, key: str, value: Any) -> None:
        path = split_key(key)
        logger.debug("CONFIG SET: %s", key)
        with self._lock:
            set_path(path, self._data, copy.deepcopy(value))
            self._store.save(self._data)

    def delete(self, key: str) -> None:
        path = split_key(key)
        logger.debug("CONFIG DELETE: %s", key)
        with self._lock:
            delete_path(path, self._data)
            self._store.save(self._data)

    def exists(self, key: str) -> bool:
        path = split_key(key)
        with self._lock:
            self.reload()
            return exists_path(path, self._data)

    def clean(self) -> None:
        logger.debug("CONFIG CLEAN: %s", self.path)
        with self._lock:
            self._data = {}
            self._store.save(self._data)
