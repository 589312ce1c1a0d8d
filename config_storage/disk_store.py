from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, ClassVar

from .document import ConfigDocument
from .interfaces import KeyValueDocumentStore
from .json_store import atomic_write_json, read_json

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - load() always returns a dict or raises (no silent fallback to {}).
    - Writes atomically.
    - Every store opened on the same backing file shares one file lock, so
      whole-file reads and writes never overlap inside this process. Other
      processes are not coordinated.
    - exists_folder() and exists_file() treat errors differently: a stat
      failure other than "not found" on the folder propagates, while any
      access failure on the file just means "absent".
    """

    _file_locks: ClassVar[dict[Path, threading.Lock]] = {}
    _file_locks_guard: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, path: Path, *, indent: int = 4):
        self._path = path
        self._indent = indent
        self._file_lock = self.file_lock(path)

    @classmethod
    def file_lock(cls, path: Path) -> threading.Lock:
        backing_file = path.resolve()
        with cls._file_locks_guard:
            return cls._file_locks.setdefault(backing_file, threading.Lock())

    @property
    def path(self) -> Path:
        return self._path

    @property
    def folder(self) -> Path:
        return self._path.parent

    def exists_folder(self) -> bool:
        try:
            os.stat(self.folder)
        except FileNotFoundError:
            return False
        return True

    def exists_file(self) -> bool:
        return os.access(self._path, os.F_OK)

    def create_folder(self) -> None:
        self.folder.mkdir(parents=True, exist_ok=True)
        logger.info("CONFIG STORAGE INIT: created folder %s", self.folder)

    def load(self) -> dict[str, Any]:
        with self._file_lock:
            raw = read_json(self._path)
        doc = ConfigDocument.from_disk_doc(raw, path=self._path).to_disk_doc()
        logger.debug("CONFIG LOAD: %s (%d top-level keys)", self._path, len(doc))
        return doc

    def save(self, doc: dict[str, Any]) -> None:
        with self._file_lock:
            atomic_write_json(self._path, doc, indent=self._indent)
        logger.debug("CONFIG SAVE: %s", self._path)
