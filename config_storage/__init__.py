from __future__ import annotations

from .async_storage import AsyncConfigurationStorage
from .disk_store import DiskJsonDocumentStore
from .errors import ConfigStorageError, InvalidKeyError, InvalidStorageNameError, MalformedDocumentError
from .interfaces import KeyValueDocumentStore
from .path_engine import MISSING
from .paths import parse_folder_name
from .settings import Settings, get_settings
from .storage import ConfigurationStorage

__all__ = [
    "ConfigurationStorage",
    "AsyncConfigurationStorage",
    "KeyValueDocumentStore",
    "DiskJsonDocumentStore",
    "Settings",
    "get_settings",
    "parse_folder_name",
    "MISSING",
    "ConfigStorageError",
    "InvalidKeyError",
    "InvalidStorageNameError",
    "MalformedDocumentError",
]
