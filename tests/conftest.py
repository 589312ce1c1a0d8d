from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sandbox_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point the storage home at a temp directory so tests never touch the real ~.
    """
    monkeypatch.setenv("CONFIG_STORAGE_HOME", str(tmp_path))
    for name in ("CONFIG_STORAGE_FILE_NAME", "CONFIG_STORAGE_DEFAULT_NAME", "CONFIG_STORAGE_INDENT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def storage(sandbox_home: Path):
    from config_storage import ConfigurationStorage

    return ConfigurationStorage.get_storage("testing")
