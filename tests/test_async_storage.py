from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from config_storage import AsyncConfigurationStorage, InvalidKeyError


def test_async_storage_basic_flow(sandbox_home: Path):
    async def _run():
        storage = await AsyncConfigurationStorage.get_storage("async app")
        assert storage.path == sandbox_home / ".async-app" / "config.json"
        assert await storage.get_all() == {}

        await storage.set("pi", 3.1416)
        assert await storage.get_all() == {"pi": 3.1416}
        assert await storage.get("missing", "fallback") == "fallback"
        assert await storage.exists("pi") is True

        await storage.delete("pi")
        assert await storage.get_all() == {}

        await storage.set("a.b.c", 1)
        await storage.set("a.b", 0)
        assert await storage.get("a.b") == 0
        assert await storage.exists("a.b.c") is False

        await storage.clean()
        assert await storage.get_all() == {}

    asyncio.run(_run())


def test_async_invalid_key(sandbox_home: Path):
    async def _run():
        storage = await AsyncConfigurationStorage.get_storage("async app")
        with pytest.raises(InvalidKeyError):
            await storage.set(".a", 1)
        with pytest.raises(InvalidKeyError):
            await storage.get("a.")

    asyncio.run(_run())


def test_async_concurrent_writes_on_one_instance(sandbox_home: Path):
    async def _run():
        storage = await AsyncConfigurationStorage.get_storage("async app")
        await asyncio.gather(*(storage.set(f"k.{i}", i) for i in range(10)))

        other = await AsyncConfigurationStorage.get_storage("async app")
        await other.reload()
        assert await other.get("k") == {str(i): i for i in range(10)}

    asyncio.run(_run())
