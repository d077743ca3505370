"""Tests for building the configured session store."""

import pytest

from skyride.api.dependencies import get_session_store, reset_dependencies
from skyride.config.models.storage import StorageConfig
from skyride.config.settings import Settings
from skyride.conversation.stores import InMemorySessionStore, create_session_store
from skyride.errors import ConfigurationError


class TestCreateSessionStore:
    """Tests for create_session_store."""

    def test_inmemory_backend(self):
        assert isinstance(create_session_store(StorageConfig()), InMemorySessionStore)

    def test_unknown_backend_raises(self):
        config = StorageConfig.model_construct(session_backend="redis")
        with pytest.raises(ConfigurationError, match="redis"):
            create_session_store(config)


class TestSessionStoreDependency:
    """The API dependency follows storage.session_backend."""

    @pytest.mark.asyncio
    async def test_builds_store_from_settings(self):
        await reset_dependencies()

        store = await get_session_store(Settings())

        assert isinstance(store, InMemorySessionStore)
        assert await get_session_store(Settings()) is store
        await reset_dependencies()

    @pytest.mark.asyncio
    async def test_unknown_backend_fails_at_first_use(self):
        await reset_dependencies()
        settings = Settings()
        settings.storage = StorageConfig.model_construct(session_backend="redis")

        with pytest.raises(ConfigurationError):
            await get_session_store(settings)
