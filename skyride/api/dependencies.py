"""Dependency injection for API routes.

Provides the settings, session store and bot used by the endpoints.
Instances are created once; tests override them through
``app.dependency_overrides`` or reset them with ``reset_dependencies``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from skyride.bot import ConversationBot
from skyride.config import load_settings
from skyride.config.settings import Settings, set_toml_config
from skyride.conversation.store import SessionStore
from skyride.conversation.stores.factory import create_session_store
from skyride.dispatch.dispatcher import TurnDispatcher
from skyride.observability.logging import get_logger

logger = get_logger(__name__)

_session_store: SessionStore | None = None
_bot: ConversationBot | None = None


@lru_cache
def get_settings() -> Settings:
    """Get application settings, falling back to defaults without TOML."""
    try:
        return load_settings()
    except FileNotFoundError:
        logger.warning("config_file_not_found", msg="Using default configuration")
        set_toml_config({})
        return Settings()


async def get_session_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionStore:
    """Get the SessionStore configured by ``storage.session_backend``."""
    global _session_store
    if _session_store is None:
        _session_store = create_session_store(settings.storage)
        logger.info(
            "session_store_initialized", store_type=settings.storage.session_backend
        )
    return _session_store


async def get_bot(
    settings: Annotated[Settings, Depends(get_settings)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> ConversationBot:
    """Get the ConversationBot, building its dispatcher from settings."""
    global _bot
    if _bot is None:
        dispatcher = TurnDispatcher.from_settings(settings)
        _bot = ConversationBot(dispatcher, store, bot_id=settings.api.bot_id)
        logger.info("bot_initialized", commands=dispatcher.commands)
    return _bot


async def reset_dependencies() -> None:
    """Drop cached instances. Used by tests."""
    global _session_store, _bot
    _session_store = None
    _bot = None
    get_settings.cache_clear()


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
BotDep = Annotated[ConversationBot, Depends(get_bot)]
