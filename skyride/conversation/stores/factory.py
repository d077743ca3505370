"""Build the session store named in the storage configuration."""

from skyride.config.models.storage import StorageConfig
from skyride.conversation.store import SessionStore
from skyride.conversation.stores.inmemory import InMemorySessionStore
from skyride.errors import ConfigurationError


def create_session_store(config: StorageConfig) -> SessionStore:
    """Create the session store for ``config.session_backend``.

    Raises:
        ConfigurationError: If the backend is not one SkyRide ships
    """
    if config.session_backend == "inmemory":
        return InMemorySessionStore()
    raise ConfigurationError(f"Unknown session backend '{config.session_backend}'")
