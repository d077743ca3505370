"""Session stores for conversation state."""

from skyride.conversation.store import SessionStore
from skyride.conversation.stores.factory import create_session_store
from skyride.conversation.stores.inmemory import InMemorySessionStore

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "create_session_store",
]
