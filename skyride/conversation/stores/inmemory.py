"""In-memory implementation of SessionStore."""

from datetime import UTC, datetime

from skyride.conversation.models import ConversationSession
from skyride.conversation.store import SessionStore


class InMemorySessionStore(SessionStore):
    """In-memory SessionStore for tests and single-process hosts.

    Stores deep copies so callers never share a live object with the store.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, ConversationSession] = {}

    async def get(self, conversation_id: str) -> ConversationSession | None:
        session = self._sessions.get(conversation_id)
        return session.model_copy(deep=True) if session else None

    async def save(self, session: ConversationSession) -> str:
        session.last_activity_at = datetime.now(UTC)
        self._sessions[session.conversation_id] = session.model_copy(deep=True)
        return session.conversation_id

    async def delete(self, conversation_id: str) -> bool:
        if conversation_id in self._sessions:
            del self._sessions[conversation_id]
            return True
        return False

    async def list_ids(self, *, limit: int = 100) -> list[str]:
        sessions = sorted(
            self._sessions.values(),
            key=lambda s: s.last_activity_at,
            reverse=True,
        )
        return [s.conversation_id for s in sessions[:limit]]
