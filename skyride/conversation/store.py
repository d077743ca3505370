"""SessionStore abstract interface."""

from abc import ABC, abstractmethod

from skyride.conversation.models import ConversationSession


class SessionStore(ABC):
    """Abstract interface for per-conversation state storage."""

    @abstractmethod
    async def get(self, conversation_id: str) -> ConversationSession | None:
        """Get a session by conversation id."""
        pass

    @abstractmethod
    async def save(self, session: ConversationSession) -> str:
        """Save a session, returning its conversation id."""
        pass

    @abstractmethod
    async def delete(self, conversation_id: str) -> bool:
        """Delete a session."""
        pass

    @abstractmethod
    async def list_ids(self, *, limit: int = 100) -> list[str]:
        """List conversation ids, most recently active first."""
        pass
