"""Host turn-handling wrapper.

Loads a conversation's state from the session store, runs the dispatcher
and saves what it returns. The host serializes turns per conversation;
nothing here locks.
"""

from skyride.conversation.models import ConversationSession, OutboundMessage
from skyride.conversation.store import SessionStore
from skyride.dispatch.dispatcher import TurnDispatcher
from skyride.dispatch.results import TurnResult
from skyride.observability.logging import (
    bind_conversation,
    clear_conversation,
    get_logger,
)

logger = get_logger(__name__)


class ConversationBot:
    """Connects a TurnDispatcher to a SessionStore."""

    def __init__(
        self,
        dispatcher: TurnDispatcher,
        store: SessionStore,
        bot_id: str = "skyride-bot",
    ) -> None:
        self._dispatcher = dispatcher
        self._store = store
        self.bot_id = bot_id

    async def handle_message(self, conversation_id: str, text: str) -> TurnResult:
        """Process one user message and persist the resulting state."""
        bind_conversation(conversation_id)
        try:
            session = await self._load(conversation_id)
            result = await self._dispatcher.process_turn(session, text)
            await self._store.save(result.session)
            return result
        finally:
            clear_conversation()

    async def handle_members_added(
        self,
        conversation_id: str,
        member_ids: list[str],
        recipient_id: str | None = None,
    ) -> list[OutboundMessage]:
        """Welcome members who joined, ignoring the bot itself.

        Args:
            conversation_id: Conversation the members joined
            member_ids: Ids of the members added
            recipient_id: The bot's id on the channel, defaults to ``bot_id``
        """
        bind_conversation(conversation_id)
        try:
            session = await self._load(conversation_id)
            session, messages = self._dispatcher.welcome_members(
                session, member_ids, recipient_id or self.bot_id
            )
            await self._store.save(session)
            logger.info("members_added", member_count=len(member_ids))
            return messages
        finally:
            clear_conversation()

    async def _load(self, conversation_id: str) -> ConversationSession:
        session = await self._store.get(conversation_id)
        if session is None:
            session = ConversationSession(conversation_id=conversation_id)
            logger.info("session_created")
        return session
