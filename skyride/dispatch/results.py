"""Turn dispatcher output model."""

from pydantic import BaseModel, Field

from skyride.conversation.models import (
    ConversationSession,
    OutboundMessage,
    Profile,
    TurnRoute,
)
from skyride.intents.base import IntentResult


class TurnResult(BaseModel):
    """Updated session plus the messages to deliver, in order."""

    session: ConversationSession
    messages: list[OutboundMessage] = Field(default_factory=list)
    route: TurnRoute
    intent: IntentResult | None = Field(
        default=None, description="Reported intent, idle-state turns only"
    )
    completed_profile: Profile | None = Field(
        default=None, description="Filled profile when registration finished"
    )

    @property
    def texts(self) -> list[str]:
        """Text of every message that has some."""
        return [m.text for m in self.messages if m.text]
