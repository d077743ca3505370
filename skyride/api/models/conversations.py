"""Request and response models for conversation endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from skyride.conversation.models import (
    ConversationSession,
    OutboundMessage,
    PendingQuestion,
    Profile,
)
from skyride.dispatch.results import TurnResult
from skyride.intents.base import IntentResult


class MessageRequest(BaseModel):
    """A user message for one conversation."""

    text: str = Field(..., max_length=4000, description="What the user typed")


class MembersAddedRequest(BaseModel):
    """Conversation update announcing new members."""

    members_added: list[str] = Field(..., min_length=1, description="Member ids")
    recipient_id: str | None = Field(
        default=None, description="The bot's id on the channel"
    )


class TurnResponse(BaseModel):
    """Messages to deliver for one turn."""

    conversation_id: str
    messages: list[OutboundMessage]
    pending_question: PendingQuestion
    turn_count: int
    intent: IntentResult | None = None

    @classmethod
    def from_result(cls, result: TurnResult) -> "TurnResponse":
        return cls(
            conversation_id=result.session.conversation_id,
            messages=result.messages,
            pending_question=result.session.flow.pending_question,
            turn_count=result.session.turn_count,
            intent=result.intent,
        )


class MembersAddedResponse(BaseModel):
    """Messages to deliver after a conversation update."""

    conversation_id: str
    messages: list[OutboundMessage]


class SessionResponse(BaseModel):
    """Stored state of a conversation."""

    conversation_id: str
    pending_question: PendingQuestion
    profile: Profile
    turn_count: int
    welcomed: bool
    favorite_color: str | None
    created_at: datetime
    last_activity_at: datetime

    @classmethod
    def from_session(cls, session: ConversationSession) -> "SessionResponse":
        return cls(
            conversation_id=session.conversation_id,
            pending_question=session.flow.pending_question,
            profile=session.profile,
            turn_count=session.turn_count,
            welcomed=session.welcomed,
            favorite_color=session.favorite_color,
            created_at=session.created_at,
            last_activity_at=session.last_activity_at,
        )
