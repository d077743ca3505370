"""Per-conversation state owned by the host's session store."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from skyride.conversation.models.flow import FlowState, Profile


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class ConversationSession(BaseModel):
    """Everything the dispatcher reads and writes for one conversation.

    The host loads this at turn start and saves the copy the dispatcher
    returns. No field is shared between conversations.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    conversation_id: str = Field(..., description="Conversation identity")
    flow: FlowState = Field(default_factory=FlowState, description="Registration flow")
    profile: Profile = Field(default_factory=Profile, description="Registration record")
    turn_count: int = Field(default=0, ge=0, description="Messages received")
    welcomed: bool = Field(default=False, description="Welcome already sent")
    favorite_color: str | None = Field(default=None, description="Last chosen colour")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")
    last_activity_at: datetime = Field(
        default_factory=utc_now, description="Last activity"
    )
