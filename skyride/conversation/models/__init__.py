"""Conversation domain models.

- FlowState and Profile for the registration flow
- ConversationSession for everything persisted per conversation
- OutboundMessage descriptors for replies
"""

from skyride.conversation.models.enums import PendingQuestion, TurnRoute
from skyride.conversation.models.flow import FlowState, Profile
from skyride.conversation.models.messages import (
    Attachment,
    OutboundMessage,
    SuggestedAction,
)
from skyride.conversation.models.session import ConversationSession

__all__ = [
    # Enums
    "PendingQuestion",
    "TurnRoute",
    # Flow
    "FlowState",
    "Profile",
    # Messages
    "Attachment",
    "OutboundMessage",
    "SuggestedAction",
    # Session
    "ConversationSession",
]
