"""Conversation endpoints: user messages, member updates, stored state."""

from fastapi import APIRouter, Response

from skyride.api.dependencies import BotDep, SessionStoreDep
from skyride.api.exceptions import SessionNotFoundError
from skyride.api.models.conversations import (
    MembersAddedRequest,
    MembersAddedResponse,
    MessageRequest,
    SessionResponse,
    TurnResponse,
)
from skyride.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/conversations")


@router.post("/{conversation_id}/messages", response_model=TurnResponse)
async def post_message(
    conversation_id: str,
    request: MessageRequest,
    bot: BotDep,
) -> TurnResponse:
    """Process one user message and return the replies in order."""
    result = await bot.handle_message(conversation_id, request.text)
    return TurnResponse.from_result(result)


@router.post("/{conversation_id}/members", response_model=MembersAddedResponse)
async def post_members_added(
    conversation_id: str,
    request: MembersAddedRequest,
    bot: BotDep,
) -> MembersAddedResponse:
    """Welcome members who joined the conversation."""
    messages = await bot.handle_members_added(
        conversation_id, request.members_added, request.recipient_id
    )
    return MembersAddedResponse(conversation_id=conversation_id, messages=messages)


@router.get("/{conversation_id}", response_model=SessionResponse)
async def get_conversation(
    conversation_id: str,
    store: SessionStoreDep,
) -> SessionResponse:
    """Return the stored state of a conversation."""
    session = await store.get(conversation_id)
    if session is None:
        raise SessionNotFoundError(f"No conversation state for {conversation_id}")
    return SessionResponse.from_session(session)


@router.delete("/{conversation_id}", status_code=204)
async def delete_conversation(
    conversation_id: str,
    store: SessionStoreDep,
) -> Response:
    """Forget a conversation's state."""
    if not await store.delete(conversation_id):
        raise SessionNotFoundError(f"No conversation state for {conversation_id}")
    logger.info("session_deleted", conversation_id=conversation_id)
    return Response(status_code=204)
