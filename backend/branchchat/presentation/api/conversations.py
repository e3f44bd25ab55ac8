"""
Conversations API Router - Two-party conversation lookup and history.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business logic to Application layer handlers

Endpoints:
- POST /api/conversations                      {userId1, userId2} → 200 existing / 201 new
- GET  /api/conversations?userId=…             → conversations the user takes part in
- GET  /api/conversations/{id}/messages        → messages, oldest first
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Response, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, ConfigDict, Field

from branchchat.application.commands.conversations import (
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from branchchat.application.queries.conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from branchchat.application.queries.messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)
from branchchat.application.dto import ConversationDTO, MessageDTO
from branchchat.domain.exceptions import DomainValidationError
from branchchat.domain.value_objects.conversation_id import ConversationId

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class FindOrCreateConversationRequest(BaseModel):
    """Request body: {"userId1": "...", "userId2": "..."}"""

    model_config = ConfigDict(populate_by_name=True)

    user_id_1: Optional[str] = Field(default=None, alias="userId1")
    user_id_2: Optional[str] = Field(default=None, alias="userId2")


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=ConversationDTO,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_201_CREATED: {"model": ConversationDTO}},
)
@inject
async def find_or_create_conversation(
    request: FindOrCreateConversationRequest,
    response: Response,
    handler: FromDishka[FindOrCreateConversationHandler],
):
    """Return the conversation between two users, creating it on first use."""
    try:
        result = await handler.execute(
            FindOrCreateConversationCommand(
                user_id_1=request.user_id_1,
                user_id_2=request.user_id_2,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return ConversationDTO.from_entity(result.conversation)


@router.get(
    "",
    response_model=list[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    user_id: Optional[str] = Query(default=None, alias="userId"),
):
    """List conversations for ?userId=…, in creation order."""
    try:
        conversations = await handler.execute(ListConversationsQuery(user_id=user_id))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return [ConversationDTO.from_entity(conv) for conv in conversations]


@router.get(
    "/{conversation_id}/messages",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: str,
    handler: FromDishka[ListMessagesHandler],
):
    """Messages of a conversation sorted by timestamp (oldest first)."""
    messages = await handler.execute(
        ListMessagesQuery(conversation_id=ConversationId(conversation_id))
    )
    return [MessageDTO.from_entity(msg) for msg in messages]
