"""
Messages API Router.

Endpoints:
- POST /api/messages  {conversationId, senderId, textContent?, videoUrl?} → 201 Message
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, ConfigDict, Field

from branchchat.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from branchchat.application.dto import MessageDTO
from branchchat.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = getLogger(__name__)


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: Optional[str] = Field(default=None, alias="conversationId")
    sender_id: Optional[str] = Field(default=None, alias="senderId")
    text_content: Optional[str] = Field(default=None, alias="textContent")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")


router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post(
    "",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
):
    """Append a text and/or video message to a conversation."""
    command = SendMessageCommand(
        conversation_id=request.conversation_id,
        sender_id=request.sender_id,
        text_content=request.text_content,
        video_url=request.video_url,
    )
    try:
        message = await handler.execute(command)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return MessageDTO.from_entity(message)
