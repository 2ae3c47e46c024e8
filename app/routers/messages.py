"""Message API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.message import (
    MessageDetail,
    MessageDetailResponse,
    MessageReadResponse,
    MessageReadState,
    MessageSummary,
    MessageSummaryResponse,
    SendMessageRequest,
)
from app.services.messages import get_message_service

router = APIRouter(prefix="/api/v1/messages", tags=["Messages"])


@router.get("/{message_id}", response_model=MessageDetailResponse)
def get_message(
    message_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageDetailResponse:
    """Get a message with sender and recipient profiles. Participants only."""
    service = get_message_service()
    data = service.get_by_id(db, message_id, user.username)
    return MessageDetailResponse(message=MessageDetail(**data))


@router.post("/", response_model=MessageSummaryResponse)
def send_message(
    body: SendMessageRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageSummaryResponse:
    """Send a message from the current user."""
    service = get_message_service()
    message = service.create(db, user.username, body.to_username, body.body)
    return MessageSummaryResponse(message=MessageSummary.model_validate(message))


@router.post("/{message_id}/read", response_model=MessageReadResponse)
def mark_message_read(
    message_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageReadResponse:
    """Mark a message as read. Recipient only."""
    service = get_message_service()
    message = service.mark_read(db, message_id, user.username)
    return MessageReadResponse(message=MessageReadState.model_validate(message))
