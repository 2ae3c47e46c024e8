"""User API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.message import ReceivedMessage, ReceivedMessageListResponse, SentMessage, SentMessageListResponse
from app.schemas.user import UserDetail, UserDetailResponse, UserListResponse, UserProfile
from app.services.authorization import require_self
from app.services.messages import get_message_service
from app.services.users import get_user_service

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.get("/", response_model=UserListResponse)
def list_users(
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserListResponse:
    """List public profiles of all users."""
    users = get_user_service().list_all(db)
    return UserListResponse(users=[UserProfile.model_validate(u) for u in users])


@router.get("/{username}", response_model=UserDetailResponse)
def get_user(
    username: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserDetailResponse:
    """Get a single user's profile."""
    found = get_user_service().get_by_username(db, username)
    return UserDetailResponse(user=UserDetail.model_validate(found))


@router.get("/{username}/to", response_model=ReceivedMessageListResponse)
def list_messages_to(
    username: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ReceivedMessageListResponse:
    """List messages received by a user. Only that user may ask."""
    require_self(user.username, username)
    items = get_message_service().list_received_by(db, username)
    return ReceivedMessageListResponse(messages=[ReceivedMessage(**item) for item in items])


@router.get("/{username}/from", response_model=SentMessageListResponse)
def list_messages_from(
    username: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> SentMessageListResponse:
    """List messages sent by a user. Only that user may ask."""
    require_self(user.username, username)
    items = get_message_service().list_sent_by(db, username)
    return SentMessageListResponse(messages=[SentMessage(**item) for item in items])
