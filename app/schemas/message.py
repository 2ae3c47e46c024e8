"""Pydantic schemas for message endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.user import UserProfile


class SendMessageRequest(BaseModel):
    to_username: str = Field(min_length=1, max_length=64)
    body: str = Field(min_length=1, max_length=10_000)


class MessageSummary(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime

    model_config = {"from_attributes": True}


class MessageDetail(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserProfile
    to_user: UserProfile


class MessageReadState(BaseModel):
    id: int
    read_at: datetime | None

    model_config = {"from_attributes": True}


class SentMessage(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: UserProfile


class ReceivedMessage(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserProfile


class MessageSummaryResponse(BaseModel):
    message: MessageSummary


class MessageDetailResponse(BaseModel):
    message: MessageDetail


class MessageReadResponse(BaseModel):
    message: MessageReadState


class SentMessageListResponse(BaseModel):
    messages: list[SentMessage]


class ReceivedMessageListResponse(BaseModel):
    messages: list[ReceivedMessage]
