"""Pydantic schemas for user endpoints."""

from datetime import datetime

from pydantic import BaseModel


class UserProfile(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = {"from_attributes": True}


class UserDetail(UserProfile):
    joined_at: datetime
    last_login_at: datetime | None


class UserListResponse(BaseModel):
    users: list[UserProfile]


class UserDetailResponse(BaseModel):
    user: UserDetail
