"""Authentication dependencies for FastAPI routes."""

from dataclasses import dataclass

from fastapi import Request

from app.errors import AuthError
from app.services.tokens import get_token_service


@dataclass
class CurrentUser:
    """Authenticated user context."""

    username: str


def get_current_user(request: Request) -> CurrentUser:
    """Extract and validate the user from the Bearer token. Raises AuthError (401) if missing or invalid."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AuthError("Not authenticated")

    token = auth_header[7:].strip()
    if not token:
        raise AuthError("Not authenticated")

    return CurrentUser(username=get_token_service().verify(token))
