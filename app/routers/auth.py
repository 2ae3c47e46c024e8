"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.errors import AuthError
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, VerifyResponse
from app.services.credentials import get_credential_service
from app.services.tokens import get_token_service

router = APIRouter(prefix="/api/v1/auth", tags=["Authentication"])


@router.post("/register", response_model=TokenResponse)
def register(body: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Register a new user account and log it in."""
    credential_service = get_credential_service()
    user = credential_service.register(
        db,
        username=body.username,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
        phone=body.phone,
    )

    token = get_token_service().issue(user.username)
    return TokenResponse(token=token, username=user.username)


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Authenticate and receive a bearer token."""
    credential_service = get_credential_service()
    if not credential_service.authenticate(db, body.username, body.password):
        raise AuthError("Invalid username or password")

    user = credential_service.touch_login(db, body.username.strip())
    token = get_token_service().issue(user.username)
    return TokenResponse(token=token, username=user.username)


@router.get("/verify", response_model=VerifyResponse)
def verify_token(token: str) -> VerifyResponse:
    """Verify a token and return the username it was issued for."""
    username = get_token_service().verify(token)
    return VerifyResponse(valid=True, username=username)
