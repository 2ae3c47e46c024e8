"""Session token service (signed JWTs carrying the username)."""

from datetime import datetime, timedelta

from jose import JWTError, jwt

from app.config import get_settings
from app.errors import AuthError


class TokenService:
    """Issues and verifies bearer tokens. Stateless: never touches the database."""

    def __init__(self, secret_key: str | None = None, algorithm: str | None = None, expire_minutes: int | None = None):
        settings = get_settings()
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expire_minutes = settings.JWT_EXPIRE_MINUTES if expire_minutes is None else expire_minutes

    def issue(self, username: str) -> str:
        """Create a signed token for ``username``."""
        now = datetime.utcnow()
        payload = {"username": username, "iat": now}
        if self.expire_minutes > 0:
            payload["exp"] = now + timedelta(minutes=self.expire_minutes)
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Return the username the token was issued for.

        Raises AuthError if the token is malformed, its signature does not match,
        it has expired, or it carries no username.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise AuthError("Invalid or expired token") from None

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            raise AuthError("Invalid or expired token")
        return username


_token_service: TokenService | None = None


def get_token_service() -> TokenService:
    """Get singleton token service instance."""
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service
