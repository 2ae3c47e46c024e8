"""User directory: read-only profile lookups."""

from sqlalchemy.orm import Session

from app.database import storage_errors
from app.errors import NotFoundError
from app.models.user import User


def public_profile(user: User) -> dict:
    """Public fields of a user. Never includes the password hash."""
    return {
        "username": user.username,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "phone": user.phone,
    }


class UserService:
    """Handles user profile queries."""

    def get_by_username(self, db: Session, username: str) -> User:
        """Get a single user. Raises NotFoundError if absent."""
        with storage_errors(db, "fetching user"):
            user = db.get(User, username)
        if user is None:
            raise NotFoundError(f"User '{username}' not found")
        return user

    def list_all(self, db: Session) -> list[User]:
        """Get all users in storage order."""
        with storage_errors(db, "fetching all users"):
            return db.query(User).all()


_user_service: UserService | None = None


def get_user_service() -> UserService:
    """Get singleton user service instance."""
    global _user_service
    if _user_service is None:
        _user_service = UserService()
    return _user_service
