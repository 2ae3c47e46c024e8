"""Credential store: registration, password checks and login timestamps."""

import logging
from datetime import datetime

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import check_work_factor, get_settings
from app.database import storage_errors
from app.errors import ConflictError, NotFoundError
from app.models.user import User
from app.services.validation import password_too_long, require_password, require_text, require_username

logger = logging.getLogger("messagely")


class CredentialService:
    """Handles user registration and password verification."""

    def __init__(self, work_factor: int | None = None) -> None:
        if work_factor is None:
            work_factor = get_settings().BCRYPT_WORK_FACTOR
        self.work_factor = check_work_factor(work_factor)
        # Checked against when the username is unknown so both paths cost one bcrypt round.
        self._dummy_hash = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(self.work_factor))

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.work_factor)).decode("utf-8")

    def register(
        self, db: Session, username: str, password: str, first_name: str, last_name: str, phone: str
    ) -> User:
        """Create a user. Raises ConflictError if the username is taken."""
        username = require_username(username)
        password = require_password(password)
        first_name = require_text(first_name, "first_name")
        last_name = require_text(last_name, "last_name")
        phone = require_text(phone, "phone")

        with storage_errors(db, "registering user"):
            if db.get(User, username) is not None:
                raise ConflictError(f"Username '{username}' is already taken")

            now = datetime.utcnow()
            user = User(
                username=username,
                password_hash=self.hash_password(password),
                first_name=first_name,
                last_name=last_name,
                phone=phone,
                joined_at=now,
                last_login_at=now,
            )
            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration of the same username.
                db.rollback()
                raise ConflictError(f"Username '{username}' is already taken") from None
            db.refresh(user)

        logger.info("Registered user %s", username)
        return user

    def authenticate(self, db: Session, username: str, password: str) -> bool:
        """Return True only if ``password`` matches the stored hash for ``username``."""
        if not isinstance(username, str) or not isinstance(password, str) or password_too_long(password):
            return False

        with storage_errors(db, "authenticating user"):
            user = db.get(User, username.strip())

        if user is None:
            bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
            logger.warning("Failed login for unknown user")
            return False

        if not bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8")):
            logger.warning("Failed login for %s", user.username)
            return False
        return True

    def touch_login(self, db: Session, username: str) -> User:
        """Set last_login_at to now. Raises NotFoundError for unknown users."""
        with storage_errors(db, "updating login timestamp"):
            user = db.get(User, username)
            if user is None:
                raise NotFoundError(f"User '{username}' not found")
            now = datetime.utcnow()
            if user.last_login_at is None or now > user.last_login_at:
                user.last_login_at = now
            db.commit()
            db.refresh(user)
        return user


_credential_service: CredentialService | None = None


def get_credential_service() -> CredentialService:
    """Get singleton credential service instance."""
    global _credential_service
    if _credential_service is None:
        _credential_service = CredentialService()
    return _credential_service
