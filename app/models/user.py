"""User model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String

from app.database import Base


class User(Base):
    """Registered user. ``username`` is the identity key."""

    __tablename__ = "users"

    username = Column(String(64), primary_key=True)
    password_hash = Column(String(128), nullable=False)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    phone = Column(String(32), nullable=False)
    joined_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    last_login_at = Column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
