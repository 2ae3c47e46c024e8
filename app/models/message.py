"""Message model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.database import Base


class Message(Base):
    """Text message from one user to another."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_username = Column(String(64), ForeignKey("users.username"), nullable=False, index=True)
    to_username = Column(String(64), ForeignKey("users.username"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    read_at = Column(DateTime, nullable=True)  # null until the recipient marks it read; never cleared
