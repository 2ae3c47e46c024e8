"""Message store: sending, viewing, read acknowledgment and per-user listings."""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.database import storage_errors
from app.errors import NotFoundError, ValidationError
from app.models.message import Message
from app.models.user import User
from app.services.authorization import require_participant, require_recipient
from app.services.users import public_profile
from app.services.validation import require_text, require_username

logger = logging.getLogger("messagely")

# Largest id a 64-bit INTEGER primary key can hold.
MAX_MESSAGE_ID = 2**63 - 1


class MessageService:
    """Handles message creation, retrieval and read state."""

    def create(self, db: Session, from_username: str, to_username: str, body: str) -> Message:
        """Send a message. Raises NotFoundError if the recipient does not exist."""
        to_username = require_username(to_username, "to_username")
        body = require_text(body, "body", strip=False)
        if to_username == from_username:
            raise ValidationError("You cannot send a message to yourself")

        with storage_errors(db, "sending message"):
            if db.get(User, to_username) is None:
                raise NotFoundError(f"User '{to_username}' not found")

            message = Message(
                from_username=from_username,
                to_username=to_username,
                body=body,
                sent_at=datetime.utcnow(),
            )
            db.add(message)
            db.commit()
            db.refresh(message)

        logger.info("Message %d sent from %s to %s", message.id, from_username, to_username)
        return message

    def _get(self, db: Session, message_id: int) -> Message:
        if not 1 <= message_id <= MAX_MESSAGE_ID:
            raise NotFoundError(f"Message {message_id} not found")
        message = db.get(Message, message_id)
        if message is None:
            raise NotFoundError(f"Message {message_id} not found")
        return message

    def get_by_id(self, db: Session, message_id: int, acting_username: str) -> dict:
        """Get a message with both participants' profiles. Only participants may view it."""
        with storage_errors(db, "fetching message"):
            message = self._get(db, message_id)
            require_participant(message, acting_username)
            from_user = db.get(User, message.from_username)
            to_user = db.get(User, message.to_username)

        return {
            "id": message.id,
            "body": message.body,
            "sent_at": message.sent_at,
            "read_at": message.read_at,
            "from_user": public_profile(from_user),
            "to_user": public_profile(to_user),
        }

    def mark_read(self, db: Session, message_id: int, acting_username: str) -> Message:
        """Mark a message read. Only the recipient may do this.

        The first call sets read_at; later calls leave it unchanged and return
        the original timestamp.
        """
        with storage_errors(db, "marking message read"):
            message = self._get(db, message_id)
            require_recipient(message, acting_username)

            if message.read_at is None:
                # Conditional update so concurrent calls cannot overwrite each other.
                updated = (
                    db.query(Message)
                    .filter(Message.id == message_id, Message.read_at.is_(None))
                    .update({Message.read_at: datetime.utcnow()}, synchronize_session=False)
                )
                db.commit()
                db.refresh(message)
                if updated:
                    logger.info("Message %d read by %s", message_id, acting_username)

        return message

    def list_sent_by(self, db: Session, username: str) -> list[dict]:
        """Messages sent by ``username``, each with the recipient's profile."""
        with storage_errors(db, "fetching sent messages"):
            results = (
                db.query(Message, User)
                .join(User, Message.to_username == User.username)
                .filter(Message.from_username == username)
                .order_by(Message.id)
                .all()
            )

        return [
            {
                "id": message.id,
                "body": message.body,
                "sent_at": message.sent_at,
                "read_at": message.read_at,
                "to_user": public_profile(to_user),
            }
            for message, to_user in results
        ]

    def list_received_by(self, db: Session, username: str) -> list[dict]:
        """Messages sent to ``username``, each with the sender's profile."""
        with storage_errors(db, "fetching received messages"):
            results = (
                db.query(Message, User)
                .join(User, Message.from_username == User.username)
                .filter(Message.to_username == username)
                .order_by(Message.id)
                .all()
            )

        return [
            {
                "id": message.id,
                "body": message.body,
                "sent_at": message.sent_at,
                "read_at": message.read_at,
                "from_user": public_profile(from_user),
            }
            for message, from_user in results
        ]


_message_service: MessageService | None = None


def get_message_service() -> MessageService:
    """Get singleton message service instance."""
    global _message_service
    if _message_service is None:
        _message_service = MessageService()
    return _message_service
