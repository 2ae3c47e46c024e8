"""Authorization checks for message and per-user resources.

Authentication itself (a verified bearer token) is the ``get_current_user``
dependency in ``app.dependencies``. The checks here run after it, with the
acting username it resolved.
"""

from app.errors import ForbiddenError
from app.models.message import Message


def is_participant(message: Message, acting_username: str) -> bool:
    """True if the acting user sent or received the message."""
    return acting_username in (message.from_username, message.to_username)


def require_participant(message: Message, acting_username: str) -> None:
    """Only the sender or the recipient may view a message."""
    if not is_participant(message, acting_username):
        raise ForbiddenError("Only the sender or recipient can view this message")


def require_recipient(message: Message, acting_username: str) -> None:
    """Only the recipient may acknowledge a message. The sender is rejected too."""
    if message.to_username != acting_username:
        raise ForbiddenError("Only the recipient can mark this message as read")


def require_self(acting_username: str, username: str) -> None:
    """Only the named user may list their own sent and received messages."""
    if acting_username != username:
        raise ForbiddenError("You can only view your own messages")
