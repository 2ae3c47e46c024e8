"""Input checks shared by the services. Run before any storage access."""

import re

from app.errors import ValidationError

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")
MAX_PASSWORD_BYTES = 72


def require_text(value: object, field: str, strip: bool = True) -> str:
    """Return ``value`` (stripped unless ``strip`` is False) or raise ValidationError if it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip() if strip else value


def require_username(value: object, field: str = "username") -> str:
    """Return a well-formed username or raise ValidationError."""
    username = require_text(value, field)
    if not USERNAME_PATTERN.match(username):
        raise ValidationError(f"{field} must be 1-64 characters of letters, digits, '_', '.' or '-'")
    return username


def password_too_long(password: str) -> bool:
    """bcrypt only accepts up to 72 bytes of input."""
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def require_password(value: object) -> str:
    """Return the password unchanged or raise ValidationError if it is blank or longer than bcrypt accepts."""
    password = require_text(value, "password", strip=False)
    if password_too_long(password):
        raise ValidationError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return password
