"""API routers."""

from app.routers.auth import router as auth_router
from app.routers.messages import router as messages_router
from app.routers.users import router as users_router

__all__ = ["auth_router", "users_router", "messages_router"]
