"""API routers."""

from .contact import router as contact_router
from .courses import router as courses_router
from .health import router as health_router
from .me import router as me_router
from .sessions import router as sessions_router
from .users import router as users_router
from .videos import router as videos_router

__all__ = [
    "contact_router",
    "courses_router",
    "health_router",
    "me_router",
    "sessions_router",
    "users_router",
    "videos_router",
]
