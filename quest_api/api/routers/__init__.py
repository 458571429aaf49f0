"""API routers."""

from .challenges import router as challenges_router
from .images import router as images_router
from .me import router as me_router
from .quests import router as quests_router
from .root import router as root_router
from .users import router as users_router

__all__ = [
    "challenges_router",
    "images_router",
    "me_router",
    "quests_router",
    "root_router",
    "users_router",
]
