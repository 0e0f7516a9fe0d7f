"""Route registration helpers."""

from .auth import register_auth_routes
from .diary import register_diary_routes
from .home import register_home_routes

__all__ = [
    "register_auth_routes",
    "register_diary_routes",
    "register_home_routes",
]
