"""API routers."""

from .skills import router as skills_router
from .connections import router as connections_router

__all__ = [
    "skills_router",
    "connections_router",
]
