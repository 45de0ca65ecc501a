"""API routes package."""

from dirlist.routes.directory_routes import router as directory_router
from dirlist.routes.entry_routes import router as entry_router

__all__ = ["directory_router", "entry_router"]
