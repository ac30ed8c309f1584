"""Platform management routes."""

from platforms.presentation.platforms.routes import router

__all__ = ["router"]
