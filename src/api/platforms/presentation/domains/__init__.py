"""Custom domain management routes."""

from platforms.presentation.domains.routes import router

__all__ = ["router"]
