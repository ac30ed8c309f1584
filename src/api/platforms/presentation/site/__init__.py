"""Tenant site routes, scoped to the platform resolved from the hostname."""

from platforms.presentation.site.routes import router

__all__ = ["router"]
