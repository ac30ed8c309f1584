"""Platforms presentation layer - aggregate-based organization.

Management routes (platforms, domains) live under the API prefix, which
hostname resolution skips. Site routes live outside it and are scoped to
the platform resolved from the request hostname.
"""

from __future__ import annotations

from fastapi import APIRouter

from platforms.presentation import domains, platforms, site
from platforms.presentation.errors import register_exception_handlers

router = APIRouter(
    prefix="/api",
)

router.include_router(platforms.router)
router.include_router(domains.router)

site_router = site.router

__all__ = ["register_exception_handlers", "router", "site_router"]
