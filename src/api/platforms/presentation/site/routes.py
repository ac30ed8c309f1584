"""HTTP routes for tenant sites."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from platforms.dependencies.platform_context import (
    get_resolved_platform,
    require_platform,
)
from platforms.presentation.site.models import (
    LandingResponse,
    ResolvedPlatformResponse,
    SiteMode,
)
from shared_kernel.middleware.platform_context import ResolvedPlatform

router = APIRouter(tags=["site"])


@router.get("/")
async def landing(
    platform: Annotated[ResolvedPlatform | None, Depends(get_resolved_platform)],
) -> LandingResponse:
    """Serve the platform's branding, or the marketing site when none applies.

    Unguarded: unknown hosts and resolution failures fall back to the
    marketing site.
    """
    if platform is None:
        return LandingResponse(mode=SiteMode.MARKETING)
    return LandingResponse(
        mode=SiteMode.PLATFORM,
        platform=ResolvedPlatformResponse.from_resolved(platform),
    )


@router.get("/platform")
async def current_platform(
    platform: Annotated[ResolvedPlatform, Depends(require_platform)],
) -> ResolvedPlatformResponse:
    """Get the platform resolved for this hostname.

    Raises:
        PlatformNotFoundError: Rendered as 404 {"message": "Platform not found"}
    """
    return ResolvedPlatformResponse.from_resolved(platform)


@router.get("/platform/config")
async def current_platform_config(
    platform: Annotated[ResolvedPlatform, Depends(require_platform)],
) -> Any:
    """Get the configuration blob of the platform resolved for this hostname."""
    return platform.config
