"""Platform context FastAPI dependencies.

Resolves the platform for the current request from its hostname. FastAPI
caches dependency results per request, so the resolver runs at most once
per request no matter how many dependants ask for the platform.

Usage in FastAPI routes:
    @router.get("/example")
    async def example(
        platform: Annotated[ResolvedPlatform, Depends(require_platform)],
    ):
        # platform.id scopes all tenant data for this request
        ...

Routes that render differently with and without a platform depend on
``get_resolved_platform`` instead and receive ``None`` when no platform
applies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_read_session
from infrastructure.settings import TenancySettings, get_tenancy_settings
from platforms.application.services import PlatformResolver
from platforms.domain.host import HostRules
from platforms.infrastructure.platform_repository import PlatformRepository
from platforms.ports.exceptions import PlatformNotFoundError
from shared_kernel.middleware.observability import (
    DefaultPlatformContextProbe,
    PlatformContextProbe,
)
from shared_kernel.middleware.platform_context import ResolvedPlatform
from shared_kernel.observability_context import ObservationContext

REQUEST_ID_HEADER = "X-Request-ID"


def get_host_rules(
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> HostRules:
    """Build hostname classification rules from tenancy settings."""
    return HostRules(
        root_domain=settings.root_domain,
        subdomain_suffixes=tuple(settings.subdomain_suffixes),
        exempt_hosts=tuple(settings.exempt_hosts),
        api_prefix=settings.api_prefix,
        admin_prefix=settings.admin_prefix,
    )


def get_platform_context_probe(request: Request) -> PlatformContextProbe:
    """Get a PlatformContextProbe bound to the current request.

    Args:
        request: The incoming request

    Returns:
        DefaultPlatformContextProbe carrying request id and host
    """
    context = ObservationContext(
        request_id=request.headers.get(REQUEST_ID_HEADER),
        host=request.url.hostname,
    )
    return DefaultPlatformContextProbe().with_context(context)


def get_platform_resolver(
    session: Annotated[AsyncSession, Depends(get_read_session)],
    rules: Annotated[HostRules, Depends(get_host_rules)],
    probe: Annotated[PlatformContextProbe, Depends(get_platform_context_probe)],
    settings: Annotated[TenancySettings, Depends(get_tenancy_settings)],
) -> PlatformResolver:
    """Get PlatformResolver instance reading through the read session.

    Args:
        session: Read-only database session
        rules: Hostname classification rules
        probe: Request-bound probe
        settings: Tenancy settings (for fail_closed)

    Returns:
        PlatformResolver instance
    """
    return PlatformResolver(
        repository=PlatformRepository(session=session),
        rules=rules,
        probe=probe,
        fail_closed=settings.fail_closed,
    )


async def get_resolved_platform(
    request: Request,
    resolver: Annotated[PlatformResolver, Depends(get_platform_resolver)],
) -> ResolvedPlatform | None:
    """Resolve the platform for the current request, or None.

    Raises:
        PlatformResolutionError: Only when fail-closed resolution is enabled
            and the store lookup failed
    """
    return await resolver.resolve(request.url.hostname, request.url.path)


async def require_platform(
    request: Request,
    platform: Annotated[ResolvedPlatform | None, Depends(get_resolved_platform)],
    probe: Annotated[PlatformContextProbe, Depends(get_platform_context_probe)],
) -> ResolvedPlatform:
    """Require a resolved platform for the route.

    Rendered as 404 {"message": "Platform not found"} by the exception
    handlers in platforms.presentation.errors.

    Raises:
        PlatformNotFoundError: If no platform was resolved
    """
    if platform is None:
        probe.platform_required_but_missing(
            host=request.url.hostname or "",
            path=request.url.path,
        )
        raise PlatformNotFoundError("Platform not found")
    return platform
