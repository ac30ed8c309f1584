from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from platforms.application.observability import (
    DefaultPlatformServiceProbe,
    PlatformServiceProbe,
)
from platforms.application.services import PlatformService
from platforms.infrastructure.platform_repository import PlatformRepository


def get_platform_service_probe() -> PlatformServiceProbe:
    """Get PlatformServiceProbe instance.

    Returns:
        DefaultPlatformServiceProbe instance for observability
    """
    return DefaultPlatformServiceProbe()


def get_platform_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> PlatformRepository:
    """Get PlatformRepository instance bound to the write session.

    Args:
        session: Async database session

    Returns:
        PlatformRepository instance
    """
    return PlatformRepository(session=session)


def get_platform_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    platform_repo: Annotated[PlatformRepository, Depends(get_platform_repository)],
    probe: Annotated[PlatformServiceProbe, Depends(get_platform_service_probe)],
) -> PlatformService:
    """Get PlatformService instance.

    Args:
        session: Async database session for transaction management
        platform_repo: Platform repository
        probe: Platform service probe for observability

    Returns:
        PlatformService instance
    """
    return PlatformService(
        platform_repository=platform_repo,
        session=session,
        probe=probe,
    )
