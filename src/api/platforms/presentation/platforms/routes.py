"""HTTP routes for platform management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from platforms.application.services import PlatformService
from platforms.dependencies.platform import get_platform_service
from platforms.ports.exceptions import (
    DuplicateSlugError,
    DuplicateSubdomainError,
    PlatformNotFoundError,
)
from platforms.presentation.platforms.models import (
    CreatePlatformRequest,
    PlatformResponse,
    UpdatePlatformRequest,
)

router = APIRouter(
    prefix="/platforms",
    tags=["platforms"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def create_platform(
    request: CreatePlatformRequest,
    service: Annotated[PlatformService, Depends(get_platform_service)],
) -> PlatformResponse:
    """Create a new platform.

    The slug is derived from the name and made unique; it doubles as the
    platform's subdomain.

    Args:
        request: Platform creation request
        service: Platform service for orchestration

    Returns:
        PlatformResponse with created platform details

    Raises:
        HTTPException: 409 if the slug or subdomain is already taken
        HTTPException: 500 for unexpected errors
    """
    try:
        platform = await service.create_platform(
            owner_id=request.owner_id,
            name=request.name,
            config=request.config,
            template_id=request.template_id,
            logo_url=request.logo_url,
        )
        return PlatformResponse.from_domain(platform)

    except (DuplicateSlugError, DuplicateSubdomainError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A platform with this subdomain already exists",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create platform",
        )


@router.get("")
async def list_platforms(
    service: Annotated[PlatformService, Depends(get_platform_service)],
    owner_id: Annotated[int | None, Query(description="Filter by owner")] = None,
) -> list[PlatformResponse]:
    """List platforms, optionally only those of one owner.

    Raises:
        HTTPException: 500 for unexpected errors
    """
    try:
        platforms = await service.list_platforms(owner_id=owner_id)
        return [PlatformResponse.from_domain(p) for p in platforms]

    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list platforms",
        )


@router.get("/{platform_id}")
async def get_platform(
    platform_id: int,
    service: Annotated[PlatformService, Depends(get_platform_service)],
) -> PlatformResponse:
    """Get platform by ID.

    Raises:
        HTTPException: 404 if platform not found
        HTTPException: 500 for unexpected errors
    """
    try:
        platform = await service.get_platform(platform_id)
        if platform is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Platform {platform_id} not found",
            )
        return PlatformResponse.from_domain(platform)

    except HTTPException:
        raise
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve platform",
        )


@router.put("/{platform_id}")
async def update_platform(
    platform_id: int,
    request: UpdatePlatformRequest,
    service: Annotated[PlatformService, Depends(get_platform_service)],
) -> PlatformResponse:
    """Update a platform's name, configuration, logo or published flag.

    Raises:
        HTTPException: 404 if platform not found
        HTTPException: 500 for unexpected errors
    """
    try:
        platform = await service.update_platform(
            platform_id,
            name=request.name,
            config=request.config,
            logo_url=request.logo_url,
            is_published=request.is_published,
        )
        return PlatformResponse.from_domain(platform)

    except PlatformNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Platform {platform_id} not found",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update platform",
        )


@router.delete(
    "/{platform_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Platform deleted successfully"},
        404: {"description": "Platform not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_platform(
    platform_id: int,
    service: Annotated[PlatformService, Depends(get_platform_service)],
) -> None:
    """Delete a platform and its custom domain registrations.

    Raises:
        HTTPException: 404 if platform not found
        HTTPException: 500 for unexpected errors
    """
    try:
        deleted = await service.delete_platform(platform_id)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete platform",
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Platform {platform_id} not found",
        )
