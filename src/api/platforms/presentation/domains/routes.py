"""HTTP routes for custom domain management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from infrastructure.settings import (
    DomainVerificationSettings,
    get_domain_verification_settings,
)
from platforms.application.services import DomainService
from platforms.dependencies.domain import get_domain_service
from platforms.domain.exceptions import InvalidDomainError
from platforms.ports.exceptions import (
    DomainNotFoundError,
    DuplicateDomainError,
    PlatformNotFoundError,
)
from platforms.presentation.domains.models import (
    AddDomainRequest,
    DomainResponse,
    VerifyDomainResponse,
)

router = APIRouter(
    prefix="/platforms/{platform_id}/domains",
    tags=["domains"],
)


@router.get("")
async def list_domains(
    platform_id: int,
    service: Annotated[DomainService, Depends(get_domain_service)],
    settings: Annotated[
        DomainVerificationSettings, Depends(get_domain_verification_settings)
    ],
) -> list[DomainResponse]:
    """List a platform's custom domain registrations.

    Raises:
        HTTPException: 404 if platform not found
        HTTPException: 500 for unexpected errors
    """
    try:
        records = await service.list_domains(platform_id)
        return [DomainResponse.from_domain(r, settings.record_prefix) for r in records]

    except PlatformNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Platform {platform_id} not found",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list domains",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
)
async def add_domain(
    platform_id: int,
    request: AddDomainRequest,
    service: Annotated[DomainService, Depends(get_domain_service)],
    settings: Annotated[
        DomainVerificationSettings, Depends(get_domain_verification_settings)
    ],
) -> DomainResponse:
    """Register a custom domain pending DNS verification.

    The response carries the token to publish as a TXT record at
    ``txt_record``.

    Raises:
        HTTPException: 400 if the domain is malformed or reserved
        HTTPException: 404 if platform not found
        HTTPException: 409 if the domain is already registered
        HTTPException: 500 for unexpected errors
    """
    try:
        record = await service.add_custom_domain(platform_id, request.domain)
        return DomainResponse.from_domain(record, settings.record_prefix)

    except InvalidDomainError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except PlatformNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Platform {platform_id} not found",
        )
    except DuplicateDomainError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This domain is already registered",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add domain",
        )


@router.post("/{domain}/verify")
async def verify_domain(
    platform_id: int,
    domain: str,
    service: Annotated[DomainService, Depends(get_domain_service)],
) -> VerifyDomainResponse:
    """Check DNS for the verification token and activate the domain.

    Raises:
        HTTPException: 404 if the domain is not registered for the platform
        HTTPException: 500 for unexpected errors
    """
    try:
        verified = await service.verify_domain(platform_id, domain)
        return VerifyDomainResponse(domain=domain.lower(), verified=verified)

    except DomainNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Domain {domain} not found",
        )
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to verify domain",
        )


@router.delete(
    "/{domain}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Domain removed successfully"},
        404: {"description": "Domain not found"},
        500: {"description": "Internal server error"},
    },
)
async def remove_domain(
    platform_id: int,
    domain: str,
    service: Annotated[DomainService, Depends(get_domain_service)],
) -> None:
    """Remove a custom domain and stop routing it to the platform.

    Raises:
        HTTPException: 404 if the domain is not registered for the platform
        HTTPException: 500 for unexpected errors
    """
    try:
        removed = await service.remove_domain(platform_id, domain)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove domain",
        )

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Domain {domain} not found",
        )
