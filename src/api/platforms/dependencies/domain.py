from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_write_session
from infrastructure.settings import (
    DomainVerificationSettings,
    get_domain_verification_settings,
)
from platforms.application.observability import (
    DefaultDomainServiceProbe,
    DomainServiceProbe,
)
from platforms.application.services import DomainService
from platforms.dependencies.platform import get_platform_repository
from platforms.dependencies.platform_context import get_host_rules
from platforms.domain.host import HostRules
from platforms.infrastructure.dns_verifier import DohDomainVerifier
from platforms.infrastructure.platform_domain_repository import (
    PlatformDomainRepository,
)
from platforms.infrastructure.platform_repository import PlatformRepository
from platforms.ports.verification import IDomainVerifier


def get_domain_service_probe() -> DomainServiceProbe:
    """Get DomainServiceProbe instance."""
    return DefaultDomainServiceProbe()


def get_domain_verifier(
    settings: Annotated[
        DomainVerificationSettings, Depends(get_domain_verification_settings)
    ],
) -> IDomainVerifier:
    """Get the DNS-over-HTTPS domain verifier configured from settings."""
    return DohDomainVerifier(
        resolver_url=settings.resolver_url,
        record_prefix=settings.record_prefix,
        timeout_seconds=settings.timeout_seconds,
    )


def get_platform_domain_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> PlatformDomainRepository:
    """Get PlatformDomainRepository instance bound to the write session."""
    return PlatformDomainRepository(session=session)


def get_domain_service(
    session: Annotated[AsyncSession, Depends(get_write_session)],
    platform_repo: Annotated[PlatformRepository, Depends(get_platform_repository)],
    domain_repo: Annotated[
        PlatformDomainRepository, Depends(get_platform_domain_repository)
    ],
    verifier: Annotated[IDomainVerifier, Depends(get_domain_verifier)],
    rules: Annotated[HostRules, Depends(get_host_rules)],
    probe: Annotated[DomainServiceProbe, Depends(get_domain_service_probe)],
) -> DomainService:
    """Get DomainService instance.

    Args:
        session: Async database session for transaction management
        platform_repo: Platform repository
        domain_repo: Domain registration repository
        verifier: DNS ownership verifier
        rules: Hostname rules
        probe: Domain service probe for observability

    Returns:
        DomainService instance
    """
    return DomainService(
        platform_repository=platform_repo,
        domain_repository=domain_repo,
        verifier=verifier,
        rules=rules,
        session=session,
        probe=probe,
    )
