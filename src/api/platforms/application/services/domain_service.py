"""Custom domain application service.

Orchestrates custom domain registration, DNS ownership verification and
removal. A verified domain is written onto the platform row, which is the
value hostname resolution matches against.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from platforms.application.observability import (
    DefaultDomainServiceProbe,
    DomainServiceProbe,
)
from platforms.domain.aggregates import PlatformDomain, TradingPlatform
from platforms.domain.exceptions import InvalidDomainError
from platforms.domain.host import HostRules, normalize_custom_domain
from platforms.ports.exceptions import (
    DomainNotFoundError,
    DuplicateDomainError,
    PlatformNotFoundError,
)
from platforms.ports.repositories import IPlatformDomainRepository, IPlatformRepository
from platforms.ports.verification import IDomainVerifier


class DomainService:
    """Application service for custom domain management."""

    def __init__(
        self,
        platform_repository: IPlatformRepository,
        domain_repository: IPlatformDomainRepository,
        verifier: IDomainVerifier,
        rules: HostRules,
        session: AsyncSession,
        probe: DomainServiceProbe | None = None,
    ):
        """Initialize DomainService with dependencies.

        Args:
            platform_repository: Repository for platform persistence
            domain_repository: Repository for domain registrations
            verifier: DNS ownership verifier
            rules: Hostname rules, used to reject reserved domains
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._platform_repository = platform_repository
        self._domain_repository = domain_repository
        self._verifier = verifier
        self._rules = rules
        self._session = session
        self._probe = probe or DefaultDomainServiceProbe()

    async def add_custom_domain(self, platform_id: int, domain: str) -> PlatformDomain:
        """Register a custom domain as pending verification.

        Args:
            platform_id: Platform the domain should route to
            domain: Domain supplied by the owner, any case

        Returns:
            The pending registration carrying the verification token

        Raises:
            InvalidDomainError: If the domain is malformed or reserved
            PlatformNotFoundError: If the platform does not exist
            DuplicateDomainError: If the domain is registered already
        """
        try:
            normalized = normalize_custom_domain(domain, self._rules)
        except InvalidDomainError as e:
            self._probe.domain_rejected(domain, reason=str(e))
            raise

        async with self._session.begin():
            await self._get_platform(platform_id)

            if await self._domain_repository.get_by_domain(normalized) is not None:
                self._probe.duplicate_domain(normalized)
                raise DuplicateDomainError(f"Domain '{normalized}' is already registered")

            try:
                record = await self._domain_repository.save(
                    PlatformDomain.register(platform_id=platform_id, domain=normalized)
                )
            except DuplicateDomainError:
                self._probe.duplicate_domain(normalized)
                raise

        self._probe.domain_registered(platform_id, normalized)
        return record

    async def verify_domain(self, platform_id: int, domain: str) -> bool:
        """Check DNS for the verification token and activate the domain.

        Returns:
            True if the domain is (now) active, False if the token was not
            found

        Raises:
            DomainNotFoundError: If the domain is not registered for the
                platform
        """
        normalized = domain.strip().lower()
        async with self._session.begin():
            record = await self._domain_repository.get(platform_id, normalized)
            if record is None:
                self._probe.domain_not_found(platform_id, normalized)
                raise DomainNotFoundError(
                    f"Domain '{normalized}' is not registered for platform {platform_id}"
                )

            if record.is_active:
                return True

            if not await self._verifier.verify(record.domain, record.verification_token):
                self._probe.domain_verification_pending(platform_id, normalized)
                return False

            record.mark_verified()
            await self._domain_repository.save(record)

            platform = await self._get_platform(platform_id)
            platform.attach_custom_domain(record.domain)
            await self._platform_repository.save(platform)

        self._probe.domain_verified(platform_id, normalized)
        return True

    async def remove_domain(self, platform_id: int, domain: str) -> bool:
        """Delete a registration and stop routing the domain.

        Returns:
            True if the registration existed and was deleted
        """
        normalized = domain.strip().lower()
        async with self._session.begin():
            record = await self._domain_repository.get(platform_id, normalized)
            if record is None:
                self._probe.domain_not_found(platform_id, normalized)
                return False

            await self._domain_repository.delete(record)

            detached = False
            platform = await self._platform_repository.get_by_id(platform_id)
            if platform is not None and platform.detach_custom_domain(normalized):
                await self._platform_repository.save(platform)
                detached = True

        self._probe.domain_removed(platform_id, normalized, detached=detached)
        return True

    async def list_domains(self, platform_id: int) -> list[PlatformDomain]:
        """List a platform's domain registrations.

        Raises:
            PlatformNotFoundError: If the platform does not exist
        """
        await self._get_platform(platform_id)
        return await self._domain_repository.list_by_platform(platform_id)

    async def _get_platform(self, platform_id: int) -> TradingPlatform:
        platform = await self._platform_repository.get_by_id(platform_id)
        if platform is None:
            raise PlatformNotFoundError(f"Platform {platform_id} not found")
        return platform
