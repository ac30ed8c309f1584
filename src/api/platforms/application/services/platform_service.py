"""Platform application service.

Handles platform management operations (create, read, list, update,
delete) and the subdomain back-fill for platforms created before
subdomains existed.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from platforms.application.observability import (
    DefaultPlatformServiceProbe,
    PlatformServiceProbe,
)
from platforms.domain.aggregates import TradingPlatform, slugify
from platforms.domain.aggregates.platform import candidate_slugs
from platforms.ports.exceptions import DuplicateSubdomainError, PlatformNotFoundError
from platforms.ports.repositories import IPlatformRepository


class PlatformService:
    """Application service for platform management."""

    def __init__(
        self,
        platform_repository: IPlatformRepository,
        session: AsyncSession,
        probe: PlatformServiceProbe | None = None,
    ):
        """Initialize PlatformService with dependencies.

        Args:
            platform_repository: Repository for platform persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._platform_repository = platform_repository
        self._session = session
        self._probe = probe or DefaultPlatformServiceProbe()

    async def create_platform(
        self,
        owner_id: int,
        name: str,
        config: dict[str, Any],
        template_id: int | None = None,
        logo_url: str | None = None,
    ) -> TradingPlatform:
        """Create a platform with a unique slug used as its subdomain.

        Args:
            owner_id: Owning user
            name: Display name, the slug is derived from it
            config: Platform configuration blob
            template_id: Optional template id
            logo_url: Optional logo URL

        Returns:
            The created platform

        Raises:
            DuplicateSubdomainError: If another platform already uses the
                slug as its subdomain
        """
        async with self._session.begin():
            slug = await self._allocate_slug(name)
            platform = TradingPlatform.create(
                owner_id=owner_id,
                name=name,
                slug=slug,
                config=config,
                template_id=template_id,
                logo_url=logo_url,
            )
            try:
                platform = await self._platform_repository.save(platform)
            except DuplicateSubdomainError:
                self._probe.duplicate_subdomain(platform.subdomain)
                raise

            assert platform.id is not None
            self._probe.platform_created(
                platform_id=platform.id,
                slug=slug,
                owner_id=owner_id,
            )
            return platform

    async def _allocate_slug(self, name: str) -> str:
        """Return the first free slug among name-slug, name-slug-1, ..."""
        for candidate in candidate_slugs(slugify(name)):
            if not await self._platform_repository.slug_exists(candidate):
                return candidate
        raise AssertionError("unreachable")  # candidate_slugs never ends

    async def get_platform(self, platform_id: int) -> TradingPlatform | None:
        """Retrieve a platform by id, or None if it does not exist."""
        platform = await self._platform_repository.get_by_id(platform_id)
        if platform is None:
            self._probe.platform_not_found(platform_id)
        return platform

    async def list_platforms(self, owner_id: int | None = None) -> list[TradingPlatform]:
        """List all platforms, or the platforms of one owner."""
        return await self._platform_repository.list_all(owner_id=owner_id)

    async def update_platform(
        self,
        platform_id: int,
        name: str | None = None,
        config: dict[str, Any] | None = None,
        logo_url: str | None = None,
        is_published: bool | None = None,
    ) -> TradingPlatform:
        """Update mutable platform attributes. None leaves a field unchanged.

        The slug and routing keys are not touched; custom domains change
        through DomainService.

        Raises:
            PlatformNotFoundError: If the platform does not exist
        """
        async with self._session.begin():
            platform = await self._platform_repository.get_by_id(platform_id)
            if platform is None:
                self._probe.platform_not_found(platform_id)
                raise PlatformNotFoundError(f"Platform {platform_id} not found")

            if name is not None:
                platform.name = name
            if config is not None:
                platform.config = config
            if logo_url is not None:
                platform.logo_url = logo_url
            if is_published is not None:
                platform.is_published = is_published

            platform = await self._platform_repository.save(platform)
            self._probe.platform_updated(platform_id)
            return platform

    async def delete_platform(self, platform_id: int) -> bool:
        """Delete a platform and its custom domain registrations.

        Returns:
            True if deleted, False if not found
        """
        async with self._session.begin():
            deleted = await self._platform_repository.delete(platform_id)

        if deleted:
            self._probe.platform_deleted(platform_id)
        else:
            self._probe.platform_not_found(platform_id)
        return deleted

    async def assign_missing_subdomains(self) -> int:
        """Give every platform without a subdomain its slug as subdomain.

        Platforms whose slug is already some other platform's subdomain are
        skipped and logged.

        Returns:
            Number of platforms updated
        """
        updated = 0
        async with self._session.begin():
            for platform in await self._platform_repository.list_without_subdomain():
                assert platform.id is not None
                holder = await self._platform_repository.get_by_subdomain(platform.slug)
                if holder is not None and holder.id != platform.id:
                    self._probe.subdomain_backfill_skipped(platform.id, platform.slug)
                    continue

                if platform.assign_subdomain_from_slug():
                    await self._platform_repository.save(platform)
                    self._probe.subdomain_assigned(platform.id, platform.slug)
                    updated += 1

        return updated
