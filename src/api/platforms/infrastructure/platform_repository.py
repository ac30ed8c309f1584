"""PostgreSQL implementation of IPlatformRepository.

Stores trading platforms in the trading_platforms table. The subdomain and
custom domain lookups back hostname resolution and are plain exact-match
reads with no caching.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from platforms.domain.aggregates import TradingPlatform
from platforms.infrastructure.models import TradingPlatformModel
from platforms.infrastructure.observability import (
    DefaultPlatformRepositoryProbe,
    PlatformRepositoryProbe,
)
from platforms.ports.exceptions import (
    DuplicateDomainError,
    DuplicateSlugError,
    DuplicateSubdomainError,
    PlatformNotFoundError,
)
from platforms.ports.repositories import IPlatformRepository


def _to_domain(model: TradingPlatformModel) -> TradingPlatform:
    """Reconstitute a platform aggregate from its row."""
    return TradingPlatform(
        id=model.id,
        owner_id=model.user_id,
        name=model.name,
        slug=model.slug,
        config=model.config,
        subdomain=model.subdomain,
        custom_domain=model.custom_domain,
        logo_url=model.logo_url,
        template_id=model.template_id,
        is_published=bool(model.is_published),
    )


class PlatformRepository(IPlatformRepository):
    """Repository managing PostgreSQL storage for TradingPlatform aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: PlatformRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultPlatformRepositoryProbe()

    async def save(self, platform: TradingPlatform) -> TradingPlatform:
        """Insert or update a platform.

        Args:
            platform: The platform to persist

        Returns:
            The platform with its id set

        Raises:
            PlatformNotFoundError: If updating a platform that no longer exists
            DuplicateSlugError: If the slug is taken
            DuplicateSubdomainError: If the subdomain is taken
            DuplicateDomainError: If the custom domain is attached elsewhere
        """
        created = platform.id is None
        try:
            if created:
                model = TradingPlatformModel(
                    user_id=platform.owner_id,
                    name=platform.name,
                    slug=platform.slug,
                    subdomain=platform.subdomain,
                    custom_domain=platform.custom_domain,
                    template_id=platform.template_id,
                    config=platform.config,
                    logo_url=platform.logo_url,
                    is_published=platform.is_published,
                )
                self._session.add(model)
            else:
                model = await self._get_model(platform.id)
                if model is None:
                    raise PlatformNotFoundError(f"Platform {platform.id} not found")
                model.name = platform.name
                model.slug = platform.slug
                model.subdomain = platform.subdomain
                model.custom_domain = platform.custom_domain
                model.template_id = platform.template_id
                model.config = platform.config
                model.logo_url = platform.logo_url
                model.is_published = platform.is_published

            # Flush to surface unique violations and obtain the serial id
            await self._session.flush()

        except IntegrityError as e:
            self._raise_duplicate(e, platform)
            raise

        platform.id = model.id
        self._probe.platform_saved(model.id, created=created)
        return platform

    def _raise_duplicate(self, error: IntegrityError, platform: TradingPlatform) -> None:
        """Translate a unique index violation into a port exception."""
        message = str(error)
        if "ix_trading_platforms_subdomain" in message:
            self._probe.duplicate_key_detected("subdomain", platform.subdomain)
            raise DuplicateSubdomainError(
                f"Subdomain '{platform.subdomain}' is already in use"
            ) from error
        if "ix_trading_platforms_custom_domain" in message:
            self._probe.duplicate_key_detected("custom_domain", platform.custom_domain)
            raise DuplicateDomainError(
                f"Domain '{platform.custom_domain}' is already in use"
            ) from error
        if "ix_trading_platforms_slug" in message:
            self._probe.duplicate_key_detected("slug", platform.slug)
            raise DuplicateSlugError(
                f"Slug '{platform.slug}' is already in use"
            ) from error

    async def _get_model(self, platform_id: int) -> TradingPlatformModel | None:
        stmt = select(TradingPlatformModel).where(TradingPlatformModel.id == platform_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, platform_id: int) -> TradingPlatform | None:
        """Fetch a platform by id."""
        model = await self._get_model(platform_id)
        return _to_domain(model) if model is not None else None

    async def get_by_subdomain(self, subdomain: str) -> TradingPlatform | None:
        """Fetch the platform whose subdomain exactly equals ``subdomain``."""
        stmt = (
            select(TradingPlatformModel)
            .where(TradingPlatformModel.subdomain == subdomain)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def get_by_custom_domain(self, domain: str) -> TradingPlatform | None:
        """Fetch the platform whose custom domain exactly equals ``domain``."""
        stmt = (
            select(TradingPlatformModel)
            .where(TradingPlatformModel.custom_domain == domain)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model is not None else None

    async def slug_exists(self, slug: str) -> bool:
        """Whether any platform already uses ``slug``."""
        stmt = (
            select(TradingPlatformModel.id)
            .where(TradingPlatformModel.slug == slug)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_all(self, owner_id: int | None = None) -> list[TradingPlatform]:
        """List platforms ordered by id, optionally filtered by owner."""
        stmt = select(TradingPlatformModel).order_by(TradingPlatformModel.id)
        if owner_id is not None:
            stmt = stmt.where(TradingPlatformModel.user_id == owner_id)
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def list_without_subdomain(self) -> list[TradingPlatform]:
        """List platforms whose subdomain is NULL or empty."""
        stmt = (
            select(TradingPlatformModel)
            .where(
                (TradingPlatformModel.subdomain.is_(None))
                | (TradingPlatformModel.subdomain == "")
            )
            .order_by(TradingPlatformModel.id)
        )
        result = await self._session.execute(stmt)
        return [_to_domain(model) for model in result.scalars().all()]

    async def delete(self, platform_id: int) -> bool:
        """Delete a platform; its domain registrations cascade."""
        model = await self._get_model(platform_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.platform_deleted(platform_id)
        return True
