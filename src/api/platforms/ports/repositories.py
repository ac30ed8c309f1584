"""Repository protocols (ports) for the platforms bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. The PostgreSQL implementations live in
``platforms.infrastructure``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from platforms.domain.aggregates import PlatformDomain, TradingPlatform


@runtime_checkable
class IPlatformRepository(Protocol):
    """Repository for TradingPlatform aggregate persistence.

    The two routing-key lookups (``get_by_subdomain`` and
    ``get_by_custom_domain``) are the only queries platform resolution
    issues. Each returns at most one platform; uniqueness is guaranteed by
    storage, not by callers.
    """

    async def save(self, platform: TradingPlatform) -> TradingPlatform:
        """Persist a platform aggregate.

        Creates the platform when it has no id yet, otherwise updates it.

        Args:
            platform: The platform to persist

        Returns:
            The persisted platform, with its id set

        Raises:
            DuplicateSlugError: If the slug is taken
            DuplicateSubdomainError: If the subdomain is taken
            DuplicateDomainError: If the custom domain is attached elsewhere
        """
        ...

    async def get_by_id(self, platform_id: int) -> TradingPlatform | None:
        """Retrieve a platform by its id."""
        ...

    async def get_by_subdomain(self, subdomain: str) -> TradingPlatform | None:
        """Retrieve the platform whose subdomain exactly equals ``subdomain``."""
        ...

    async def get_by_custom_domain(self, domain: str) -> TradingPlatform | None:
        """Retrieve the platform whose custom domain exactly equals ``domain``."""
        ...

    async def slug_exists(self, slug: str) -> bool:
        """Whether any platform already uses ``slug``."""
        ...

    async def list_all(self, owner_id: int | None = None) -> list[TradingPlatform]:
        """List platforms, optionally only those of one owner."""
        ...

    async def list_without_subdomain(self) -> list[TradingPlatform]:
        """List platforms that have no subdomain assigned."""
        ...

    async def delete(self, platform_id: int) -> bool:
        """Delete a platform.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IPlatformDomainRepository(Protocol):
    """Repository for custom domain registrations."""

    async def save(self, record: PlatformDomain) -> PlatformDomain:
        """Persist a registration, creating or updating it.

        Raises:
            DuplicateDomainError: If the domain is registered already
        """
        ...

    async def get(self, platform_id: int, domain: str) -> PlatformDomain | None:
        """Retrieve the registration of ``domain`` for one platform."""
        ...

    async def get_by_domain(self, domain: str) -> PlatformDomain | None:
        """Retrieve the registration of ``domain`` for any platform."""
        ...

    async def list_by_platform(self, platform_id: int) -> list[PlatformDomain]:
        """List all registrations of a platform."""
        ...

    async def delete(self, record: PlatformDomain) -> bool:
        """Delete a registration.

        Returns:
            True if deleted, False if not found
        """
        ...
