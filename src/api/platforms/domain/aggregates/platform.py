"""Trading platform aggregate."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterator

from shared_kernel.middleware.platform_context import ResolvedPlatform

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")

DEFAULT_SLUG = "platform"


def slugify(name: str) -> str:
    """Turn a platform name into a URL and DNS label friendly slug.

    Runs of characters outside ``[a-z0-9]`` become a single hyphen and
    leading/trailing hyphens are trimmed. Names without any usable
    character fall back to ``"platform"``.
    """
    slug = _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")
    return slug or DEFAULT_SLUG


def candidate_slugs(base: str) -> Iterator[str]:
    """Yield ``base``, then ``base-1``, ``base-2``, ... without end."""
    yield base
    counter = 1
    while True:
        yield f"{base}-{counter}"
        counter += 1


@dataclass
class TradingPlatform:
    """A branded trading site owned by a user.

    The platform is reachable under ``<subdomain>.<root domain>`` and, once
    a custom domain has been verified, under that domain too.

    Business rules:
    - Slugs, subdomains and custom domains are globally unique (enforced by
      the repository and storage)
    - A new platform takes its slug as subdomain
    - Routing keys are stored lowercase
    """

    id: int | None
    owner_id: int
    name: str
    slug: str
    config: dict[str, Any] = field(default_factory=dict)
    subdomain: str | None = None
    custom_domain: str | None = None
    logo_url: str | None = None
    template_id: int | None = None
    is_published: bool = False

    @classmethod
    def create(
        cls,
        owner_id: int,
        name: str,
        slug: str,
        config: dict[str, Any],
        template_id: int | None = None,
        logo_url: str | None = None,
    ) -> TradingPlatform:
        """Factory for a new, not yet persisted platform.

        Args:
            owner_id: Owning user
            name: Display name
            slug: Unique slug, already checked for collisions
            config: Platform configuration blob
            template_id: Optional template the platform was built from
            logo_url: Optional logo URL

        Returns:
            A TradingPlatform without id whose subdomain is its slug
        """
        return cls(
            id=None,
            owner_id=owner_id,
            name=name,
            slug=slug,
            config=config,
            subdomain=slug,
            logo_url=logo_url,
            template_id=template_id,
        )

    def assign_subdomain_from_slug(self) -> bool:
        """Use the slug as subdomain when none is set.

        Returns:
            True if the subdomain changed
        """
        if self.subdomain:
            return False
        self.subdomain = self.slug
        return True

    def attach_custom_domain(self, domain: str) -> None:
        """Route ``domain`` to this platform."""
        self.custom_domain = domain.lower()

    def detach_custom_domain(self, domain: str) -> bool:
        """Stop routing ``domain`` to this platform.

        Returns:
            True if ``domain`` was the platform's custom domain
        """
        if self.custom_domain != domain.lower():
            return False
        self.custom_domain = None
        return True

    def to_resolved(self, domain: str, is_custom_domain: bool) -> ResolvedPlatform:
        """Build the request-scoped view of this platform.

        Args:
            domain: Hostname that matched
            is_custom_domain: Whether the match came from the custom domain

        Returns:
            ResolvedPlatform with the owner id rendered as a string
        """
        if self.id is None:
            raise ValueError("Cannot resolve a platform that was never persisted")
        return ResolvedPlatform(
            id=self.id,
            name=self.name,
            owner_id=str(self.owner_id),
            config=self.config,
            logo_url=self.logo_url,
            is_custom_domain=is_custom_domain,
            domain=domain,
        )
