"""Pydantic models for platform API requests and responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from platforms.domain.aggregates import TradingPlatform


class CreatePlatformRequest(BaseModel):
    """Request model for creating a platform."""

    owner_id: int = Field(..., description="Owning user ID")
    name: str = Field(..., description="Platform name", min_length=1, max_length=255)
    config: dict[str, Any] = Field(
        default_factory=dict, description="Platform configuration"
    )
    template_id: int | None = Field(default=None, description="Template ID")
    logo_url: str | None = Field(default=None, description="Logo URL")


class UpdatePlatformRequest(BaseModel):
    """Request model for updating a platform. Omitted fields stay unchanged."""

    name: str | None = Field(
        default=None, description="Platform name", min_length=1, max_length=255
    )
    config: dict[str, Any] | None = Field(
        default=None, description="Platform configuration"
    )
    logo_url: str | None = Field(default=None, description="Logo URL")
    is_published: bool | None = Field(default=None, description="Published flag")


class PlatformResponse(BaseModel):
    """Response model for platform."""

    id: int = Field(..., description="Platform ID")
    owner_id: int = Field(..., description="Owning user ID")
    name: str = Field(..., description="Platform name")
    slug: str = Field(..., description="Unique slug")
    subdomain: str | None = Field(default=None, description="Routing subdomain")
    custom_domain: str | None = Field(
        default=None, description="Verified custom domain"
    )
    config: dict[str, Any] = Field(..., description="Platform configuration")
    logo_url: str | None = Field(default=None, description="Logo URL")
    template_id: int | None = Field(default=None, description="Template ID")
    is_published: bool = Field(..., description="Published flag")

    @classmethod
    def from_domain(cls, platform: TradingPlatform) -> PlatformResponse:
        """Convert domain TradingPlatform aggregate to API response.

        Args:
            platform: TradingPlatform domain aggregate

        Returns:
            PlatformResponse
        """
        assert platform.id is not None
        return cls(
            id=platform.id,
            owner_id=platform.owner_id,
            name=platform.name,
            slug=platform.slug,
            subdomain=platform.subdomain,
            custom_domain=platform.custom_domain,
            config=platform.config,
            logo_url=platform.logo_url,
            template_id=platform.template_id,
            is_published=platform.is_published,
        )
