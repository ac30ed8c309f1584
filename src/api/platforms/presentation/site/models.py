"""Pydantic models for tenant site responses."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shared_kernel.middleware.platform_context import ResolvedPlatform


class ResolvedPlatformResponse(BaseModel):
    """The platform resolved for the request, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Platform ID")
    name: str = Field(..., description="Platform name")
    owner_id: str = Field(..., description="Owning user ID")
    config: Any = Field(..., description="Platform configuration")
    logo_url: str | None = Field(default=None, description="Logo URL")
    is_custom_domain: bool = Field(
        ..., description="Whether the platform was matched by custom domain"
    )
    domain: str = Field(..., description="Hostname that matched")

    @classmethod
    def from_resolved(cls, platform: ResolvedPlatform) -> ResolvedPlatformResponse:
        return cls(
            id=platform.id,
            name=platform.name,
            owner_id=platform.owner_id,
            config=platform.config,
            logo_url=platform.logo_url,
            is_custom_domain=platform.is_custom_domain,
            domain=platform.domain,
        )


class SiteMode(StrEnum):
    """Which site the landing route serves."""

    PLATFORM = "platform"
    MARKETING = "marketing"


class LandingResponse(BaseModel):
    """Landing route response: platform branding, or the marketing site."""

    mode: SiteMode = Field(..., description="Site being served")
    platform: ResolvedPlatformResponse | None = Field(
        default=None, description="Resolved platform, absent on the marketing site"
    )
