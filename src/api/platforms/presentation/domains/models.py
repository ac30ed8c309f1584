"""Pydantic models for custom domain API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from platforms.domain.aggregates import PlatformDomain


class AddDomainRequest(BaseModel):
    """Request model for registering a custom domain."""

    domain: str = Field(
        ..., description="Custom domain, e.g. trade.example.com", min_length=1, max_length=253
    )


class DomainResponse(BaseModel):
    """Response model for a custom domain registration.

    ``txt_record`` names the DNS record that must carry
    ``verification_token`` for verification to succeed.
    """

    id: int = Field(..., description="Registration ID")
    platform_id: int = Field(..., description="Platform ID")
    domain: str = Field(..., description="Custom domain")
    status: str = Field(..., description="pending or active")
    verification_method: str = Field(..., description="Verification method")
    verification_token: str = Field(..., description="Token to publish")
    txt_record: str = Field(..., description="TXT record name to publish the token at")
    verified_at: datetime | None = Field(default=None, description="Verification time")

    @classmethod
    def from_domain(cls, record: PlatformDomain, record_prefix: str) -> DomainResponse:
        """Convert a PlatformDomain registration to API response.

        Args:
            record: PlatformDomain domain aggregate
            record_prefix: Label of the verification TXT record

        Returns:
            DomainResponse
        """
        assert record.id is not None
        return cls(
            id=record.id,
            platform_id=record.platform_id,
            domain=record.domain,
            status=record.status.value,
            verification_method=record.verification_method.value,
            verification_token=record.verification_token,
            txt_record=f"{record_prefix}.{record.domain}",
            verified_at=record.verified_at,
        )


class VerifyDomainResponse(BaseModel):
    """Response model for a verification attempt."""

    domain: str = Field(..., description="Custom domain")
    verified: bool = Field(..., description="Whether the domain is active")
