"""Custom domain registration aggregate."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime

from platforms.domain.value_objects import (
    VERIFICATION_TOKEN_PREFIX,
    DomainStatus,
    VerificationMethod,
)


def generate_verification_token() -> str:
    """Create a fresh ownership token: prefix plus 32 hex characters."""
    return f"{VERIFICATION_TOKEN_PREFIX}{secrets.token_hex(16)}"


@dataclass
class PlatformDomain:
    """A custom domain a platform owner wants to route to their platform.

    Registration starts ``pending``. The owner publishes the verification
    token in a DNS TXT record; once seen the domain becomes ``active`` and
    is attached to the platform.
    """

    id: int | None
    platform_id: int
    domain: str
    verification_token: str
    verification_method: VerificationMethod = VerificationMethod.DNS_TXT
    status: DomainStatus = DomainStatus.PENDING
    verified_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def register(cls, platform_id: int, domain: str) -> PlatformDomain:
        """Factory for a new pending registration with a fresh token."""
        return cls(
            id=None,
            platform_id=platform_id,
            domain=domain,
            verification_token=generate_verification_token(),
        )

    @property
    def is_active(self) -> bool:
        return self.status is DomainStatus.ACTIVE

    def mark_verified(self, now: datetime | None = None) -> None:
        """Activate the domain after ownership was proven."""
        self.status = DomainStatus.ACTIVE
        self.verified_at = now or datetime.now(UTC)
