"""Resolved platform value object for hostname-based tenant identification.

This module contains the pure value object that represents the platform
(tenant) selected for the current request. It is framework-agnostic and
contains no business logic, making it safe for the shared kernel.

The actual resolution logic (host classification, store lookups, failure
policy) lives in the platforms bounded context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolvedPlatform:
    """Platform resolved for the current request.

    Lives for exactly one request and is never persisted. Handlers receive
    it by parameter; absence of a platform is expressed as ``None``.

    Attributes:
        id: Platform identifier.
        name: Display name of the platform.
        owner_id: Identifier of the owning user, rendered as a string.
        config: Opaque platform configuration blob.
        logo_url: Optional logo URL.
        is_custom_domain: True when matched through a custom domain,
            False when matched through a platform subdomain.
        domain: The lowercase hostname that triggered the match.
    """

    id: int
    name: str
    owner_id: str
    config: Any
    logo_url: str | None
    is_custom_domain: bool
    domain: str
