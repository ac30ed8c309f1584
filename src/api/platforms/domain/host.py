"""Hostname classification for platform resolution.

Decides, without touching storage, whether a request is exempt from
platform resolution and otherwise which routing key to look up. The
subdomain check always runs before the custom domain fallback, so a host
that satisfies both shapes resolves through its subdomain.
"""

from __future__ import annotations

from dataclasses import dataclass

from platforms.domain.exceptions import InvalidDomainError, InvalidHostError
from platforms.domain.value_objects import (
    CUSTOM_DOMAIN_PATTERN,
    ExemptReason,
    LookupKind,
)


@dataclass(frozen=True)
class HostRules:
    """Routing rules for hostname classification.

    Attributes:
        root_domain: Marketing site domain, never resolved.
        subdomain_suffixes: Suffixes (with leading dot) marking platform
            subdomains.
        exempt_hosts: Additional hosts that are never resolved.
        api_prefix: Path prefix of API routes.
        admin_prefix: Path prefix of admin routes.
    """

    root_domain: str = "liquidlab.trade"
    subdomain_suffixes: tuple[str, ...] = (".liquidlab.trade", ".app.liquidlab.trade")
    exempt_hosts: tuple[str, ...] = ("localhost",)
    api_prefix: str = "/api/"
    admin_prefix: str = "/admin/"

    def is_reserved(self, host: str) -> bool:
        """Whether the host belongs to the platform's own namespace."""
        return host == self.root_domain or any(
            host.endswith(suffix) for suffix in self.subdomain_suffixes
        )


@dataclass(frozen=True)
class ExemptRequest:
    """Classification result for requests that skip resolution."""

    host: str
    reason: ExemptReason


@dataclass(frozen=True)
class HostLookup:
    """Classification result naming the single lookup to perform.

    Attributes:
        host: The lowercase hostname of the request.
        kind: Which stored routing key to match.
        key: The exact value to match against that key.
    """

    host: str
    kind: LookupKind
    key: str

    @property
    def is_custom_domain(self) -> bool:
        return self.kind is LookupKind.CUSTOM_DOMAIN


def normalize_host(hostname: str | None) -> str:
    """Lowercase a request hostname; None becomes the empty string."""
    return (hostname or "").strip().lower()


def classify_request(
    hostname: str | None,
    path: str,
    rules: HostRules,
) -> ExemptRequest | HostLookup:
    """Classify a request by hostname and path.

    Args:
        hostname: Request hostname, any case, without port.
        path: Request path.
        rules: Routing rules.

    Returns:
        ExemptRequest when no lookup must happen, else the HostLookup to run.

    Raises:
        InvalidHostError: If the hostname is empty or names an empty
            subdomain label.
    """
    host = normalize_host(hostname)

    if host == rules.root_domain:
        return ExemptRequest(host=host, reason=ExemptReason.ROOT_DOMAIN)
    if host in rules.exempt_hosts:
        return ExemptRequest(host=host, reason=ExemptReason.EXEMPT_HOST)
    if path.startswith(rules.api_prefix):
        return ExemptRequest(host=host, reason=ExemptReason.API_PATH)
    if path.startswith(rules.admin_prefix):
        return ExemptRequest(host=host, reason=ExemptReason.ADMIN_PATH)

    if not host:
        raise InvalidHostError("Request has no hostname")

    if any(host.endswith(suffix) for suffix in rules.subdomain_suffixes):
        # "acme.liquidlab.trade" and "acme.app.liquidlab.trade" both yield "acme"
        label = host.split(".", 1)[0]
        if not label:
            raise InvalidHostError(f"Empty subdomain label in host '{host}'")
        return HostLookup(host=host, kind=LookupKind.SUBDOMAIN, key=label)

    return HostLookup(host=host, kind=LookupKind.CUSTOM_DOMAIN, key=host)


def normalize_custom_domain(domain: str, rules: HostRules) -> str:
    """Validate and normalize a custom domain for registration.

    Args:
        domain: Domain supplied by the platform owner.
        rules: Routing rules, used to reject the platform's own namespace.

    Returns:
        The lowercase domain.

    Raises:
        InvalidDomainError: If the domain is malformed or reserved.
    """
    normalized = domain.strip().lower()
    if not CUSTOM_DOMAIN_PATTERN.match(normalized):
        raise InvalidDomainError(f"Invalid domain format: '{domain}'")
    if rules.is_reserved(normalized) or normalized in rules.exempt_hosts:
        raise InvalidDomainError(
            f"Domain '{normalized}' is reserved for platform subdomains"
        )
    return normalized
