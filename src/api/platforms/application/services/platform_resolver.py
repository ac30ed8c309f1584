"""Hostname-based platform resolution.

Maps the hostname of an inbound request to the platform (tenant) whose
branding, configuration and data scope apply. Per request the resolver:

1. Skips resolution for the root marketing domain, ``localhost`` and the
   API/admin path prefixes.
2. Looks the subdomain label up when the host ends in a platform suffix.
3. Otherwise looks the whole host up as a custom domain.

At most one read is issued per call and nothing is cached or written.
Lookup failures are logged and resolve to ``None`` (fail-open) unless the
resolver was built with ``fail_closed=True``.
"""

from __future__ import annotations

from platforms.domain.aggregates import TradingPlatform
from platforms.domain.exceptions import InvalidHostError
from platforms.domain.host import (
    ExemptRequest,
    HostLookup,
    HostRules,
    classify_request,
    normalize_host,
)
from platforms.domain.value_objects import LookupKind
from platforms.ports.exceptions import PlatformResolutionError
from platforms.ports.repositories import IPlatformRepository
from shared_kernel.middleware.observability import (
    DefaultPlatformContextProbe,
    PlatformContextProbe,
)
from shared_kernel.middleware.platform_context import ResolvedPlatform


class PlatformResolver:
    """Resolves the platform for a request hostname and path."""

    def __init__(
        self,
        repository: IPlatformRepository,
        rules: HostRules,
        probe: PlatformContextProbe | None = None,
        fail_closed: bool = False,
    ) -> None:
        """Initialize the resolver.

        Args:
            repository: Platform store issuing the routing-key lookups
            rules: Hostname classification rules
            probe: Optional domain probe for observability
            fail_closed: Raise PlatformResolutionError on store failures
                instead of resolving no platform
        """
        self._repository = repository
        self._rules = rules
        self._probe = probe or DefaultPlatformContextProbe()
        self._fail_closed = fail_closed

    async def resolve(self, hostname: str | None, path: str) -> ResolvedPlatform | None:
        """Resolve the platform for a request.

        Args:
            hostname: Request hostname without port, any case
            path: Request path

        Returns:
            The resolved platform, or None when the request is exempt, no
            platform matches, or the lookup failed

        Raises:
            PlatformResolutionError: Only when fail_closed is set and the
                store lookup raised
        """
        try:
            classification = classify_request(hostname, path, self._rules)
        except InvalidHostError as e:
            self._probe.invalid_host(host=normalize_host(hostname), reason=str(e))
            return None

        if isinstance(classification, ExemptRequest):
            self._probe.resolution_skipped(
                host=classification.host,
                path=path,
                reason=classification.reason.value,
            )
            return None

        try:
            platform = await self._lookup(classification)
        except Exception as e:
            self._probe.platform_resolution_failed(host=classification.host, error=e)
            if self._fail_closed:
                raise PlatformResolutionError(
                    f"Platform lookup failed for host '{classification.host}'"
                ) from e
            return None

        if platform is None:
            self._probe.platform_not_found(
                host=classification.host,
                lookup=classification.kind.value,
                key=classification.key,
            )
            return None

        resolved = platform.to_resolved(
            domain=classification.host,
            is_custom_domain=classification.is_custom_domain,
        )
        self._probe.platform_resolved(
            platform_id=resolved.id,
            host=resolved.domain,
            is_custom_domain=resolved.is_custom_domain,
        )
        return resolved

    async def _lookup(self, lookup: HostLookup) -> TradingPlatform | None:
        if lookup.kind is LookupKind.SUBDOMAIN:
            return await self._repository.get_by_subdomain(lookup.key)
        return await self._repository.get_by_custom_domain(lookup.key)
