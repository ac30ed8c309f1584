"""Domain probe for platform context resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving the platform (tenant) for
a request from its hostname.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PlatformContextProbe(Protocol):
    """Domain probe for platform context resolution operations."""

    def resolution_skipped(self, host: str, path: str, reason: str) -> None:
        """Record that resolution was skipped for an exempt host or path."""
        ...

    def platform_resolved(
        self,
        platform_id: int,
        host: str,
        is_custom_domain: bool,
    ) -> None:
        """Record that a platform was resolved for the host."""
        ...

    def platform_not_found(self, host: str, lookup: str, key: str) -> None:
        """Record that no stored platform matched the lookup key."""
        ...

    def invalid_host(self, host: str, reason: str) -> None:
        """Record that the hostname could not be used for resolution."""
        ...

    def platform_resolution_failed(self, host: str, error: Exception) -> None:
        """Record that the store lookup raised while resolving the host."""
        ...

    def platform_required_but_missing(self, host: str, path: str) -> None:
        """Record that a platform-scoped route was hit without a platform."""
        ...

    def with_context(self, context: ObservationContext) -> PlatformContextProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPlatformContextProbe:
    """Default implementation of PlatformContextProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _event_kwargs(self, **fields: Any) -> dict[str, Any]:
        """Merge bound context with event fields; event fields override
        context keys such as the request host."""
        return {**self._get_context_kwargs(), **fields}

    def with_context(
        self, context: ObservationContext
    ) -> DefaultPlatformContextProbe:
        """Create a new probe with observation context bound."""
        return DefaultPlatformContextProbe(logger=self._logger, context=context)

    def resolution_skipped(self, host: str, path: str, reason: str) -> None:
        """Record that resolution was skipped for an exempt host or path."""
        self._logger.debug(
            "platform_resolution_skipped",
            **self._event_kwargs(
                host=host,
                path=path,
                reason=reason,
            ),
        )

    def platform_resolved(
        self,
        platform_id: int,
        host: str,
        is_custom_domain: bool,
    ) -> None:
        """Record that a platform was resolved for the host."""
        self._logger.debug(
            "platform_resolved",
            **self._event_kwargs(
                platform_id=platform_id,
                host=host,
                is_custom_domain=is_custom_domain,
            ),
        )

    def platform_not_found(self, host: str, lookup: str, key: str) -> None:
        """Record that no stored platform matched the lookup key."""
        self._logger.info(
            "platform_not_found",
            **self._event_kwargs(
                host=host,
                lookup=lookup,
                key=key,
            ),
        )

    def invalid_host(self, host: str, reason: str) -> None:
        """Record that the hostname could not be used for resolution."""
        self._logger.warning(
            "platform_resolution_invalid_host",
            **self._event_kwargs(
                host=host,
                reason=reason,
            ),
        )

    def platform_resolution_failed(self, host: str, error: Exception) -> None:
        """Record that the store lookup raised while resolving the host."""
        self._logger.error(
            "platform_resolution_failed",
            **self._event_kwargs(
                host=host,
                error=str(error),
                error_type=type(error).__name__,
            ),
        )

    def platform_required_but_missing(self, host: str, path: str) -> None:
        """Record that a platform-scoped route was hit without a platform."""
        self._logger.info(
            "platform_required_but_missing",
            **self._event_kwargs(
                host=host,
                path=path,
            ),
        )
