"""Protocol for platform application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PlatformServiceProbe(Protocol):
    """Domain probe for platform application service operations."""

    def platform_created(self, platform_id: int, slug: str, owner_id: int) -> None:
        """Record that a platform was created."""
        ...

    def platform_updated(self, platform_id: int) -> None:
        """Record that a platform was updated."""
        ...

    def platform_deleted(self, platform_id: int) -> None:
        """Record that a platform was deleted."""
        ...

    def platform_not_found(self, platform_id: int) -> None:
        """Record that a platform was not found."""
        ...

    def duplicate_subdomain(self, subdomain: str | None) -> None:
        """Record that a subdomain collided with another platform."""
        ...

    def subdomain_assigned(self, platform_id: int, subdomain: str) -> None:
        """Record that a missing subdomain was filled from the slug."""
        ...

    def subdomain_backfill_skipped(self, platform_id: int, subdomain: str) -> None:
        """Record that a backfill was skipped because the slug is taken as subdomain."""
        ...

    def with_context(self, context: ObservationContext) -> PlatformServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPlatformServiceProbe:
    """Default implementation of PlatformServiceProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultPlatformServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultPlatformServiceProbe(logger=self._logger, context=context)

    def platform_created(self, platform_id: int, slug: str, owner_id: int) -> None:
        """Record that a platform was created."""
        self._logger.info(
            "platform_created",
            platform_id=platform_id,
            slug=slug,
            owner_id=owner_id,
            **self._get_context_kwargs(),
        )

    def platform_updated(self, platform_id: int) -> None:
        """Record that a platform was updated."""
        self._logger.info(
            "platform_updated",
            platform_id=platform_id,
            **self._get_context_kwargs(),
        )

    def platform_deleted(self, platform_id: int) -> None:
        """Record that a platform was deleted."""
        self._logger.info(
            "platform_service_deleted",
            platform_id=platform_id,
            **self._get_context_kwargs(),
        )

    def platform_not_found(self, platform_id: int) -> None:
        """Record that a platform was not found."""
        self._logger.debug(
            "platform_service_not_found",
            platform_id=platform_id,
            **self._get_context_kwargs(),
        )

    def duplicate_subdomain(self, subdomain: str | None) -> None:
        """Record that a subdomain collided with another platform."""
        self._logger.warning(
            "platform_duplicate_subdomain",
            subdomain=subdomain,
            **self._get_context_kwargs(),
        )

    def subdomain_assigned(self, platform_id: int, subdomain: str) -> None:
        """Record that a missing subdomain was filled from the slug."""
        self._logger.info(
            "platform_subdomain_assigned",
            platform_id=platform_id,
            subdomain=subdomain,
            **self._get_context_kwargs(),
        )

    def subdomain_backfill_skipped(self, platform_id: int, subdomain: str) -> None:
        """Record that a backfill was skipped because the slug is taken as subdomain."""
        self._logger.warning(
            "platform_subdomain_backfill_skipped",
            platform_id=platform_id,
            subdomain=subdomain,
            **self._get_context_kwargs(),
        )
