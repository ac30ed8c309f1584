"""Domain probes for platform repository operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PlatformRepositoryProbe(Protocol):
    """Domain probe for platform and custom domain persistence."""

    def platform_saved(self, platform_id: int, created: bool) -> None:
        """Record that a platform was inserted or updated."""
        ...

    def platform_deleted(self, platform_id: int) -> None:
        """Record that a platform was deleted."""
        ...

    def domain_registration_saved(self, platform_id: int, domain: str) -> None:
        """Record that a custom domain registration was persisted."""
        ...

    def domain_registration_deleted(self, platform_id: int, domain: str) -> None:
        """Record that a custom domain registration was deleted."""
        ...

    def duplicate_key_detected(self, key: str, value: str | None) -> None:
        """Record that a unique routing key collided on write."""
        ...

    def with_context(self, context: ObservationContext) -> PlatformRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPlatformRepositoryProbe:
    """Default implementation of PlatformRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultPlatformRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultPlatformRepositoryProbe(logger=self._logger, context=context)

    def platform_saved(self, platform_id: int, created: bool) -> None:
        self._logger.debug(
            "platform_saved",
            platform_id=platform_id,
            created=created,
            **self._get_context_kwargs(),
        )

    def platform_deleted(self, platform_id: int) -> None:
        self._logger.info(
            "platform_deleted",
            platform_id=platform_id,
            **self._get_context_kwargs(),
        )

    def domain_registration_saved(self, platform_id: int, domain: str) -> None:
        self._logger.debug(
            "domain_registration_saved",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def domain_registration_deleted(self, platform_id: int, domain: str) -> None:
        self._logger.info(
            "domain_registration_deleted",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def duplicate_key_detected(self, key: str, value: str | None) -> None:
        self._logger.warning(
            "platform_duplicate_key_detected",
            key=key,
            value=value,
            **self._get_context_kwargs(),
        )
