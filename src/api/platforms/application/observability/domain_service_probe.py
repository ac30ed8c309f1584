"""Protocol for custom domain application service observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DomainServiceProbe(Protocol):
    """Domain probe for custom domain management operations."""

    def domain_registered(self, platform_id: int, domain: str) -> None:
        """Record that a custom domain registration was created."""
        ...

    def domain_rejected(self, domain: str, reason: str) -> None:
        """Record that a custom domain was rejected as malformed or reserved."""
        ...

    def duplicate_domain(self, domain: str) -> None:
        """Record that a custom domain is already in use."""
        ...

    def domain_verified(self, platform_id: int, domain: str) -> None:
        """Record that ownership was proven and the domain attached."""
        ...

    def domain_verification_pending(self, platform_id: int, domain: str) -> None:
        """Record that the verification token was not published yet."""
        ...

    def domain_removed(self, platform_id: int, domain: str, detached: bool) -> None:
        """Record that a custom domain registration was removed."""
        ...

    def domain_not_found(self, platform_id: int, domain: str) -> None:
        """Record that a custom domain is not registered for the platform."""
        ...

    def with_context(self, context: ObservationContext) -> DomainServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDomainServiceProbe:
    """Default implementation of DomainServiceProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultDomainServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultDomainServiceProbe(logger=self._logger, context=context)

    def domain_registered(self, platform_id: int, domain: str) -> None:
        self._logger.info(
            "custom_domain_added",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def domain_rejected(self, domain: str, reason: str) -> None:
        self._logger.info(
            "custom_domain_rejected",
            domain=domain,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def duplicate_domain(self, domain: str) -> None:
        self._logger.warning(
            "custom_domain_duplicate",
            domain=domain,
            **self._get_context_kwargs(),
        )

    def domain_verified(self, platform_id: int, domain: str) -> None:
        self._logger.info(
            "custom_domain_verified",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def domain_verification_pending(self, platform_id: int, domain: str) -> None:
        self._logger.info(
            "custom_domain_verification_pending",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )

    def domain_removed(self, platform_id: int, domain: str, detached: bool) -> None:
        self._logger.info(
            "custom_domain_removed",
            platform_id=platform_id,
            domain=domain,
            detached=detached,
            **self._get_context_kwargs(),
        )

    def domain_not_found(self, platform_id: int, domain: str) -> None:
        self._logger.debug(
            "custom_domain_not_found",
            platform_id=platform_id,
            domain=domain,
            **self._get_context_kwargs(),
        )
