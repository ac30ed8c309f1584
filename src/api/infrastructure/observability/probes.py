"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConnectionProbe(Protocol):
    """Domain probe for database engine observability.

    This probe captures domain-significant events related to the async
    engines without exposing logging implementation details.
    """

    def engine_created(self, role: str, connection_string: str) -> None:
        """Record that a read or write engine was created."""
        ...

    def engine_disposed(self, role: str) -> None:
        """Record that a read or write engine was disposed."""
        ...

    def health_check_failed(self, error: Exception) -> None:
        """Record that the database health check failed."""
        ...

    def with_context(self, context: ObservationContext) -> ConnectionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

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

    def with_context(self, context: ObservationContext) -> DefaultConnectionProbe:
        """Create a new probe with observation context bound."""
        return DefaultConnectionProbe(logger=self._logger, context=context)

    def engine_created(self, role: str, connection_string: str) -> None:
        """Record that a read or write engine was created."""
        self._logger.info(
            "database_engine_created",
            role=role,
            connection_string=connection_string,
            **self._get_context_kwargs(),
        )

    def engine_disposed(self, role: str) -> None:
        """Record that a read or write engine was disposed."""
        self._logger.info(
            "database_engine_disposed",
            role=role,
            **self._get_context_kwargs(),
        )

    def health_check_failed(self, error: Exception) -> None:
        """Record that the database health check failed."""
        self._logger.error(
            "database_health_check_failed",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
