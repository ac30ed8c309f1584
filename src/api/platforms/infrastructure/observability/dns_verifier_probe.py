"""Domain probe for DNS based custom domain verification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DnsVerifierProbe(Protocol):
    """Domain probe for DNS TXT verification lookups."""

    def txt_lookup_started(self, record_name: str) -> None:
        """Record that a TXT lookup was issued."""
        ...

    def token_found(self, record_name: str) -> None:
        """Record that the verification token was found."""
        ...

    def token_missing(self, record_name: str, records_seen: int) -> None:
        """Record that the TXT records did not contain the token."""
        ...

    def txt_lookup_failed(self, record_name: str, error: str) -> None:
        """Record that the resolver could not be queried or answered badly."""
        ...

    def with_context(self, context: ObservationContext) -> DnsVerifierProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDnsVerifierProbe:
    """Default implementation of DnsVerifierProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultDnsVerifierProbe:
        """Create a new probe with observation context bound."""
        return DefaultDnsVerifierProbe(logger=self._logger, context=context)

    def txt_lookup_started(self, record_name: str) -> None:
        self._logger.debug(
            "dns_txt_lookup_started",
            record_name=record_name,
            **self._get_context_kwargs(),
        )

    def token_found(self, record_name: str) -> None:
        self._logger.info(
            "dns_verification_token_found",
            record_name=record_name,
            **self._get_context_kwargs(),
        )

    def token_missing(self, record_name: str, records_seen: int) -> None:
        self._logger.info(
            "dns_verification_token_missing",
            record_name=record_name,
            records_seen=records_seen,
            **self._get_context_kwargs(),
        )

    def txt_lookup_failed(self, record_name: str, error: str) -> None:
        self._logger.warning(
            "dns_txt_lookup_failed",
            record_name=record_name,
            error=error,
            **self._get_context_kwargs(),
        )
