"""DNS TXT verification of custom domain ownership.

Queries a DNS-over-HTTPS resolver speaking the JSON API
(``application/dns-json``, as served by Cloudflare and Google) for the TXT
records at ``<record_prefix>.<domain>`` and looks for the verification
token among them.
"""

from __future__ import annotations

from typing import Any

import httpx

from platforms.infrastructure.observability import (
    DefaultDnsVerifierProbe,
    DnsVerifierProbe,
)
from platforms.ports.verification import IDomainVerifier

TXT_RECORD_TYPE = 16
DNS_NOERROR = 0


def parse_txt_answers(payload: dict[str, Any]) -> list[str]:
    """Extract TXT record values from a DNS JSON API response.

    TXT data arrives quoted and long values are split into several quoted
    chunks (``"abc" "def"``); chunks are joined back together.

    Args:
        payload: Decoded JSON response

    Returns:
        The TXT values, empty when the response has no TXT answers
    """
    if payload.get("Status") != DNS_NOERROR:
        return []

    values: list[str] = []
    for answer in payload.get("Answer") or []:
        if answer.get("type") != TXT_RECORD_TYPE:
            continue
        data = str(answer.get("data", "")).strip()
        if data.startswith('"') and data.endswith('"'):
            data = data[1:-1].replace('" "', "")
        values.append(data)
    return values


class DohDomainVerifier(IDomainVerifier):
    """IDomainVerifier backed by a DNS-over-HTTPS JSON resolver."""

    def __init__(
        self,
        resolver_url: str,
        record_prefix: str = "_liquidlab",
        timeout_seconds: float = 5.0,
        probe: DnsVerifierProbe | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the verifier.

        Args:
            resolver_url: DNS JSON API endpoint
            record_prefix: Label prepended to the domain for the TXT lookup
            timeout_seconds: Timeout for a single lookup
            probe: Optional domain probe for observability
            transport: Optional httpx transport (tests use MockTransport)
        """
        self._resolver_url = resolver_url
        self._record_prefix = record_prefix
        self._timeout = timeout_seconds
        self._probe = probe or DefaultDnsVerifierProbe()
        self._transport = transport

    def record_name(self, domain: str) -> str:
        """Name of the TXT record that must carry the token."""
        return f"{self._record_prefix}.{domain}"

    async def verify(self, domain: str, token: str) -> bool:
        """Check whether ``token`` is published for ``domain``.

        Resolver errors are logged and reported as "not verified".
        """
        record_name = self.record_name(domain)
        self._probe.txt_lookup_started(record_name)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    self._resolver_url,
                    params={"name": record_name, "type": "TXT"},
                    headers={"accept": "application/dns-json"},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            self._probe.txt_lookup_failed(record_name, error=str(e))
            return False
        except ValueError as e:
            # Body was not JSON
            self._probe.txt_lookup_failed(record_name, error=str(e))
            return False

        if not isinstance(payload, dict):
            self._probe.txt_lookup_failed(record_name, error="unexpected response")
            return False

        values = parse_txt_answers(payload)
        if token in values:
            self._probe.token_found(record_name)
            return True

        self._probe.token_missing(record_name, records_seen=len(values))
        return False
