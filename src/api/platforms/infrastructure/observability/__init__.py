"""Observability for platforms infrastructure."""

from platforms.infrastructure.observability.dns_verifier_probe import (
    DefaultDnsVerifierProbe,
    DnsVerifierProbe,
)
from platforms.infrastructure.observability.repository_probe import (
    DefaultPlatformRepositoryProbe,
    PlatformRepositoryProbe,
)

__all__ = [
    "DefaultDnsVerifierProbe",
    "DefaultPlatformRepositoryProbe",
    "DnsVerifierProbe",
    "PlatformRepositoryProbe",
]
