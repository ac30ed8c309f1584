"""Domain-Oriented Observability for the platforms application layer."""

from platforms.application.observability.domain_service_probe import (
    DefaultDomainServiceProbe,
    DomainServiceProbe,
)
from platforms.application.observability.platform_service_probe import (
    DefaultPlatformServiceProbe,
    PlatformServiceProbe,
)

__all__ = [
    "DefaultDomainServiceProbe",
    "DefaultPlatformServiceProbe",
    "DomainServiceProbe",
    "PlatformServiceProbe",
]
