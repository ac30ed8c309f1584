"""Application services for the platforms bounded context.

Application services orchestrate domain aggregates and repositories to
fulfill use cases. They are the "front door" to the platforms context.
"""

from platforms.application.services.domain_service import DomainService
from platforms.application.services.platform_resolver import PlatformResolver
from platforms.application.services.platform_service import PlatformService

__all__ = [
    "DomainService",
    "PlatformResolver",
    "PlatformService",
]
