"""SQLAlchemy ORM models for the platforms bounded context."""

from platforms.infrastructure.models.platform import TradingPlatformModel
from platforms.infrastructure.models.platform_domain import PlatformDomainModel

__all__ = [
    "PlatformDomainModel",
    "TradingPlatformModel",
]
