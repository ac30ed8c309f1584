"""Aggregates for the platforms bounded context."""

from platforms.domain.aggregates.platform import TradingPlatform, slugify
from platforms.domain.aggregates.platform_domain import PlatformDomain

__all__ = [
    "PlatformDomain",
    "TradingPlatform",
    "slugify",
]
