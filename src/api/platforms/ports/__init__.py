"""Ports (interfaces) for the platforms bounded context."""

from platforms.ports.repositories import (
    IPlatformDomainRepository,
    IPlatformRepository,
)
from platforms.ports.verification import IDomainVerifier

__all__ = [
    "IDomainVerifier",
    "IPlatformDomainRepository",
    "IPlatformRepository",
]
