"""Observability for shared middleware operations."""

from shared_kernel.middleware.observability.platform_context_probe import (
    DefaultPlatformContextProbe,
    PlatformContextProbe,
)

__all__ = [
    "DefaultPlatformContextProbe",
    "PlatformContextProbe",
]
