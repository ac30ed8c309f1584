"""Exception handlers for platform resolution outcomes.

Guarded routes and fail-closed resolution answer with a ``{"message": ...}``
body rather than FastAPI's ``{"detail": ...}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from platforms.ports.exceptions import PlatformNotFoundError, PlatformResolutionError

PLATFORM_NOT_FOUND_MESSAGE = "Platform not found"
PLATFORM_RESOLUTION_UNAVAILABLE_MESSAGE = "Platform resolution unavailable"


async def platform_not_found_handler(
    request: Request, exc: PlatformNotFoundError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": PLATFORM_NOT_FOUND_MESSAGE},
    )


async def platform_resolution_error_handler(
    request: Request, exc: PlatformResolutionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"message": PLATFORM_RESOLUTION_UNAVAILABLE_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the platform resolution handlers on an application."""
    app.add_exception_handler(PlatformNotFoundError, platform_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(PlatformResolutionError, platform_resolution_error_handler)  # type: ignore[arg-type]
