"""Port-level exceptions for the platforms bounded context.

These exceptions represent errors raised by repositories and services.
The presentation layer translates them into HTTP responses.
"""


class PlatformNotFoundError(Exception):
    """Raised when a platform does not exist.

    Also raised by the platform guard when a platform-scoped route is hit
    without a resolved platform; that case is rendered as
    ``404 {"message": "Platform not found"}``.
    """

    pass


class DuplicateSlugError(Exception):
    """Raised when a platform slug is already taken."""

    pass


class DuplicateSubdomainError(Exception):
    """Raised when a platform subdomain is already taken.

    Subdomains are globally unique so that a hostname maps to at most one
    platform.
    """

    pass


class DuplicateDomainError(Exception):
    """Raised when a custom domain is already registered or attached.

    Custom domains are globally unique so that a hostname maps to at most
    one platform.
    """

    pass


class DomainNotFoundError(Exception):
    """Raised when a custom domain is not registered for the platform."""

    pass


class PlatformResolutionError(Exception):
    """Raised when the platform store fails during resolution.

    Only raised when fail-closed resolution is configured; by default
    store failures resolve to "no platform".
    """

    pass
