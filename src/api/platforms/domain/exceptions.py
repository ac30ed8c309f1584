"""Domain exceptions for the platforms bounded context."""


class InvalidHostError(ValueError):
    """Raised when a request hostname cannot be used for platform lookup.

    Covers empty hostnames and subdomain hosts with an empty first label.
    Resolution treats it as "no platform".
    """

    pass


class InvalidDomainError(ValueError):
    """Raised when a custom domain is malformed or reserved.

    Reserved domains are the root marketing domain and anything under the
    platform subdomain suffixes, since those never reach the custom domain
    lookup.
    """

    pass
