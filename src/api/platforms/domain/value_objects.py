"""Value objects for the platforms bounded context."""

from __future__ import annotations

import re
from enum import StrEnum

# Same shape the domain manager has always accepted: dot separated labels of
# alphanumerics and inner hyphens, ending in an alphabetic TLD.
CUSTOM_DOMAIN_PATTERN = re.compile(r"^([a-z0-9]+(-[a-z0-9]+)*\.)+[a-z]{2,}$")

VERIFICATION_TOKEN_PREFIX = "liquidlab-verify-"


class DomainStatus(StrEnum):
    """Lifecycle status of a registered custom domain."""

    PENDING = "pending"
    ACTIVE = "active"


class VerificationMethod(StrEnum):
    """How ownership of a custom domain is proven."""

    DNS_TXT = "dns_txt"


class LookupKind(StrEnum):
    """Which stored routing key a hostname is matched against."""

    SUBDOMAIN = "subdomain"
    CUSTOM_DOMAIN = "custom_domain"


class ExemptReason(StrEnum):
    """Why a request skips platform resolution entirely."""

    ROOT_DOMAIN = "root_domain"
    EXEMPT_HOST = "exempt_host"
    API_PATH = "api_path"
    ADMIN_PATH = "admin_path"
