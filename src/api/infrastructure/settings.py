"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        LIQUIDLAB_DB_HOST: Database host (default: localhost)
        LIQUIDLAB_DB_PORT: Database port (default: 5432)
        LIQUIDLAB_DB_DATABASE: Database name (default: liquidlab)
        LIQUIDLAB_DB_USERNAME: Database user (default: liquidlab)
        LIQUIDLAB_DB_PASSWORD: Database password (required in production)
        LIQUIDLAB_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIQUIDLAB_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="liquidlab", description="Database name")
    username: str = Field(default="liquidlab", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class TenancySettings(BaseSettings):
    """Hostname-based platform resolution settings.

    Environment variables:
        LIQUIDLAB_TENANCY_ROOT_DOMAIN: Marketing site domain, never resolved
            to a platform (default: liquidlab.trade)
        LIQUIDLAB_TENANCY_SUBDOMAIN_SUFFIXES: JSON list of suffixes that mark
            a platform subdomain (default: [".liquidlab.trade", ".app.liquidlab.trade"])
        LIQUIDLAB_TENANCY_EXEMPT_HOSTS: JSON list of additional hosts that are
            never resolved (default: ["localhost"])
        LIQUIDLAB_TENANCY_API_PREFIX: Path prefix of API routes (default: /api/)
        LIQUIDLAB_TENANCY_ADMIN_PREFIX: Path prefix of admin routes (default: /admin/)
        LIQUIDLAB_TENANCY_FAIL_CLOSED: Surface store failures as 503 instead of
            treating them as "no platform" (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIQUIDLAB_TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_domain: str = Field(
        default="liquidlab.trade",
        description="Marketing site domain",
    )
    subdomain_suffixes: list[str] = Field(
        default_factory=lambda: [".liquidlab.trade", ".app.liquidlab.trade"],
        description="Hostname suffixes that identify platform subdomains",
    )
    exempt_hosts: list[str] = Field(
        default_factory=lambda: ["localhost"],
        description="Hosts that never resolve to a platform",
    )
    api_prefix: str = Field(default="/api/", description="API path prefix")
    admin_prefix: str = Field(default="/admin/", description="Admin path prefix")
    fail_closed: bool = Field(
        default=False,
        description="Raise on store failures instead of resolving no platform",
    )

    @field_validator("root_domain")
    @classmethod
    def normalize_root_domain(cls, value: str) -> str:
        """Store the root domain lowercase without surrounding dots."""
        return value.strip().strip(".").lower()

    @field_validator("subdomain_suffixes")
    @classmethod
    def validate_suffixes(cls, value: list[str]) -> list[str]:
        """Suffixes must start with a dot so 'xliquidlab.trade' never matches."""
        normalized = [suffix.strip().lower() for suffix in value]
        for suffix in normalized:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(
                    f"subdomain suffix must start with '.', got: '{suffix}'"
                )
        return normalized

    @field_validator("exempt_hosts")
    @classmethod
    def normalize_exempt_hosts(cls, value: list[str]) -> list[str]:
        """Store exempt hosts lowercase."""
        return [host.strip().lower() for host in value if host.strip()]

    @field_validator("api_prefix", "admin_prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        """Path prefixes must be absolute."""
        if not value.startswith("/"):
            raise ValueError(f"path prefix must start with '/', got: '{value}'")
        return value


class DomainVerificationSettings(BaseSettings):
    """Custom domain ownership verification settings.

    Environment variables:
        LIQUIDLAB_DNS_RECORD_PREFIX: Label prepended to the custom domain for
            the TXT record lookup (default: _liquidlab)
        LIQUIDLAB_DNS_RESOLVER_URL: DNS-over-HTTPS JSON endpoint
            (default: https://cloudflare-dns.com/dns-query)
        LIQUIDLAB_DNS_TIMEOUT_SECONDS: Timeout for a single lookup (default: 5.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIQUIDLAB_DNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    record_prefix: str = Field(
        default="_liquidlab",
        description="Label of the verification TXT record",
    )
    resolver_url: str = Field(
        default="https://cloudflare-dns.com/dns-query",
        description="DNS-over-HTTPS JSON API endpoint",
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for a single DNS lookup",
        gt=0,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="LiquidLab API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def tenancy(self) -> TenancySettings:
        """Get tenancy settings."""
        return get_tenancy_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings."""
    return TenancySettings()


@lru_cache
def get_domain_verification_settings() -> DomainVerificationSettings:
    """Get cached domain verification settings."""
    return DomainVerificationSettings()
