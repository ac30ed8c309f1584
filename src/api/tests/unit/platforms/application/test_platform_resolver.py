"""Unit tests for PlatformResolver.

Covers the resolution outcomes for exempt requests, subdomains, custom
domains and store failures, and the probe events each outcome emits.
"""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from platforms.application.services import PlatformResolver
from platforms.domain.aggregates import TradingPlatform
from platforms.domain.host import HostRules
from platforms.ports.exceptions import PlatformResolutionError
from platforms.ports.repositories import IPlatformRepository
from shared_kernel.middleware.platform_context import ResolvedPlatform


def make_platform(**overrides) -> TradingPlatform:
    fields = dict(
        id=1,
        owner_id=7,
        name="Acme",
        slug="acme",
        config={"theme": "dark"},
        subdomain="acme",
        custom_domain="trade.acme.com",
        logo_url=None,
    )
    fields.update(overrides)
    return TradingPlatform(**fields)


@pytest.fixture
def mock_repo():
    repo = Mock(spec=IPlatformRepository)
    repo.get_by_subdomain = AsyncMock(return_value=None)
    repo.get_by_custom_domain = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_probe():
    return MagicMock()


@pytest.fixture
def resolver(mock_repo, mock_probe) -> PlatformResolver:
    return PlatformResolver(repository=mock_repo, rules=HostRules(), probe=mock_probe)


class TestExemptRequests:
    """Exempt hosts and paths resolve to None without a lookup."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "host, path",
        [
            ("liquidlab.trade", "/"),
            ("localhost", "/"),
            ("acme.liquidlab.trade", "/api/platforms"),
            ("trade.acme.com", "/admin/settings"),
        ],
    )
    async def test_no_lookup(self, resolver, mock_repo, mock_probe, host, path):
        result = await resolver.resolve(host, path)

        assert result is None
        mock_repo.get_by_subdomain.assert_not_called()
        mock_repo.get_by_custom_domain.assert_not_called()
        mock_probe.resolution_skipped.assert_called_once()


class TestSubdomainResolution:
    @pytest.mark.asyncio
    async def test_resolves_platform_subdomain(self, resolver, mock_repo, mock_probe):
        mock_repo.get_by_subdomain.return_value = make_platform(id=42)

        result = await resolver.resolve("acme.liquidlab.trade", "/")

        mock_repo.get_by_subdomain.assert_awaited_once_with("acme")
        mock_repo.get_by_custom_domain.assert_not_called()
        assert result == ResolvedPlatform(
            id=42,
            name="Acme",
            owner_id="7",
            config={"theme": "dark"},
            logo_url=None,
            is_custom_domain=False,
            domain="acme.liquidlab.trade",
        )
        mock_probe.platform_resolved.assert_called_once_with(
            platform_id=42,
            host="acme.liquidlab.trade",
            is_custom_domain=False,
        )

    @pytest.mark.asyncio
    async def test_resolves_app_subdomain(self, resolver, mock_repo):
        mock_repo.get_by_subdomain.return_value = make_platform()

        result = await resolver.resolve("acme.app.liquidlab.trade", "/markets")

        mock_repo.get_by_subdomain.assert_awaited_once_with("acme")
        assert result is not None
        assert result.domain == "acme.app.liquidlab.trade"

    @pytest.mark.asyncio
    async def test_hostname_case_is_ignored(self, resolver, mock_repo):
        mock_repo.get_by_subdomain.return_value = make_platform()

        result = await resolver.resolve("ACME.LiquidLab.Trade", "/")

        mock_repo.get_by_subdomain.assert_awaited_once_with("acme")
        assert result is not None
        assert result.domain == "acme.liquidlab.trade"

    @pytest.mark.asyncio
    async def test_unknown_subdomain_does_not_fall_back(
        self, resolver, mock_repo, mock_probe
    ):
        """A suffix host never falls through to the custom domain lookup."""
        result = await resolver.resolve("ghost.liquidlab.trade", "/")

        assert result is None
        mock_repo.get_by_custom_domain.assert_not_called()
        mock_probe.platform_not_found.assert_called_once_with(
            host="ghost.liquidlab.trade",
            lookup="subdomain",
            key="ghost",
        )


class TestCustomDomainResolution:
    @pytest.mark.asyncio
    async def test_resolves_custom_domain(self, resolver, mock_repo):
        mock_repo.get_by_custom_domain.return_value = make_platform()

        result = await resolver.resolve("trade.acme.com", "/")

        mock_repo.get_by_custom_domain.assert_awaited_once_with("trade.acme.com")
        mock_repo.get_by_subdomain.assert_not_called()
        assert result is not None
        assert result.is_custom_domain is True
        assert result.domain == "trade.acme.com"

    @pytest.mark.asyncio
    async def test_no_match_returns_none(self, resolver, mock_repo, mock_probe):
        result = await resolver.resolve("unknown.example.com", "/")

        assert result is None
        mock_probe.platform_not_found.assert_called_once_with(
            host="unknown.example.com",
            lookup="custom_domain",
            key="unknown.example.com",
        )


class TestFailOpen:
    """Failures degrade to None unless fail-closed is configured."""

    @pytest.mark.asyncio
    async def test_store_error_returns_none(self, resolver, mock_repo, mock_probe):
        error = ConnectionError("database unavailable")
        mock_repo.get_by_subdomain.side_effect = error

        result = await resolver.resolve("acme.liquidlab.trade", "/")

        assert result is None
        mock_probe.platform_resolution_failed.assert_called_once_with(
            host="acme.liquidlab.trade",
            error=error,
        )

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_none(self, resolver, mock_repo):
        mock_repo.get_by_custom_domain.side_effect = RuntimeError("boom")

        assert await resolver.resolve("trade.acme.com", "/") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("host", [None, "", ".liquidlab.trade"])
    async def test_malformed_host_returns_none(
        self, resolver, mock_repo, mock_probe, host
    ):
        result = await resolver.resolve(host, "/")

        assert result is None
        mock_repo.get_by_subdomain.assert_not_called()
        mock_repo.get_by_custom_domain.assert_not_called()
        mock_probe.invalid_host.assert_called_once()

    @pytest.mark.asyncio
    async def test_fail_closed_raises_on_store_error(self, mock_repo, mock_probe):
        resolver = PlatformResolver(
            repository=mock_repo,
            rules=HostRules(),
            probe=mock_probe,
            fail_closed=True,
        )
        mock_repo.get_by_subdomain.side_effect = ConnectionError("down")

        with pytest.raises(PlatformResolutionError) as exc_info:
            await resolver.resolve("acme.liquidlab.trade", "/")

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        mock_probe.platform_resolution_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_fail_closed_still_treats_malformed_host_as_absent(
        self, mock_repo, mock_probe
    ):
        resolver = PlatformResolver(
            repository=mock_repo,
            rules=HostRules(),
            probe=mock_probe,
            fail_closed=True,
        )

        assert await resolver.resolve("", "/") is None


class TestIdempotence:
    @pytest.mark.asyncio
    async def test_same_host_resolves_to_equal_values(self, resolver, mock_repo):
        mock_repo.get_by_subdomain.return_value = make_platform()

        first = await resolver.resolve("acme.liquidlab.trade", "/")
        second = await resolver.resolve("acme.liquidlab.trade", "/")

        assert first == second
        assert mock_repo.get_by_subdomain.await_count == 2

    @pytest.mark.asyncio
    async def test_one_lookup_per_call(self, resolver, mock_repo):
        mock_repo.get_by_custom_domain.return_value = make_platform()

        await resolver.resolve("trade.acme.com", "/")

        assert mock_repo.get_by_custom_domain.await_count == 1
        assert mock_repo.get_by_subdomain.await_count == 0

    @pytest.mark.asyncio
    async def test_resolver_never_writes(self, resolver, mock_repo):
        mock_repo.save = AsyncMock()
        mock_repo.delete = AsyncMock()
        mock_repo.get_by_subdomain.return_value = make_platform()

        await resolver.resolve("acme.liquidlab.trade", "/")

        mock_repo.save.assert_not_called()
        mock_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_works_without_explicit_probe(self, mock_repo):
        resolver = PlatformResolver(repository=mock_repo, rules=HostRules())
        mock_repo.get_by_subdomain.return_value = make_platform()

        result = await resolver.resolve("acme.liquidlab.trade", "/")

        assert result is not None
