"""Unit tests for the platform context dependencies."""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from starlette.requests import Request

from infrastructure.settings import TenancySettings
from platforms.application.services import PlatformResolver
from platforms.dependencies.platform_context import (
    get_host_rules,
    get_platform_context_probe,
    get_platform_resolver,
    get_resolved_platform,
    require_platform,
)
from platforms.domain.host import HostRules
from platforms.ports.exceptions import PlatformNotFoundError
from shared_kernel.middleware.platform_context import ResolvedPlatform

RESOLVED = ResolvedPlatform(
    id=1,
    name="Acme",
    owner_id="7",
    config={},
    logo_url=None,
    is_custom_domain=False,
    domain="acme.liquidlab.trade",
)


def make_request(host: str, path: str = "/", headers: dict | None = None) -> Request:
    raw_headers = [(b"host", host.encode())]
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode(), value.encode()))
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "query_string": b"",
        "headers": raw_headers,
        "server": ("testserver", 80),
    }
    return Request(scope)


class TestGetHostRules:
    def test_built_from_settings(self):
        settings = TenancySettings(
            root_domain="example.test",
            subdomain_suffixes=[".example.test"],
            exempt_hosts=["localhost", "status.example.test"],
            api_prefix="/v1/",
        )

        rules = get_host_rules(settings)

        assert rules == HostRules(
            root_domain="example.test",
            subdomain_suffixes=(".example.test",),
            exempt_hosts=("localhost", "status.example.test"),
            api_prefix="/v1/",
            admin_prefix="/admin/",
        )


class TestGetPlatformResolver:
    def test_honors_fail_closed(self):
        resolver = get_platform_resolver(
            session=Mock(),
            rules=HostRules(),
            probe=MagicMock(),
            settings=TenancySettings(fail_closed=True),
        )

        assert isinstance(resolver, PlatformResolver)
        assert resolver._fail_closed is True


class TestGetPlatformContextProbe:
    def test_binds_request_id_and_host(self):
        request = make_request("acme.liquidlab.trade", headers={"X-Request-ID": "req-1"})

        probe = get_platform_context_probe(request)

        assert probe._context.request_id == "req-1"
        assert probe._context.host == "acme.liquidlab.trade"


class TestGetResolvedPlatform:
    @pytest.mark.asyncio
    async def test_passes_hostname_without_port_and_path(self):
        resolver = Mock(spec=PlatformResolver)
        resolver.resolve = AsyncMock(return_value=RESOLVED)
        request = make_request("Acme.LiquidLab.Trade:8443", path="/markets")

        result = await get_resolved_platform(request, resolver)

        assert result is RESOLVED
        resolver.resolve.assert_awaited_once_with("acme.liquidlab.trade", "/markets")


class TestRequirePlatform:
    @pytest.mark.asyncio
    async def test_passes_platform_through(self):
        probe = MagicMock()

        result = await require_platform(make_request("acme.liquidlab.trade"), RESOLVED, probe)

        assert result is RESOLVED
        probe.platform_required_but_missing.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_platform_raises(self):
        probe = MagicMock()
        request = make_request("ghost.liquidlab.trade", path="/platform")

        with pytest.raises(PlatformNotFoundError):
            await require_platform(request, None, probe)

        probe.platform_required_but_missing.assert_called_once_with(
            host="ghost.liquidlab.trade",
            path="/platform",
        )

    @pytest.mark.asyncio
    async def test_missing_platform_with_request_bound_probe(self):
        request = make_request("ghost.liquidlab.trade", path="/platform")
        probe = get_platform_context_probe(request)

        with pytest.raises(PlatformNotFoundError):
            await require_platform(request, None, probe)
