"""Unit tests for DomainService."""

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from platforms.application.services import DomainService
from platforms.domain.aggregates import PlatformDomain, TradingPlatform
from platforms.domain.exceptions import InvalidDomainError
from platforms.domain.host import HostRules
from platforms.domain.value_objects import DomainStatus
from platforms.ports.exceptions import (
    DomainNotFoundError,
    DuplicateDomainError,
    PlatformNotFoundError,
)
from platforms.ports.repositories import IPlatformDomainRepository, IPlatformRepository
from platforms.ports.verification import IDomainVerifier


async def _assign_record_id(record: PlatformDomain) -> PlatformDomain:
    if record.id is None:
        record.id = 10
    return record


async def _echo(platform: TradingPlatform) -> TradingPlatform:
    return platform


@pytest.fixture
def platform():
    return TradingPlatform(id=1, owner_id=7, name="Acme", slug="acme", subdomain="acme")


@pytest.fixture
def mock_platform_repo(platform):
    repo = Mock(spec=IPlatformRepository)
    repo.get_by_id = AsyncMock(return_value=platform)
    repo.save = AsyncMock(side_effect=_echo)
    return repo


@pytest.fixture
def mock_domain_repo():
    repo = Mock(spec=IPlatformDomainRepository)
    repo.save = AsyncMock(side_effect=_assign_record_id)
    repo.get = AsyncMock(return_value=None)
    repo.get_by_domain = AsyncMock(return_value=None)
    repo.list_by_platform = AsyncMock(return_value=[])
    repo.delete = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_verifier():
    verifier = Mock(spec=IDomainVerifier)
    verifier.verify = AsyncMock(return_value=True)
    return verifier


@pytest.fixture
def mock_probe():
    return MagicMock()


@pytest.fixture
def domain_service(
    mock_platform_repo, mock_domain_repo, mock_verifier, mock_session, mock_probe
):
    return DomainService(
        platform_repository=mock_platform_repo,
        domain_repository=mock_domain_repo,
        verifier=mock_verifier,
        rules=HostRules(),
        session=mock_session,
        probe=mock_probe,
    )


def pending(domain: str = "trade.acme.com") -> PlatformDomain:
    return PlatformDomain(
        id=10,
        platform_id=1,
        domain=domain,
        verification_token="liquidlab-verify-" + "a" * 32,
    )


class TestAddCustomDomain:
    @pytest.mark.asyncio
    async def test_registers_pending_domain(self, domain_service, mock_probe):
        record = await domain_service.add_custom_domain(1, "Trade.Acme.com")

        assert record.id == 10
        assert record.domain == "trade.acme.com"
        assert record.status is DomainStatus.PENDING
        mock_probe.domain_registered.assert_called_once_with(1, "trade.acme.com")

    @pytest.mark.asyncio
    async def test_does_not_route_until_verified(
        self, domain_service, mock_platform_repo, platform
    ):
        await domain_service.add_custom_domain(1, "trade.acme.com")

        assert platform.custom_domain is None
        mock_platform_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("domain", ["not a domain", "acme.liquidlab.trade"])
    async def test_rejects_invalid_domain(
        self, domain_service, mock_domain_repo, mock_probe, domain
    ):
        with pytest.raises(InvalidDomainError):
            await domain_service.add_custom_domain(1, domain)

        mock_domain_repo.save.assert_not_called()
        mock_probe.domain_rejected.assert_called_once()

    @pytest.mark.asyncio
    async def test_rejects_unknown_platform(
        self, domain_service, mock_platform_repo, mock_domain_repo
    ):
        mock_platform_repo.get_by_id.return_value = None

        with pytest.raises(PlatformNotFoundError):
            await domain_service.add_custom_domain(1, "trade.acme.com")
        mock_domain_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_registered_domain(
        self, domain_service, mock_domain_repo, mock_probe
    ):
        mock_domain_repo.get_by_domain.return_value = pending()

        with pytest.raises(DuplicateDomainError):
            await domain_service.add_custom_domain(1, "trade.acme.com")
        mock_probe.duplicate_domain.assert_called_once_with("trade.acme.com")

    @pytest.mark.asyncio
    async def test_unique_violation_on_save_is_duplicate(
        self, domain_service, mock_domain_repo
    ):
        mock_domain_repo.save.side_effect = DuplicateDomainError("taken")

        with pytest.raises(DuplicateDomainError):
            await domain_service.add_custom_domain(1, "trade.acme.com")


class TestVerifyDomain:
    @pytest.mark.asyncio
    async def test_success_activates_and_attaches(
        self,
        domain_service,
        mock_domain_repo,
        mock_platform_repo,
        mock_verifier,
        mock_probe,
        platform,
    ):
        record = pending()
        mock_domain_repo.get.return_value = record

        assert await domain_service.verify_domain(1, "trade.acme.com") is True

        mock_verifier.verify.assert_awaited_once_with(
            "trade.acme.com", record.verification_token
        )
        assert record.status is DomainStatus.ACTIVE
        assert record.verified_at is not None
        assert platform.custom_domain == "trade.acme.com"
        mock_platform_repo.save.assert_awaited_once_with(platform)
        mock_probe.domain_verified.assert_called_once_with(1, "trade.acme.com")

    @pytest.mark.asyncio
    async def test_token_missing_keeps_pending(
        self, domain_service, mock_domain_repo, mock_platform_repo, mock_verifier, mock_probe
    ):
        record = pending()
        mock_domain_repo.get.return_value = record
        mock_verifier.verify.return_value = False

        assert await domain_service.verify_domain(1, "trade.acme.com") is False

        assert record.status is DomainStatus.PENDING
        mock_domain_repo.save.assert_not_called()
        mock_platform_repo.save.assert_not_called()
        mock_probe.domain_verification_pending.assert_called_once_with(
            1, "trade.acme.com"
        )

    @pytest.mark.asyncio
    async def test_already_active_skips_dns(
        self, domain_service, mock_domain_repo, mock_verifier
    ):
        record = pending()
        record.mark_verified()
        mock_domain_repo.get.return_value = record

        assert await domain_service.verify_domain(1, "trade.acme.com") is True
        mock_verifier.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_domain_raises(self, domain_service, mock_probe):
        with pytest.raises(DomainNotFoundError):
            await domain_service.verify_domain(1, "trade.acme.com")
        mock_probe.domain_not_found.assert_called_once_with(1, "trade.acme.com")


class TestRemoveDomain:
    @pytest.mark.asyncio
    async def test_removes_and_detaches(
        self, domain_service, mock_domain_repo, mock_platform_repo, mock_probe, platform
    ):
        platform.custom_domain = "trade.acme.com"
        record = pending()
        mock_domain_repo.get.return_value = record

        assert await domain_service.remove_domain(1, "TRADE.acme.com") is True

        mock_domain_repo.delete.assert_awaited_once_with(record)
        assert platform.custom_domain is None
        mock_platform_repo.save.assert_awaited_once_with(platform)
        mock_probe.domain_removed.assert_called_once_with(
            1, "trade.acme.com", detached=True
        )

    @pytest.mark.asyncio
    async def test_keeps_other_custom_domain(
        self, domain_service, mock_domain_repo, mock_platform_repo, platform
    ):
        platform.custom_domain = "other.acme.com"
        mock_domain_repo.get.return_value = pending()

        assert await domain_service.remove_domain(1, "trade.acme.com") is True

        assert platform.custom_domain == "other.acme.com"
        mock_platform_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_domain_returns_false(self, domain_service, mock_domain_repo):
        assert await domain_service.remove_domain(1, "trade.acme.com") is False
        mock_domain_repo.delete.assert_not_called()


class TestListDomains:
    @pytest.mark.asyncio
    async def test_lists_registrations(self, domain_service, mock_domain_repo):
        mock_domain_repo.list_by_platform.return_value = [pending()]

        records = await domain_service.list_domains(1)

        assert [r.domain for r in records] == ["trade.acme.com"]

    @pytest.mark.asyncio
    async def test_unknown_platform_raises(self, domain_service, mock_platform_repo):
        mock_platform_repo.get_by_id.return_value = None

        with pytest.raises(PlatformNotFoundError):
            await domain_service.list_domains(1)
