"""Unit tests for custom domain management routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from infrastructure.settings import (
    DomainVerificationSettings,
    get_domain_verification_settings,
)
from platforms.application.services import DomainService
from platforms.domain.aggregates import PlatformDomain
from platforms.domain.exceptions import InvalidDomainError
from platforms.ports.exceptions import (
    DomainNotFoundError,
    DuplicateDomainError,
    PlatformNotFoundError,
)

TOKEN = "liquidlab-verify-" + "c" * 32


def make_record(**overrides) -> PlatformDomain:
    fields = dict(
        id=10,
        platform_id=1,
        domain="trade.acme.com",
        verification_token=TOKEN,
    )
    fields.update(overrides)
    return PlatformDomain(**fields)


@pytest.fixture
def mock_domain_service() -> AsyncMock:
    return AsyncMock(spec=DomainService)


@pytest.fixture
def test_client(mock_domain_service: AsyncMock) -> TestClient:
    from platforms.dependencies.domain import get_domain_service
    from platforms.presentation import router

    app = FastAPI()
    app.dependency_overrides[get_domain_service] = lambda: mock_domain_service
    app.dependency_overrides[get_domain_verification_settings] = (
        lambda: DomainVerificationSettings(record_prefix="_liquidlab")
    )
    app.include_router(router)
    return TestClient(app)


class TestAddDomain:
    def test_returns_verification_instructions(self, test_client, mock_domain_service):
        mock_domain_service.add_custom_domain.return_value = make_record()

        response = test_client.post(
            "/api/platforms/1/domains", json={"domain": "Trade.Acme.com"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["status"] == "pending"
        assert body["verification_token"] == TOKEN
        assert body["txt_record"] == "_liquidlab.trade.acme.com"
        mock_domain_service.add_custom_domain.assert_called_once_with(
            1, "Trade.Acme.com"
        )

    @pytest.mark.parametrize(
        "error, expected",
        [
            (InvalidDomainError("bad"), status.HTTP_400_BAD_REQUEST),
            (PlatformNotFoundError("x"), status.HTTP_404_NOT_FOUND),
            (DuplicateDomainError("x"), status.HTTP_409_CONFLICT),
            (RuntimeError("db"), status.HTTP_500_INTERNAL_SERVER_ERROR),
        ],
    )
    def test_error_mapping(self, test_client, mock_domain_service, error, expected):
        mock_domain_service.add_custom_domain.side_effect = error

        response = test_client.post(
            "/api/platforms/1/domains", json={"domain": "trade.acme.com"}
        )

        assert response.status_code == expected


class TestListDomains:
    def test_lists(self, test_client, mock_domain_service):
        mock_domain_service.list_domains.return_value = [make_record()]

        response = test_client.get("/api/platforms/1/domains")

        assert response.status_code == status.HTTP_200_OK
        assert [d["domain"] for d in response.json()] == ["trade.acme.com"]

    def test_unknown_platform_is_404(self, test_client, mock_domain_service):
        mock_domain_service.list_domains.side_effect = PlatformNotFoundError("x")

        response = test_client.get("/api/platforms/1/domains")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestVerifyDomain:
    def test_verified(self, test_client, mock_domain_service):
        mock_domain_service.verify_domain.return_value = True

        response = test_client.post("/api/platforms/1/domains/trade.acme.com/verify")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"domain": "trade.acme.com", "verified": True}
        mock_domain_service.verify_domain.assert_called_once_with(1, "trade.acme.com")

    def test_pending(self, test_client, mock_domain_service):
        mock_domain_service.verify_domain.return_value = False

        response = test_client.post("/api/platforms/1/domains/trade.acme.com/verify")

        assert response.json()["verified"] is False

    def test_unknown_domain_is_404(self, test_client, mock_domain_service):
        mock_domain_service.verify_domain.side_effect = DomainNotFoundError("x")

        response = test_client.post("/api/platforms/1/domains/trade.acme.com/verify")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRemoveDomain:
    def test_removes(self, test_client, mock_domain_service):
        mock_domain_service.remove_domain.return_value = True

        response = test_client.delete("/api/platforms/1/domains/trade.acme.com")

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_unknown_domain_is_404(self, test_client, mock_domain_service):
        mock_domain_service.remove_domain.return_value = False

        response = test_client.delete("/api/platforms/1/domains/trade.acme.com")

        assert response.status_code == status.HTTP_404_NOT_FOUND
