"""Unit tests for the resolved platform value object and its probe."""

from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest
import structlog

from shared_kernel.middleware.observability import DefaultPlatformContextProbe
from shared_kernel.middleware.platform_context import ResolvedPlatform
from shared_kernel.observability_context import ObservationContext


def make_resolved(**overrides) -> ResolvedPlatform:
    fields = dict(
        id=1,
        name="Acme",
        owner_id="7",
        config={"theme": "dark"},
        logo_url=None,
        is_custom_domain=False,
        domain="acme.liquidlab.trade",
    )
    fields.update(overrides)
    return ResolvedPlatform(**fields)


class TestResolvedPlatform:
    def test_is_immutable(self):
        platform = make_resolved()

        with pytest.raises(FrozenInstanceError):
            platform.id = 2  # type: ignore[misc]

    def test_equality_by_value(self):
        assert make_resolved() == make_resolved()
        assert make_resolved() != make_resolved(is_custom_domain=True)


class TestDefaultPlatformContextProbe:
    @pytest.fixture
    def mock_logger(self):
        return MagicMock(spec=structlog.stdlib.BoundLogger)

    def test_platform_resolved_logs_debug(self, mock_logger):
        probe = DefaultPlatformContextProbe(logger=mock_logger)

        probe.platform_resolved(platform_id=1, host="acme.liquidlab.trade", is_custom_domain=False)

        mock_logger.debug.assert_called_once_with(
            "platform_resolved",
            platform_id=1,
            host="acme.liquidlab.trade",
            is_custom_domain=False,
        )

    def test_resolution_failed_logs_error_with_type(self, mock_logger):
        probe = DefaultPlatformContextProbe(logger=mock_logger)

        probe.platform_resolution_failed(
            host="acme.liquidlab.trade", error=ConnectionError("down")
        )

        mock_logger.error.assert_called_once_with(
            "platform_resolution_failed",
            host="acme.liquidlab.trade",
            error="down",
            error_type="ConnectionError",
        )

    def test_not_found_logs_info(self, mock_logger):
        probe = DefaultPlatformContextProbe(logger=mock_logger)

        probe.platform_not_found(host="trade.acme.com", lookup="custom_domain", key="trade.acme.com")

        mock_logger.info.assert_called_once_with(
            "platform_not_found",
            host="trade.acme.com",
            lookup="custom_domain",
            key="trade.acme.com",
        )

    def test_with_context_includes_request_id(self, mock_logger):
        context = ObservationContext(request_id="req-9")
        probe = DefaultPlatformContextProbe(logger=mock_logger).with_context(context)

        probe.platform_required_but_missing(host="ghost.liquidlab.trade", path="/platform")

        mock_logger.info.assert_called_once_with(
            "platform_required_but_missing",
            host="ghost.liquidlab.trade",
            path="/platform",
            request_id="req-9",
        )

    @pytest.mark.parametrize(
        "call, method, event",
        [
            (
                lambda p: p.resolution_skipped(host="localhost", path="/", reason="exempt_host"),
                "debug",
                "platform_resolution_skipped",
            ),
            (
                lambda p: p.platform_resolved(
                    platform_id=1, host="localhost", is_custom_domain=False
                ),
                "debug",
                "platform_resolved",
            ),
            (
                lambda p: p.platform_not_found(host="localhost", lookup="subdomain", key="x"),
                "info",
                "platform_not_found",
            ),
            (
                lambda p: p.invalid_host(host="localhost", reason="empty label"),
                "warning",
                "platform_resolution_invalid_host",
            ),
            (
                lambda p: p.platform_resolution_failed(
                    host="localhost", error=ConnectionError("down")
                ),
                "error",
                "platform_resolution_failed",
            ),
            (
                lambda p: p.platform_required_but_missing(host="localhost", path="/platform"),
                "info",
                "platform_required_but_missing",
            ),
        ],
    )
    def test_context_host_does_not_collide_with_event_host(
        self, mock_logger, call, method, event
    ):
        context = ObservationContext(request_id="req-3", host="acme.liquidlab.trade")
        probe = DefaultPlatformContextProbe(logger=mock_logger).with_context(context)

        call(probe)

        log = getattr(mock_logger, method)
        log.assert_called_once()
        args, kwargs = log.call_args
        assert args == (event,)
        assert kwargs["host"] == "localhost"
        assert kwargs["request_id"] == "req-3"


class TestObservationContext:
    def test_as_dict_skips_unset_values(self):
        assert ObservationContext().as_dict() == {}

    def test_with_extra(self):
        context = ObservationContext(
            request_id="req-1", host="acme.liquidlab.trade"
        ).with_extra(route="/platform")

        assert context.as_dict() == {
            "request_id": "req-1",
            "host": "acme.liquidlab.trade",
            "route": "/platform",
        }
