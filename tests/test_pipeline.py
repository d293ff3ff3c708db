"""Tests for the chained IP → coordinates → pass times lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from isspass.client import IssPassClient
from isspass.config import IssPassConfig
from isspass.events import LookupStep, StepEvent, log_step_event
from isspass.exceptions import IssPassError, IssPassRemoteStatusError, IssPassTransportError
from isspass.models.coordinates import Coordinates
from isspass.pipeline import locate_and_predict
from isspass.result import OperationResult

if TYPE_CHECKING:
    from conftest import FakeServices

IP_URL = IssPassConfig().ip_echo_url
GEO_URL = IssPassConfig().geo_url
PASS_URL = IssPassConfig().pass_times_url


def _happy_path(services: FakeServices) -> None:
    services.reply(IP_URL, 200, '{"ip":"162.245.144.188"}')
    services.reply(GEO_URL, 200, '{"success":true,"latitude":38.7,"longitude":-90.2}')
    services.reply(PASS_URL, 200, '{"response":[{"risetime":134564234,"duration":600}]}')


@pytest.mark.asyncio
async def test_end_to_end_success(config: IssPassConfig, services: FakeServices) -> None:
    _happy_path(services)

    passes = await locate_and_predict(config, services)

    assert [p.model_dump() for p in passes] == [{"risetime": 134564234, "duration": 600}]
    assert services.calls == [
        (IP_URL, {"format": "json"}),
        (f"{GEO_URL}162.245.144.188", {}),
        (PASS_URL, {"lat": "38.7", "lon": "-90.2"}),
    ]


@pytest.mark.asyncio
async def test_end_to_end_geo_failure_stops_chain(config: IssPassConfig, services: FakeServices) -> None:
    services.reply(IP_URL, 200, '{"ip":"0.0.0.0"}')
    services.reply(GEO_URL, 200, '{"success":false,"message":"invalid IP","ip":"0.0.0.0"}')

    with pytest.raises(IssPassRemoteStatusError) as exc_info:
        await locate_and_predict(config, services)

    assert "invalid IP" in str(exc_info.value)
    assert "0.0.0.0" in str(exc_info.value)
    assert services.called(PASS_URL) == 0


@pytest.mark.asyncio
async def test_ip_failure_is_surfaced_verbatim(config: IssPassConfig, services: FakeServices) -> None:
    error = IssPassTransportError("network unreachable", endpoint=IP_URL)
    services.fail(IP_URL, error)
    events: list[StepEvent] = []

    with pytest.raises(IssPassTransportError) as exc_info:
        await locate_and_predict(config, services, on_step=events.append)

    assert exc_info.value is error
    assert services.called(GEO_URL) == 0
    assert services.called(PASS_URL) == 0
    assert events == []


@pytest.mark.asyncio
async def test_pass_times_payload_is_returned_unmodified(
    config: IssPassConfig, services: FakeServices, monkeypatch: pytest.MonkeyPatch
) -> None:
    _happy_path(services)
    sentinel = [object(), object()]

    async def _fake_fetch_pass_times(_config, _transport, coordinates):  # type: ignore[no-untyped-def]
        assert coordinates == Coordinates(latitude=38.7, longitude=-90.2)
        return sentinel

    monkeypatch.setattr("isspass.pipeline.fetch_pass_times", _fake_fetch_pass_times)

    assert await locate_and_predict(config, services) is sentinel


@pytest.mark.asyncio
async def test_observer_sees_each_step(config: IssPassConfig, services: FakeServices) -> None:
    _happy_path(services)
    events: list[StepEvent] = []

    passes = await locate_and_predict(config, services, on_step=events.append)

    assert [e.step for e in events] == [LookupStep.IP, LookupStep.GEO, LookupStep.PASS_TIMES]
    assert events[0].value == "162.245.144.188"
    assert events[1].value == Coordinates(latitude=38.7, longitude=-90.2)
    assert events[2].value is passes
    assert all(e.observed_at.tzinfo is not None for e in events)


@pytest.mark.asyncio
async def test_failing_observer_does_not_change_outcome(
    config: IssPassConfig, services: FakeServices, caplog: pytest.LogCaptureFixture
) -> None:
    _happy_path(services)

    def _broken(_event: StepEvent) -> None:
        raise RuntimeError("observer bug")

    with caplog.at_level(logging.WARNING, logger="isspass.events"):
        passes = await locate_and_predict(config, services, on_step=_broken)

    assert len(passes) == 1
    assert caplog.text.count("Step observer failed") == 3


@pytest.mark.asyncio
async def test_log_step_event_masks_ip(
    config: IssPassConfig, services: FakeServices, caplog: pytest.LogCaptureFixture
) -> None:
    _happy_path(services)

    with caplog.at_level(logging.INFO, logger="isspass.events"):
        await locate_and_predict(config, services, on_step=log_step_event)

    assert "Returned IP: 162.245.x.x" in caplog.text
    assert "162.245.144.188" not in caplog.text
    assert "latitude: 38.7, longitude: -90.2" in caplog.text
    assert "Returned 1 flyover times" in caplog.text


# ------------------------------------------------------------------
# Client surface
# ------------------------------------------------------------------


class TestClient:
    @pytest.mark.asyncio
    async def test_next_pass_times(self, services: FakeServices) -> None:
        _happy_path(services)

        async with IssPassClient(transport=services) as client:
            passes = await client.next_pass_times()

        assert [(p.risetime, p.duration) for p in passes] == [(134564234, 600)]

    @pytest.mark.asyncio
    async def test_single_lookups(self, services: FakeServices) -> None:
        _happy_path(services)

        async with IssPassClient(transport=services) as client:
            ip = await client.fetch_my_ip()
            coords = await client.fetch_coords_by_ip(ip)
            passes = await client.fetch_pass_times(coords)

        assert ip == "162.245.144.188"
        assert coords == Coordinates(latitude=38.7, longitude=-90.2)
        assert passes[0].risetime == 134564234

    @pytest.mark.asyncio
    async def test_try_next_pass_times_success(self, services: FakeServices) -> None:
        _happy_path(services)

        async with IssPassClient(transport=services) as client:
            result = await client.try_next_pass_times()

        assert result.ok
        assert result.error is None
        assert result.unwrap()[0].duration == 600

    @pytest.mark.asyncio
    async def test_try_next_pass_times_failure(self, services: FakeServices) -> None:
        services.reply(IP_URL, 200, '{"ip":"162.245.144.188"}')
        services.reply(GEO_URL, 200, '{"success":true,"latitude":38.7,"longitude":-90.2}')
        services.reply(PASS_URL, 503, "Service Unavailable")

        async with IssPassClient(transport=services) as client:
            result = await client.try_next_pass_times()

        assert not result.ok
        assert result.value is None
        assert isinstance(result.error, IssPassRemoteStatusError)
        assert result.error.status_code == 503
        with pytest.raises(IssPassRemoteStatusError) as exc_info:
            result.unwrap()
        assert exc_info.value is result.error

    @pytest.mark.asyncio
    async def test_client_requires_context(self) -> None:
        client = IssPassClient()

        with pytest.raises(IssPassError, match="not initialized"):
            await client.fetch_my_ip()


# ------------------------------------------------------------------
# OperationResult
# ------------------------------------------------------------------


class TestOperationResult:
    def test_cannot_hold_both(self) -> None:
        with pytest.raises(ValueError):
            OperationResult(value=[1], error=IssPassError("boom"))

    @pytest.mark.asyncio
    async def test_capture_lets_unrelated_errors_propagate(self) -> None:
        async def _bug() -> int:
            raise KeyError("ip")

        with pytest.raises(KeyError):
            await OperationResult.capture(_bug())

    def test_empty_success_carries_none(self) -> None:
        result = OperationResult.success(None)
        assert result.ok
        assert result.value is None
        assert result.unwrap() is None

    def test_fields_are_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            OperationResult([1])  # type: ignore[misc]

    def test_failure_is_not_ok(self) -> None:
        error = IssPassError("boom")
        result = OperationResult.failure(error)
        assert not result.ok
        assert result.error is error
