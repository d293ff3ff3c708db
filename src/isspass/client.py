"""High-level async client for the ISS pass lookup chain."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from isspass import pipeline as _pipeline
from isspass._api import geo as _geo_api
from isspass._api import ip as _ip_api
from isspass._api import passes as _passes_api
from isspass._transport import HttpTransport, Transport
from isspass.config import IssPassConfig
from isspass.events import StepObserver
from isspass.exceptions import IssPassError
from isspass.models.coordinates import Coordinates
from isspass.models.pass_record import PassRecord
from isspass.result import OperationResult

_logger = logging.getLogger(__name__)


class IssPassClient:
    """Async client for the IP → coordinates → pass times lookups.

    Usage::

        async with IssPassClient() as client:
            passes = await client.next_pass_times()

    The client holds no per-call state, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        config: IssPassConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        on_step: StepObserver | None = None,
    ) -> None:
        self._config = config or IssPassConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport = transport
        self._external_transport = transport is not None
        self._on_step = on_step

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> IssPassClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    @property
    def config(self) -> IssPassConfig:
        return self._config

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise IssPassError("Client not initialized. Use 'async with IssPassClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Single lookups
    # ------------------------------------------------------------------

    async def fetch_my_ip(self) -> str:
        """Return the caller's public IP address."""
        return await _ip_api.fetch_my_ip(self._config, self._require_transport())

    async def fetch_coords_by_ip(self, ip: str) -> Coordinates:
        """Return approximate coordinates for *ip*."""
        return await _geo_api.fetch_coords_by_ip(self._config, self._require_transport(), ip)

    async def fetch_pass_times(self, coordinates: Coordinates) -> list[PassRecord]:
        """Return upcoming passes over *coordinates*."""
        return await _passes_api.fetch_pass_times(self._config, self._require_transport(), coordinates)

    # ------------------------------------------------------------------
    # Composed lookup
    # ------------------------------------------------------------------

    async def next_pass_times(self) -> list[PassRecord]:
        """Locate the caller and return upcoming passes overhead.

        Raises the first failing step's error unchanged.
        """
        return await _pipeline.locate_and_predict(
            self._config,
            self._require_transport(),
            on_step=self._on_step,
        )

    async def try_next_pass_times(self) -> OperationResult[list[PassRecord]]:
        """Like :meth:`next_pass_times` but returns failures as an :class:`OperationResult`."""
        result = await OperationResult.capture(self.next_pass_times())
        if not result.ok:
            _logger.debug("Pass time lookup failed: %s", type(result.error).__name__)
        return result
