"""HTTP transport for the three lookup services."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import aiohttp

from isspass._redact import redact_for_log
from isspass.config import IssPassConfig
from isspass.exceptions import IssPassDecodeError, IssPassTransportError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status code and decoded body text of a completed request."""

    status: int
    text: str


class Transport(Protocol):
    """Structural transport interface used by the lookup modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    Implementations raise :class:`IssPassTransportError` when the request
    cannot complete, :class:`IssPassDecodeError` when the body is not valid
    text in its charset, and return an :class:`HttpResponse` otherwise,
    whatever the status code.
    """

    async def get(self, url: str, params: Mapping[str, str] | None = None) -> HttpResponse:
        ...


class HttpTransport:
    """GET-only transport on top of a shared ``aiohttp.ClientSession``."""

    def __init__(self, config: IssPassConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get(self, url: str, params: Mapping[str, str] | None = None) -> HttpResponse:
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", redact_for_log(url))
        if self._config.api_trace_enabled:
            _logger.debug("Request params: %s", redact_for_log(dict(params or {})))

        try:
            async with self._http.get(url, params=params, headers=headers, timeout=self._timeout) as resp:
                status = resp.status
                try:
                    text = await resp.text()
                except UnicodeDecodeError as exc:
                    raise IssPassDecodeError(
                        f"Undecodable body from {redact_for_log(url)} (HTTP {status}): {exc}",
                        endpoint=url,
                    ) from exc
        except aiohttp.ClientError as exc:
            raise IssPassTransportError(
                f"Request to {redact_for_log(url)} failed: {exc}",
                endpoint=url,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise IssPassTransportError(
                f"Request to {redact_for_log(url)} timed out after {self._config.request_timeout}s",
                endpoint=url,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("Response %d from %s: %s", status, redact_for_log(url), redact_for_log(text))

        return HttpResponse(status=status, text=text)
