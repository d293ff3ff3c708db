"""Client configuration for isspass."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any
from urllib.parse import urlsplit

from isspass._constants import DEFAULT_REQUEST_TIMEOUT, GEO_URL, IP_ECHO_URL, PASS_TIMES_URL, USER_AGENT
from isspass.exceptions import IssPassConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class IssPassConfig:
    """Client configuration.

    Parameters
    ----------
    ip_echo_url : str
        IP-echo service queried for the caller's public address.
    geo_url : str
        Geolocation service base URL. The IP address is appended as the
        last path segment.
    pass_times_url : str
        Pass-prediction service URL, queried with ``lat`` and ``lon``.
    request_timeout : float
        Total per-request timeout in seconds. Expiry surfaces as
        :class:`~isspass.exceptions.IssPassTransportError`.
    user_agent : str
        ``User-Agent`` header sent with every request.
    api_trace_enabled : bool
        Log redacted request/response traces at DEBUG level.
    """

    ip_echo_url: str = IP_ECHO_URL
    geo_url: str = GEO_URL
    pass_times_url: str = PASS_TIMES_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        for name in ("ip_echo_url", "geo_url", "pass_times_url"):
            value = getattr(self, name)
            parts = urlsplit(value)
            if parts.scheme not in ("http", "https") or not parts.netloc:
                raise IssPassConfigError(f"{name} must be an absolute http(s) URL, got {value!r}")
        if not (math.isfinite(self.request_timeout) and self.request_timeout > 0):
            raise IssPassConfigError(f"request_timeout must be a positive finite number, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> IssPassConfig:
        """Create configuration from environment variables.

        Reads optional ``ISSPASS_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        IssPassConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ISSPASS_IP_ECHO_URL": "ip_echo_url",
            "ISSPASS_GEO_URL": "geo_url",
            "ISSPASS_PASS_TIMES_URL": "pass_times_url",
            "ISSPASS_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("ISSPASS_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise IssPassConfigError(f"ISSPASS_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("ISSPASS_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
