"""Wire models for the three lookup service response bodies."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from isspass.models._base import IssBaseModel
from isspass.models.pass_record import PassRecord


class IpEchoResponse(IssBaseModel):
    """``{"ip": "<string>"}`` from the IP-echo service."""

    ip: str = Field(min_length=1)


class GeoLookupResponse(IssBaseModel):
    """Geolocation body.

    The service signals failure through ``success`` rather than the HTTP
    status, so every field except ``success`` is optional here and the
    coordinates are only required once ``success`` is truthy.
    """

    success: Any = None
    message: str | None = None
    ip: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class PassTimesResponse(IssBaseModel):
    """``{"response": [{"risetime": ..., "duration": ...}, ...]}``."""

    response: list[PassRecord]
