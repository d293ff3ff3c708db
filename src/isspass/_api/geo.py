"""IP geolocation lookup.

Endpoint:
  - GET <geo_url><ip>

The service reports failures through the ``success`` body field, often
with a 200 status, so the body is decoded whatever the status code.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from isspass._api._common import excerpt, parse_model
from isspass._constants import HTTP_OK
from isspass._transport import Transport
from isspass.config import IssPassConfig
from isspass.exceptions import IssPassDecodeError, IssPassRemoteStatusError
from isspass.models.coordinates import Coordinates
from isspass.models.responses import GeoLookupResponse

_logger = logging.getLogger(__name__)


def _format_field(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return "undefined" if value is None else str(value)


def build_geo_url(config: IssPassConfig, ip: str) -> str:
    """Append *ip* to the geolocation base URL as a single path segment."""
    base = config.geo_url if config.geo_url.endswith("/") else f"{config.geo_url}/"
    return f"{base}{quote(ip, safe='')}"


async def fetch_coords_by_ip(config: IssPassConfig, transport: Transport, ip: str) -> Coordinates:
    """Resolve *ip* to approximate coordinates.

    Parameters
    ----------
    config : IssPassConfig
        Client configuration.
    transport : Transport
        HTTP transport.
    ip : str
        Address to locate, usually the result of
        :func:`isspass._api.ip.fetch_my_ip`.

    Returns
    -------
    Coordinates
        Latitude and longitude reported by the service.

    Raises
    ------
    IssPassTransportError
        If the request cannot complete.
    IssPassRemoteStatusError
        If the body's ``success`` field is falsy. The message carries the
        reported flag, the service message and the queried IP.
    IssPassDecodeError
        If the body is not a JSON object or a successful body has no
        usable coordinates.
    """
    endpoint = build_geo_url(config, ip)
    response = await transport.get(endpoint)

    try:
        body = parse_model(GeoLookupResponse, endpoint=endpoint, text=response.text)
    except IssPassDecodeError as exc:
        if response.status == HTTP_OK:
            raise
        # An error page in place of the JSON body: report the status instead.
        raise IssPassRemoteStatusError(
            f"Status Code {response.status} when fetching coordinates for IP {ip}: {excerpt(response.text)}",
            endpoint=endpoint,
            status_code=response.status,
            body=response.text,
        ) from exc

    if not body.success:
        raise IssPassRemoteStatusError(
            f"Success status was {_format_field(body.success)}. "
            f"Server message says: {_format_field(body.message)} when fetching for IP {body.ip or ip}",
            endpoint=endpoint,
            status_code=response.status,
            body=response.text,
        )

    coordinates = parse_coordinates(body, endpoint=endpoint, text=response.text)
    _logger.debug("Coordinates resolved: %s", coordinates)
    return coordinates


def parse_coordinates(body: GeoLookupResponse, *, endpoint: str, text: str) -> Coordinates:
    """Build :class:`Coordinates` from a successful body.

    Missing or out-of-range values raise :class:`IssPassDecodeError`.
    """
    if body.latitude is None or body.longitude is None:
        raise IssPassDecodeError(
            f"Missing latitude/longitude from {endpoint}",
            endpoint=endpoint,
            body=text,
        )
    try:
        return Coordinates(latitude=body.latitude, longitude=body.longitude)
    except ValueError as exc:
        raise IssPassDecodeError(
            f"Out-of-range coordinates from {endpoint}: {body.latitude}, {body.longitude}",
            endpoint=endpoint,
            body=text,
        ) from exc
