"""Pass-time prediction lookup.

Endpoint:
  - GET <pass_times_url>?lat=<latitude>&lon=<longitude>
"""

from __future__ import annotations

import logging

from isspass._api._common import parse_model
from isspass._constants import HTTP_OK
from isspass._transport import Transport
from isspass.config import IssPassConfig
from isspass.exceptions import IssPassRemoteStatusError
from isspass.models.coordinates import Coordinates
from isspass.models.pass_record import PassRecord
from isspass.models.responses import PassTimesResponse

_logger = logging.getLogger(__name__)


def build_pass_params(coordinates: Coordinates) -> dict[str, str]:
    """Query parameters for the pass-prediction service."""
    return {"lat": str(coordinates.latitude), "lon": str(coordinates.longitude)}


async def fetch_pass_times(
    config: IssPassConfig,
    transport: Transport,
    coordinates: Coordinates,
) -> list[PassRecord]:
    """Return upcoming passes over *coordinates* in the order the service lists them.

    The transport raises before any body is seen, so a failed request
    never reaches the decoder.
    """
    endpoint = config.pass_times_url
    response = await transport.get(endpoint, build_pass_params(coordinates))

    if response.status != HTTP_OK:
        raise IssPassRemoteStatusError(
            f"Status Code {response.status} when fetching ISS pass times: {response.text}",
            endpoint=endpoint,
            status_code=response.status,
            body=response.text,
        )

    passes = parse_model(PassTimesResponse, endpoint=endpoint, text=response.text).response
    _logger.debug("Fetched %d pass times", len(passes))
    return passes
