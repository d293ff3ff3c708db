"""IP-echo lookup.

Endpoint:
  - GET <ip_echo_url>?format=json
"""

from __future__ import annotations

import logging

from isspass._api._common import parse_model
from isspass._constants import HTTP_OK
from isspass._redact import mask_ip
from isspass._transport import Transport
from isspass.config import IssPassConfig
from isspass.exceptions import IssPassRemoteStatusError
from isspass.models.responses import IpEchoResponse

_logger = logging.getLogger(__name__)


async def fetch_my_ip(config: IssPassConfig, transport: Transport) -> str:
    """Return the caller's public IP address as reported by the IP-echo service.

    Raises
    ------
    IssPassTransportError
        If the request cannot complete.
    IssPassRemoteStatusError
        If the service answers with a status other than 200.
    IssPassDecodeError
        If the body is not JSON or has no ``ip`` string.
    """
    endpoint = config.ip_echo_url
    response = await transport.get(endpoint, {"format": "json"})

    if response.status != HTTP_OK:
        raise IssPassRemoteStatusError(
            f"Status Code {response.status} when fetching IP. Response: {response.text}",
            endpoint=endpoint,
            status_code=response.status,
            body=response.text,
        )

    ip = parse_model(IpEchoResponse, endpoint=endpoint, text=response.text).ip
    _logger.debug("Public IP resolved: %s", mask_ip(ip))
    return ip
