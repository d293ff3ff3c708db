"""Data models for lookup service responses."""

from isspass.models._base import IssBaseModel
from isspass.models.coordinates import Coordinates
from isspass.models.pass_record import PassRecord, format_pass_time
from isspass.models.responses import GeoLookupResponse, IpEchoResponse, PassTimesResponse

__all__ = [
    "Coordinates",
    "GeoLookupResponse",
    "IpEchoResponse",
    "IssBaseModel",
    "PassRecord",
    "PassTimesResponse",
    "format_pass_time",
]
