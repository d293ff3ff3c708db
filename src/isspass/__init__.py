"""isspass - Async Python client for upcoming ISS passes over your location."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("isspass")
except PackageNotFoundError:
    __version__ = "0+local"
from isspass._transport import HttpResponse, HttpTransport, Transport
from isspass.client import IssPassClient
from isspass.config import IssPassConfig
from isspass.events import LookupStep, StepEvent, log_step_event
from isspass.exceptions import (
    IssPassConfigError,
    IssPassDecodeError,
    IssPassError,
    IssPassRemoteStatusError,
    IssPassTransportError,
)
from isspass.models import Coordinates, PassRecord, format_pass_time
from isspass.pipeline import locate_and_predict
from isspass.result import OperationResult

__all__ = [
    "__version__",
    "Coordinates",
    "HttpResponse",
    "HttpTransport",
    "IssPassClient",
    "IssPassConfig",
    "IssPassConfigError",
    "IssPassDecodeError",
    "IssPassError",
    "IssPassRemoteStatusError",
    "IssPassTransportError",
    "LookupStep",
    "OperationResult",
    "PassRecord",
    "StepEvent",
    "Transport",
    "format_pass_time",
    "locate_and_predict",
    "log_step_event",
]
