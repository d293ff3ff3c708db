"""Chain the three lookups: public IP, then coordinates, then pass times."""

from __future__ import annotations

from isspass._api.geo import fetch_coords_by_ip
from isspass._api.ip import fetch_my_ip
from isspass._api.passes import fetch_pass_times
from isspass._transport import Transport
from isspass.config import IssPassConfig
from isspass.events import LookupStep, StepObserver, notify
from isspass.models.pass_record import PassRecord


async def locate_and_predict(
    config: IssPassConfig,
    transport: Transport,
    *,
    on_step: StepObserver | None = None,
) -> list[PassRecord]:
    """Return upcoming passes over the caller's current location.

    Each step needs the previous one's result, so they run strictly in
    order. The first failing step's exception propagates as-is and no
    later step is attempted.

    Parameters
    ----------
    config : IssPassConfig
        Client configuration.
    transport : Transport
        HTTP transport shared by all three steps.
    on_step : callable, optional
        Receives a :class:`~isspass.events.StepEvent` after each
        successful step.

    Returns
    -------
    list[PassRecord]
        Pass records exactly as the pass-prediction step returned them.
    """
    ip = await fetch_my_ip(config, transport)
    notify(on_step, LookupStep.IP, ip)

    coordinates = await fetch_coords_by_ip(config, transport, ip)
    notify(on_step, LookupStep.GEO, coordinates)

    passes = await fetch_pass_times(config, transport, coordinates)
    notify(on_step, LookupStep.PASS_TIMES, passes)
    return passes
