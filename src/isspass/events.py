"""Step events emitted while the lookup chain runs.

Observers are a side channel: they see each step's result after it
succeeds but cannot change what the chain returns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from isspass._redact import redact_for_log

_logger = logging.getLogger(__name__)


class LookupStep(StrEnum):
    IP = "ip"
    GEO = "geo"
    PASS_TIMES = "pass_times"


class StepEvent(BaseModel):
    """A completed step and the value it produced."""

    model_config = ConfigDict(frozen=True)

    step: LookupStep
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    value: Any = Field(..., description="The step's result, passed on unchanged to the next step")

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


StepObserver = Callable[[StepEvent], None]


def notify(observer: StepObserver | None, step: LookupStep, value: Any) -> None:
    """Deliver a step event, logging (not raising) observer failures."""
    if observer is None:
        return
    try:
        observer(StepEvent(step=step, value=value))
    except Exception:  # noqa: BLE001
        _logger.warning("Step observer failed for %s", step, exc_info=True)


def log_step_event(event: StepEvent) -> None:
    """Observer that logs every completed step at INFO level."""
    if event.step is LookupStep.IP:
        _logger.info("It worked! Returned IP: %s", redact_for_log(event.value))
    elif event.step is LookupStep.GEO:
        _logger.info(
            "It worked! Returned coordinates: latitude: %s, longitude: %s",
            event.value.latitude,
            event.value.longitude,
        )
    else:
        _logger.info("It worked! Returned %d flyover times", len(event.value))
