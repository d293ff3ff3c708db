"""Predicted overhead pass model."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo

from pydantic import StrictInt

from isspass.models._base import IssBaseModel


class PassRecord(IssBaseModel):
    """One predicted visibility window.

    Parameters
    ----------
    risetime : int
        Rise time in seconds since the Unix epoch.
    duration : int
        Visible duration in seconds.
    raw : dict
        Full record dict as returned by the service.
    """

    risetime: StrictInt
    duration: StrictInt

    @property
    def rise_at(self) -> datetime:
        """Rise time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.risetime, tz=UTC)

    @property
    def set_at(self) -> datetime:
        """End of the visibility window."""
        return self.rise_at + timedelta(seconds=self.duration)


def format_pass_time(record: PassRecord, tz: tzinfo | None = None) -> str:
    """Render *record* as a one-line human readable sentence.

    ``tz`` defaults to the local time zone of the running process.
    """
    rise = record.rise_at.astimezone(tz)
    return f"Next pass at {rise:%a %b %d %Y %H:%M:%S %Z} for {record.duration} seconds!"
