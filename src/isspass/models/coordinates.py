"""Geographic coordinates model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Latitude/longitude pair resolved from an IP address.

    Parameters
    ----------
    latitude : float
        Latitude in degrees, -90 to 90.
    longitude : float
        Longitude in degrees, -180 to 180.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
