"""Geographic fix reported by the session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Longitude and latitude in degrees, altitude in game units."""

    lon: float
    lat: float
    alt: float = 0.0

    @property
    def latlng(self) -> tuple[float, float]:
        """Return the fix as a (lat, lon) pair."""
        return self.lat, self.lon
