"""Geographic coordinate representation."""

from dataclasses import dataclass

from geocoord_formatter.types import Degrees


@dataclass(frozen=True)
class Coordinate:
    """Latitude and longitude pair in decimal degrees.

    Values are not range-checked; out-of-range coordinates are still formatted.

    Attributes:
        latitude: Latitude in degrees, positive north.
        longitude: Longitude in degrees, positive east.
    """

    latitude: Degrees
    longitude: Degrees

    @property
    def as_tuple(self) -> tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)
