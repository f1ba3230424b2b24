"""
Airport model - identity and location of a registered airport.

An airport is identified by its three letter IATA code alone. Two
instances with the same code compare equal whatever their coordinates,
so counters and sets keyed by airport behave like keys on the code.
"""

from dataclasses import dataclass, field

from airweather.errors import InvalidAirport

IATA_CODE_LENGTH = 3


@dataclass(frozen=True)
class Airport:
    """
    Basic airport information.

    Coordinates are in degrees: latitude in [-90, 90], longitude in
    [-180, 180].
    """
    iata: str
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)

    def __post_init__(self):
        if not isinstance(self.iata, str) or len(self.iata) != IATA_CODE_LENGTH:
            raise InvalidAirport(f'IATA code must be {IATA_CODE_LENGTH} characters: {self.iata!r}')
        if not -90 <= self.latitude <= 90:
            raise InvalidAirport(f'Latitude must be between -90 and 90: {self.latitude}')
        if not -180 <= self.longitude <= 180:
            raise InvalidAirport(f'Longitude must be between -180 and 180: {self.longitude}')

    @property
    def coordinates(self) -> tuple:
        return (self.latitude, self.longitude)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'iata': self.iata,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }
