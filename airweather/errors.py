"""
Exception hierarchy for AirWeather.

Every failure the store and query engine report to callers derives from
WeatherError. Each class carries the HTTP status the API layer answers
with, so the Flask error handler can map them without a lookup table.
"""


class WeatherError(Exception):
    """Base class for all reported store and query failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'error': self.message}


class UnknownAirport(WeatherError):
    """Operation referenced an IATA code that is not registered."""

    status_code = 404

    def __init__(self, code: str):
        super().__init__(f'Unknown airport: {code}')
        self.code = code


class DuplicateAirport(WeatherError):
    """Add was called with an IATA code that is already registered."""

    status_code = 409

    def __init__(self, code: str):
        super().__init__(f'Airport already exists: {code}')
        self.code = code


class InvalidAirport(WeatherError):
    """Airport code or coordinates are malformed or out of range."""


class UnknownDataPointType(WeatherError):
    """Measurement kind does not name one of the known data point types."""

    def __init__(self, kind: str):
        super().__init__(f'Unknown data point type: {kind}')
        self.kind = kind


class InvalidMeasurement(WeatherError):
    """Measurement payload is malformed or its mean is out of range."""


class InvalidRadius(WeatherError):
    """Radius parameter could not be parsed as a non-negative number."""

    def __init__(self, radius: str):
        super().__init__(f'Invalid radius: {radius!r}')
        self.radius = radius
