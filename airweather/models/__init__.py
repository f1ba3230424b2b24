"""
Domain models for AirWeather.

Airports are immutable identities keyed by IATA code; each one is paired
with a mutable AtmosphericRecord holding the latest reading per kind.
"""

from airweather.models.airport import Airport
from airweather.models.atmospheric import (
    AtmosphericRecord,
    DataPointType,
    Measurement,
    VALID_RANGES,
    validate,
)

__all__ = [
    'Airport',
    'AtmosphericRecord',
    'DataPointType',
    'Measurement',
    'VALID_RANGES',
    'validate',
]
