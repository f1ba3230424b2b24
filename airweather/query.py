"""
Weather queries and service health reporting.

Composes the airport store, distance calculation and query telemetry:

1. Radius search: every airport within a radius of a reference airport
   that has reported at least one reading
2. Health report: count of fresh records plus request frequency stats
"""

import logging
import math
import time
from typing import List, Optional

from airweather.analytics import QueryTelemetry
from airweather.config import config
from airweather.errors import InvalidRadius
from airweather.geo import distance_km
from airweather.models import AtmosphericRecord
from airweather.store import AirportStore

logger = logging.getLogger(__name__)


def parse_radius(radius_string: Optional[str], max_radius: Optional[float] = None) -> float:
    """
    Parse a radius parameter in kilometers.

    Missing or blank input means radius 0 (the airport itself). Anything
    else must be a finite, non-negative number no larger than
    `max_radius` (the configured maximum by default).
    """
    max_radius = max_radius if max_radius is not None else config.store.max_radius_km

    if radius_string is None or not radius_string.strip():
        return 0.0

    try:
        radius = float(radius_string)
    except ValueError:
        raise InvalidRadius(radius_string) from None

    if not math.isfinite(radius) or radius < 0 or radius > max_radius:
        raise InvalidRadius(radius_string)

    return radius


class QueryEngine:
    """
    Answers proximity weather queries against an AirportStore.

    Every query is counted in the telemetry, which feeds the
    frequency sections of the health report.
    """

    def __init__(
        self,
        store: AirportStore,
        telemetry: Optional[QueryTelemetry] = None,
        freshness_seconds: Optional[float] = None,
        max_radius: Optional[float] = None,
    ):
        self.store = store
        self.telemetry = telemetry or QueryTelemetry(
            config.store.default_histogram_bound,
            max_radius=config.store.max_radius_km,
        )
        self.freshness_seconds = (
            freshness_seconds if freshness_seconds is not None else config.store.freshness_seconds
        )
        self.max_radius = max_radius if max_radius is not None else config.store.max_radius_km

    def find_by_radius(self, iata: str, radius_string: Optional[str]) -> List[AtmosphericRecord]:
        """
        Find atmospheric records around an airport.

        Radius 0 returns the airport's own record even if it is empty.
        A positive radius returns, in registration order, the records of
        all airports within that distance which have at least one
        reading; the reference airport itself is included on the same
        terms.

        Raises InvalidRadius or UnknownAirport.
        """
        radius = parse_radius(radius_string, self.max_radius)
        airport = self.store.get(iata)
        self.telemetry.record_query(airport, radius)

        if radius == 0:
            return [self.store.get_record(iata)]

        origin = airport.coordinates
        result = [
            entry.record
            for entry in self.store.entries()
            if distance_km(origin, entry.airport.coordinates) <= radius
            and entry.record.has_any_reading()
        ]

        logger.debug(f'Radius query {iata} {radius}km matched {len(result)} records')
        return result

    def status_report(self, now: Optional[float] = None) -> dict:
        """
        Build the health report.

        Returns:
        - datasize: records with readings updated inside the freshness window
        - iata_freq: fraction of queries per registered airport
        - radius_freq: query counts per 1 km radius bucket
        """
        now = now if now is not None else time.time()
        entries = self.store.entries()

        datasize = sum(
            1 for entry in entries
            if entry.record.is_fresh(now, self.freshness_seconds)
        )

        return {
            'datasize': datasize,
            'iata_freq': self.telemetry.airport_frequencies(e.airport for e in entries),
            'radius_freq': self.telemetry.radius_histogram(),
        }
