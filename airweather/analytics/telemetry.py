"""
Query telemetry - how often each airport and each radius is requested.

Counters live for the process lifetime only. They are not written to
disk; the health report exposes them so they can be scraped and
aggregated with other service metrics.

Radius histogram:
Requested radii are bucketed by integer truncation into 1 km wide bins
(5.2 and 5.7 both land in bin 5). The histogram spans bin 0 up to the
largest radius seen, or up to a default bound before any query. Radii
above the maximum radius are counted in the last bucket, so the
histogram length stays bounded.
"""

import logging
import threading
from collections import Counter
from typing import Dict, Iterable, List

import numpy as np

from airweather.models import Airport

logger = logging.getLogger(__name__)

DEFAULT_HISTOGRAM_BOUND = 1000

# Half the Earth's circumference in km
DEFAULT_MAX_RADIUS = 20038.0


class QueryTelemetry:
    """
    Thread-safe request frequency counters.

    All counter updates and reads happen under one lock, so concurrent
    queries never lose an increment.
    """

    def __init__(
        self,
        default_histogram_bound: int = DEFAULT_HISTOGRAM_BOUND,
        max_radius: float = DEFAULT_MAX_RADIUS,
    ):
        self.default_histogram_bound = default_histogram_bound
        self.max_radius = max_radius

        self._airport_counts: Counter = Counter()
        self._radius_counts: Counter = Counter()
        self._total = 0
        self._lock = threading.Lock()

    def record_query(self, airport: Airport, radius: float) -> None:
        """Count one query for an airport at a given radius."""
        with self._lock:
            self._airport_counts[airport.iata] += 1
            self._radius_counts[radius] += 1
            self._total += 1

        logger.debug(f'Recorded query for {airport.iata} radius={radius}')

    def airport_frequencies(self, airports: Iterable[Airport]) -> Dict[str, float]:
        """
        Fraction of all recorded queries made for each given airport.

        Airports never queried get 0. With no queries recorded every
        fraction is 0.
        """
        with self._lock:
            counts = dict(self._airport_counts)
            total = self._total

        return {
            airport.iata: (counts.get(airport.iata, 0) / total) if total else 0.0
            for airport in airports
        }

    def radius_histogram(self) -> List[int]:
        """Query counts per 1 km radius bucket, indexed from 0."""
        with self._lock:
            items = list(self._radius_counts.items())

        if not items:
            return [0] * (self.default_histogram_bound + 1)

        radii = np.array([radius for radius, _ in items], dtype=np.float64)
        radii = np.clip(radii, 0, self.max_radius)
        counts = np.array([count for _, count in items], dtype=np.int64)

        buckets = np.trunc(radii).astype(np.int64)
        hist = np.bincount(buckets, weights=counts, minlength=int(buckets.max()) + 1)

        return hist.astype(np.int64).tolist()

    @property
    def stats(self) -> dict:
        """Get telemetry totals."""
        with self._lock:
            return {
                'total_queries': self._total,
                'airports_queried': len(self._airport_counts),
                'distinct_radii': len(self._radius_counts),
            }
