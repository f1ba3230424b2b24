"""
In-memory registry of airports and their atmospheric records.

Provides the single source of truth for airport data, enabling:
- O(1) lookups of an airport and its record by IATA code
- Atomic add/remove of the airport-record pair
- Thread-safe validated updates from weather collectors

Each code maps to one entry holding both the Airport and its
AtmosphericRecord, so a code can never resolve to a record that belongs
to another airport or to an airport without a record.

Locking: one store lock guards the mapping and is also held while a
reading is written, so updates are ordered against removal. Each record
has its own lock keeping its slots and timestamp consistent for readers
that serialize it. Expected registries hold tens to hundreds of
airports, so a single coarse lock is sufficient.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from airweather.errors import DuplicateAirport, InvalidMeasurement, UnknownAirport
from airweather.models import Airport, AtmosphericRecord, DataPointType, Measurement, validate

logger = logging.getLogger(__name__)


# Seed airports registered at startup (IATA, latitude, longitude)
DEFAULT_AIRPORTS: List[Tuple[str, float, float]] = [
    ('BOS', 42.364347, -71.005181),
    ('EWR', 40.6925, -74.168667),
    ('JFK', 40.639751, -73.778925),
    ('LGA', 40.777245, -73.872608),
    ('MMU', 40.79935, -74.4148747),
]


@dataclass(frozen=True)
class StoreEntry:
    """An airport paired with its atmospheric record."""
    airport: Airport
    record: AtmosphericRecord


class AirportStore:
    """
    Thread-safe registry of airports keyed by IATA code.

    Iteration order of snapshots is registration order.
    """

    def __init__(self, seed_defaults: bool = False):
        self._entries: Dict[str, StoreEntry] = {}
        self._lock = threading.RLock()

        if seed_defaults:
            self.seed_defaults()

    def seed_defaults(self) -> None:
        """Register the default airports that are not already known."""
        for iata, latitude, longitude in DEFAULT_AIRPORTS:
            if iata not in self:
                self.add(iata, latitude, longitude)

    def add(self, iata: str, latitude: float, longitude: float) -> Airport:
        """
        Register a new airport with an empty atmospheric record.

        Raises DuplicateAirport if the code is already registered and
        InvalidAirport if the code or coordinates are malformed.
        """
        airport = Airport(iata, latitude, longitude)
        entry = StoreEntry(airport=airport, record=AtmosphericRecord())

        with self._lock:
            if iata in self._entries:
                raise DuplicateAirport(iata)
            self._entries[iata] = entry

        logger.info(f'Added airport {iata} at ({latitude:.4f}, {longitude:.4f})')
        return airport

    def remove(self, iata: str) -> None:
        """Remove an airport together with its record."""
        with self._lock:
            if self._entries.pop(iata, None) is None:
                raise UnknownAirport(iata)

        logger.info(f'Removed airport {iata}')

    def get(self, iata: str) -> Airport:
        """Get airport by IATA code, raising UnknownAirport if absent."""
        return self._entry(iata).airport

    def get_record(self, iata: str) -> AtmosphericRecord:
        """Get the atmospheric record for an airport."""
        return self._entry(iata).record

    def list(self) -> Set[Airport]:
        """Snapshot of all registered airports."""
        with self._lock:
            return {entry.airport for entry in self._entries.values()}

    def entries(self) -> List[StoreEntry]:
        """Snapshot of (airport, record) pairs in registration order."""
        with self._lock:
            return list(self._entries.values())

    def apply_measurement(self, iata: str, point_type: str, measurement: Measurement) -> None:
        """
        Validate a collector reading and store it on the airport's record.

        Raises UnknownAirport, UnknownDataPointType or InvalidMeasurement;
        on any failure the record is left untouched.
        """
        kind = DataPointType.parse(point_type)
        if not validate(kind, measurement):
            logger.warning(f'Rejected {kind.name} reading for {iata}: mean={measurement.mean}')
            raise InvalidMeasurement(f'{kind.name} mean out of range: {measurement.mean}')

        # Holding the store lock orders the update against remove()
        with self._lock:
            entry = self._entry(iata)
            entry.record.update(kind, measurement)

        logger.debug(f'Updated {kind.name} for {iata}: mean={measurement.mean}')

    def _entry(self, iata: str) -> StoreEntry:
        with self._lock:
            entry = self._entries.get(iata)
        if entry is None:
            raise UnknownAirport(iata)
        assert entry.airport.iata == iata, f'registry key {iata} holds {entry.airport.iata}'
        return entry

    def __contains__(self, iata: str) -> bool:
        with self._lock:
            return iata in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> dict:
        """Get registry statistics."""
        entries = self.entries()
        return {
            'airports': len(entries),
            'with_readings': sum(1 for e in entries if e.record.has_any_reading()),
        }
