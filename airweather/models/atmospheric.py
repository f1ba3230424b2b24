"""
Atmospheric readings - measurement kinds, validation and per-airport state.

Each airport owns exactly one AtmosphericRecord holding up to six
measurement slots. Collectors report a Measurement for one kind at a
time; the reading is validated against the kind's range before it
replaces the slot.

Validation table (inclusive lower bound, exclusive upper bound):

    wind            mean >= 0
    temperature     -50 <= mean < 100    (degrees C)
    humidity        0 <= mean < 100      (%)
    pressure        650 <= mean < 800    (mmHg)
    cloud cover     0 <= mean < 100      (%)
    precipitation   0 <= mean < 100      (cm)
"""

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from airweather.errors import InvalidMeasurement, UnknownDataPointType


class DataPointType(str, Enum):
    """
    The kinds of data point a collector can report.

    Values double as the name of the matching AtmosphericRecord slot.
    """
    WIND = 'wind'
    TEMPERATURE = 'temperature'
    HUMIDITY = 'humidity'
    PRESSURE = 'pressure'
    CLOUDCOVER = 'cloud_cover'
    PRECIPITATION = 'precipitation'

    @classmethod
    def parse(cls, text: str) -> 'DataPointType':
        """Resolve a kind name case-insensitively, e.g. 'cloudcover' or 'CloudCover'."""
        try:
            return cls[text.strip().upper()]
        except (KeyError, AttributeError):
            raise UnknownDataPointType(text) from None


# (lower inclusive, upper exclusive); None means unbounded
VALID_RANGES: Dict[DataPointType, Tuple[float, Optional[float]]] = {
    DataPointType.WIND: (0, None),
    DataPointType.TEMPERATURE: (-50, 100),
    DataPointType.HUMIDITY: (0, 100),
    DataPointType.PRESSURE: (650, 800),
    DataPointType.CLOUDCOVER: (0, 100),
    DataPointType.PRECIPITATION: (0, 100),
}


@dataclass(frozen=True)
class Measurement:
    """
    Statistical summary of one atmospheric quantity at one point in time.

    Only `mean` takes part in validation; the remaining fields are
    stored as reported.
    """
    mean: float
    first: float = 0.0
    second: float = 0.0
    third: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> 'Measurement':
        """
        Build a Measurement from a decoded JSON payload.

        Raises InvalidMeasurement if the payload is not an object, lacks
        a mean, or holds non-numeric values.
        """
        if not isinstance(data, dict):
            raise InvalidMeasurement('Measurement payload must be a JSON object')
        if data.get('mean') is None:
            raise InvalidMeasurement('Measurement payload requires a mean')

        values = {}
        for name in ('mean', 'first', 'second', 'third', 'count'):
            raw = data.get(name)
            if raw is None:
                continue
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise InvalidMeasurement(f'Measurement field {name} must be numeric: {raw!r}')
            values[name] = raw

        if 'count' in values:
            if not float(values['count']).is_integer():
                raise InvalidMeasurement(f'Measurement count must be an integer: {values["count"]!r}')
            values['count'] = int(values['count'])

        return cls(**values)

    def to_dict(self) -> dict:
        return {
            'mean': self.mean,
            'first': self.first,
            'second': self.second,
            'third': self.third,
            'count': self.count,
        }


def validate(kind: DataPointType, measurement: Measurement) -> bool:
    """Check a measurement's mean against the valid range for its kind."""
    lower, upper = VALID_RANGES[kind]
    mean = measurement.mean
    if not mean >= lower:
        return False
    return upper is None or mean < upper


@dataclass(eq=False)
class AtmosphericRecord:
    """
    Sensor snapshot for a single airport.

    Slots are None until first reported. `last_update_time` is the epoch
    time in seconds of the most recent successful update to any slot,
    0 if the record was never updated.
    """
    temperature: Optional[Measurement] = None
    wind: Optional[Measurement] = None
    humidity: Optional[Measurement] = None
    precipitation: Optional[Measurement] = None
    pressure: Optional[Measurement] = None
    cloud_cover: Optional[Measurement] = None
    last_update_time: float = 0.0

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def update(self, kind: DataPointType, measurement: Measurement) -> None:
        """
        Replace one slot and refresh the update time.

        The caller must have validated the measurement for `kind`.
        """
        with self._lock:
            setattr(self, kind.value, measurement)
            self.last_update_time = time.time()

    def get(self, kind: DataPointType) -> Optional[Measurement]:
        return getattr(self, kind.value)

    def has_any_reading(self) -> bool:
        """True if at least one slot has been reported."""
        return any(self.get(kind) is not None for kind in DataPointType)

    def is_fresh(self, now: float, window_seconds: float) -> bool:
        """True if the record has readings updated within the last window."""
        return self.has_any_reading() and now - self.last_update_time < window_seconds

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        result = {}
        with self._lock:
            for kind in DataPointType:
                measurement = self.get(kind)
                result[kind.value] = measurement.to_dict() if measurement is not None else None
            result['last_update_time'] = self.last_update_time
        return result
