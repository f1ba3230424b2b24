"""
Bulk airport loader.

Reads an airports CSV file and registers every airport with a running
AirWeather service through the collect API.

Expected line format (OpenFlights airports.dat, no header):
0: id
1: name
2: city
3: country
4: iata         - 3 letter IATA code (quoted)
5: icao
6: latitude     - degrees
7: longitude    - degrees
8+: altitude, timezone, ...

Usage:
    python -m airweather.ingestion.airport_loader airports.dat
"""

import csv
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests

from airweather.config import config

logger = logging.getLogger(__name__)

IATA_FIELD = 4
LATITUDE_FIELD = 6
LONGITUDE_FIELD = 7

# OpenFlights marks missing values with \N
MISSING_VALUES = {'', '\\N'}


@dataclass
class LoadResult:
    """Outcome counts of a bulk load."""
    loaded: int = 0
    skipped: int = 0
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.loaded + self.skipped + len(self.failed)


def parse_airport_row(row: List[str]) -> Optional[Tuple[str, str, str]]:
    """
    Extract (iata, latitude, longitude) from a CSV row.

    Returns None if the row is too short or has no IATA code.
    Coordinates are passed through as text; the service validates them.
    """
    if len(row) <= LONGITUDE_FIELD:
        return None

    iata = row[IATA_FIELD].replace('"', '').strip()
    if iata in MISSING_VALUES:
        return None

    latitude = row[LATITUDE_FIELD].strip()
    longitude = row[LONGITUDE_FIELD].strip()
    return iata, latitude, longitude


class AirportLoader:
    """
    Client that posts airports to the collect API.

    Handles:
    - CSV parsing of airport database lines
    - One POST /collect/airports/<iata>/<lat>/<lon> per airport
    - Error counting without aborting the whole load
    """

    def __init__(
        self,
        base_url: str = 'http://localhost:9090',
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls) -> 'AirportLoader':
        """Create loader from application configuration."""
        return cls(
            base_url=config.loader.base_url,
            timeout=config.loader.timeout_seconds,
        )

    def add_airport(self, iata: str, latitude: str, longitude: str) -> None:
        """
        Register one airport.

        Raises:
            requests.RequestException on network/API errors
        """
        segments = '/'.join(quote(part, safe='') for part in (iata, latitude, longitude))
        url = f'{self.base_url}/collect/airports/{segments}'
        response = self.session.post(url, timeout=self.timeout)
        response.raise_for_status()

    def upload(self, lines: Iterable[str]) -> LoadResult:
        """
        Register every airport in the given CSV lines.

        Rows without an IATA code are skipped; failed requests are
        logged and collected so one bad row does not stop the load.
        """
        result = LoadResult()

        for row in csv.reader(lines):
            parsed = parse_airport_row(row)
            if parsed is None:
                result.skipped += 1
                continue

            iata, latitude, longitude = parsed
            try:
                self.add_airport(iata, latitude, longitude)
            except requests.exceptions.HTTPError as e:
                logger.warning(f'Airport {iata} rejected: {e.response.status_code}')
                result.failed.append(iata)
                continue
            except requests.exceptions.RequestException as e:
                logger.error(f'Airport {iata} request failed: {e}')
                result.failed.append(iata)
                continue

            result.loaded += 1

        logger.info(
            f'Loaded {result.loaded} airports '
            f'({result.skipped} skipped, {len(result.failed)} failed)'
        )
        return result

    def upload_file(self, path: Path) -> LoadResult:
        """Register every airport in a CSV file."""
        with open(path, 'r', encoding='utf-8', errors='ignore', newline='') as f:
            return self.upload(f)


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point; returns the process exit status."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        logger.error('Usage: python -m airweather.ingestion.airport_loader <airports.csv>')
        return 2

    path = Path(args[0])
    if not path.is_file() or path.stat().st_size == 0:
        logger.error(f'{path} is not a valid input')
        return 1

    loader = AirportLoader.from_config()
    result = loader.upload_file(path)
    return 0 if not result.failed else 1


if __name__ == '__main__':
    sys.exit(main())
