"""
AirWeather Package.

In-memory airport weather service built with Flask and NumPy.

Modules:
    api/         REST endpoints for weather collection and queries
    models/      Airport, Measurement and AtmosphericRecord types
    analytics/   Query frequency telemetry with NumPy histograms
    ingestion/   Bulk airport loader for CSV airport databases
    store.py     Thread-safe registry pairing airports with their records
    query.py     Radius search and health report
    geo.py       Great-circle distance
    errors.py    Exception hierarchy mapped to HTTP responses
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
