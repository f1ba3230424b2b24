"""
Analytics module for AirWeather.

Tracks request frequency per airport and per query radius using
lock-guarded counters, with NumPy histogram aggregation for the health
report.
"""

from airweather.analytics.telemetry import QueryTelemetry, DEFAULT_HISTOGRAM_BOUND, DEFAULT_MAX_RADIUS

__all__ = [
    'QueryTelemetry',
    'DEFAULT_HISTOGRAM_BOUND',
    'DEFAULT_MAX_RADIUS',
]
