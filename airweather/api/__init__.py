"""
API module for AirWeather.

Provides REST endpoints for:
- Weather collection (airport registry, measurement updates)
- Weather queries and service health
"""

from airweather.api.collect import collect_bp
from airweather.api.query import query_bp

__all__ = ['collect_bp', 'query_bp']
