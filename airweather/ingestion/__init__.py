"""
Data ingestion module for AirWeather.

Handles bulk registration of airports from CSV airport databases
through the collect API.
"""

from airweather.ingestion.airport_loader import AirportLoader, LoadResult, parse_airport_row

__all__ = ['AirportLoader', 'LoadResult', 'parse_airport_row']
