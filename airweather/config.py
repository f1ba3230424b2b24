"""
Configuration management for AirWeather.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server settings."""
    host: str = os.getenv('HOST', '0.0.0.0')
    port: int = int(os.getenv('PORT', '9090'))
    debug: bool = os.getenv('FLASK_DEBUG', '0') == '1'


@dataclass(frozen=True)
class StoreConfig:
    """Airport store and health report settings."""
    freshness_hours: float = float(os.getenv('FRESHNESS_HOURS', '24'))
    seed_default_airports: bool = os.getenv('SEED_DEFAULT_AIRPORTS', '1') == '1'

    # Largest accepted query radius; half the Earth's circumference
    max_radius_km: float = float(os.getenv('MAX_RADIUS_KM', '20038'))

    # Histogram length used before any radius has been queried
    default_histogram_bound: int = 1000

    @property
    def freshness_seconds(self) -> float:
        return self.freshness_hours * 3600


@dataclass(frozen=True)
class LoaderConfig:
    """Bulk airport loader settings."""
    base_url: str = os.getenv('WEATHER_BASE_URL', 'http://localhost:9090')
    timeout_seconds: int = 10


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    server: ServerConfig
    store: StoreConfig
    loader: LoaderConfig


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        server=ServerConfig(),
        store=StoreConfig(),
        loader=LoaderConfig(),
    )


# Singleton instance
config = load_config()
