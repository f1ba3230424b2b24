"""Shared test fixtures: stores, query engine and Flask test client."""

from __future__ import annotations

import pytest

from airweather.analytics import QueryTelemetry
from airweather.app import create_app
from airweather.query import QueryEngine
from airweather.store import AirportStore


@pytest.fixture
def store() -> AirportStore:
    """Store seeded with the five default airports."""
    return AirportStore(seed_defaults=True)


@pytest.fixture
def empty_store() -> AirportStore:
    return AirportStore()


@pytest.fixture
def telemetry() -> QueryTelemetry:
    return QueryTelemetry()


@pytest.fixture
def engine(store, telemetry) -> QueryEngine:
    return QueryEngine(store, telemetry, freshness_seconds=24 * 3600)


@pytest.fixture
def app(store, engine):
    app = create_app(store=store, engine=engine)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
