"""Tests for the collect and query HTTP endpoints."""

from __future__ import annotations

import json

from airweather.app import create_app
from airweather.store import AirportStore


def post_reading(client, iata: str, point_type: str, **payload):
    return client.post(
        f'/collect/weather/{iata}/{point_type}',
        data=json.dumps(payload),
        content_type='application/json',
    )


class TestCollectEndpoints:
    """Airport registry and measurement collection."""

    def test_ping(self, client) -> None:
        response = client.get('/collect/ping')
        assert response.status_code == 200
        assert response.get_data(as_text=True) == 'ready'

    def test_list_airports(self, client) -> None:
        response = client.get('/collect/airports')
        assert response.status_code == 200
        assert response.get_json() == ['BOS', 'EWR', 'JFK', 'LGA', 'MMU']

    def test_get_airport(self, client) -> None:
        response = client.get('/collect/airports/BOS')
        assert response.status_code == 200
        assert response.get_json() == {
            'iata': 'BOS',
            'latitude': 42.364347,
            'longitude': -71.005181,
        }

    def test_get_unknown_airport(self, client) -> None:
        response = client.get('/collect/airports/XXX')
        assert response.status_code == 404
        assert 'XXX' in response.get_json()['error']

    def test_add_airport(self, client) -> None:
        response = client.post('/collect/airports/SFO/37.618972/-122.374889')
        assert response.status_code == 200

        airport = client.get('/collect/airports/SFO').get_json()
        assert airport == {'iata': 'SFO', 'latitude': 37.618972, 'longitude': -122.374889}
        assert 'SFO' in client.get('/collect/airports').get_json()

    def test_add_duplicate_airport(self, client) -> None:
        response = client.post('/collect/airports/BOS/1.0/1.0')
        assert response.status_code == 409
        assert client.get('/collect/airports/BOS').get_json()['latitude'] == 42.364347

    def test_add_airport_with_bad_coordinates(self, client) -> None:
        assert client.post('/collect/airports/SFO/north/-122.3').status_code == 400
        assert client.post('/collect/airports/SFO/95.0/-122.3').status_code == 400
        assert client.post('/collect/airports/SFOX/37.6/-122.3').status_code == 400
        assert client.get('/collect/airports/SFO').status_code == 404

    def test_delete_airport(self, client) -> None:
        assert client.delete('/collect/airports/EWR').status_code == 200
        assert client.get('/collect/airports/EWR').status_code == 404
        assert client.get('/query/weather/EWR/0').status_code == 404
        assert client.delete('/collect/airports/EWR').status_code == 404

    def test_update_weather(self, client, store: AirportStore) -> None:
        response = post_reading(client, 'BOS', 'wind', mean=12.5, first=10, second=12, third=14, count=20)
        assert response.status_code == 200

        wind = store.get_record('BOS').wind
        assert wind.mean == 12.5
        assert wind.count == 20

    def test_update_weather_unknown_type(self, client) -> None:
        response = post_reading(client, 'BOS', 'visibility', mean=10)
        assert response.status_code == 400

    def test_update_weather_out_of_range(self, client, store: AirportStore) -> None:
        post_reading(client, 'BOS', 'pressure', mean=700)
        response = post_reading(client, 'BOS', 'pressure', mean=649.99)

        assert response.status_code == 400
        assert store.get_record('BOS').pressure.mean == 700

    def test_update_weather_unknown_airport(self, client) -> None:
        assert post_reading(client, 'XXX', 'wind', mean=1).status_code == 404

    def test_update_weather_malformed_body(self, client) -> None:
        response = client.post('/collect/weather/BOS/wind', data='not json')
        assert response.status_code == 400
        response = post_reading(client, 'BOS', 'wind', first=1)
        assert response.status_code == 400


class TestQueryEndpoints:
    """Weather queries and health report."""

    def test_weather_without_radius(self, client) -> None:
        response = client.get('/query/weather/BOS')
        assert response.status_code == 200

        records = response.get_json()
        assert len(records) == 1
        assert records[0]['wind'] is None
        assert records[0]['last_update_time'] == 0.0

    def test_weather_zero_radius(self, client) -> None:
        post_reading(client, 'BOS', 'temperature', mean=21)
        records = client.get('/query/weather/BOS/0').get_json()

        assert len(records) == 1
        assert records[0]['temperature']['mean'] == 21

    def test_weather_radius_excludes_empty_records(self, client) -> None:
        assert client.get('/query/weather/BOS/5').get_json() == []

    def test_weather_radius(self, client) -> None:
        post_reading(client, 'JFK', 'humidity', mean=40)
        post_reading(client, 'LGA', 'humidity', mean=45)
        post_reading(client, 'BOS', 'humidity', mean=50)

        records = client.get('/query/weather/JFK/50').get_json()
        assert [r['humidity']['mean'] for r in records] == [40, 45]

    def test_weather_invalid_radius(self, client) -> None:
        response = client.get('/query/weather/BOS/abc')
        assert response.status_code == 400
        assert 'abc' in response.get_json()['error']

    def test_weather_unknown_airport(self, client) -> None:
        assert client.get('/query/weather/XXX/10').status_code == 404

    def test_ping_empty(self, client) -> None:
        report = client.get('/query/ping').get_json()

        assert report['datasize'] == 0
        assert set(report['iata_freq']) == {'BOS', 'EWR', 'JFK', 'LGA', 'MMU'}
        assert all(v == 0 for v in report['iata_freq'].values())
        assert len(report['radius_freq']) == 1001

    def test_ping_after_activity(self, client) -> None:
        post_reading(client, 'BOS', 'wind', mean=4)
        post_reading(client, 'JFK', 'cloudcover', mean=80)
        client.get('/query/weather/BOS/0')
        client.get('/query/weather/BOS/5.7')
        client.get('/query/weather/JFK/5.2')
        client.get('/query/weather/LGA/20')

        report = client.get('/query/ping').get_json()
        assert report['datasize'] == 2
        assert report['iata_freq']['BOS'] == 0.5
        assert report['iata_freq']['JFK'] == 0.25
        assert report['iata_freq']['EWR'] == 0
        assert len(report['radius_freq']) == 21
        assert report['radius_freq'][5] == 2
        assert report['radius_freq'][0] == 1


class TestApplication:
    """App factory wiring."""

    def test_health(self, client) -> None:
        data = client.get('/health').get_json()
        assert data['status'] == 'ok'
        assert data['store']['airports'] == 5

    def test_unknown_route(self, client) -> None:
        response = client.get('/nowhere')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not found'}

    def test_apps_do_not_share_state(self) -> None:
        first = create_app(store=AirportStore()).test_client()
        second = create_app(store=AirportStore(seed_defaults=True)).test_client()

        first.post('/collect/airports/AAA/1.0/1.0')
        assert first.get('/collect/airports').get_json() == ['AAA']
        assert 'AAA' not in second.get('/collect/airports').get_json()
