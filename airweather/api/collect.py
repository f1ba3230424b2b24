"""
Collector API endpoints, used by airport weather collection sites.

Provides endpoints for:
- GET /collect/ping - Liveness check
- POST /collect/weather/<iata>/<point_type> - Report a measurement
- GET /collect/airports - List known IATA codes
- GET /collect/airports/<iata> - Get airport details
- POST /collect/airports/<iata>/<lat>/<lon> - Register an airport
- DELETE /collect/airports/<iata> - Remove an airport
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from airweather.errors import InvalidAirport, InvalidMeasurement
from airweather.models import Measurement

logger = logging.getLogger(__name__)

collect_bp = Blueprint('collect', __name__, url_prefix='/collect')


def _store():
    return current_app.config['AIRPORT_STORE']


@collect_bp.route('/ping', methods=['GET'])
def ping():
    """Liveness check for the collection endpoint."""
    return 'ready', 200, {'Content-Type': 'text/plain'}


@collect_bp.route('/weather/<iata>/<point_type>', methods=['POST'])
def update_weather(iata: str, point_type: str):
    """
    Update an airport's reading for one data point type.

    Body: {"mean": float, "first": float, "second": float, "third": float, "count": int}
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        raise InvalidMeasurement('JSON body required')

    measurement = Measurement.from_dict(data)
    _store().apply_measurement(iata, point_type, measurement)

    return jsonify({'success': True})


@collect_bp.route('/airports', methods=['GET'])
def list_airports():
    """Return the IATA codes of all known airports."""
    codes = sorted(airport.iata for airport in _store().list())
    return jsonify(codes)


@collect_bp.route('/airports/<iata>', methods=['GET'])
def get_airport(iata: str):
    """Get location details for a single airport."""
    return jsonify(_store().get(iata).to_dict())


@collect_bp.route('/airports/<iata>/<lat>/<lon>', methods=['POST'])
def add_airport(iata: str, lat: str, lon: str):
    """Register a new airport at the given latitude and longitude in degrees."""
    try:
        latitude = float(lat)
        longitude = float(lon)
    except ValueError:
        raise InvalidAirport(f'Invalid latitude or longitude: {lat}, {lon}') from None

    airport = _store().add(iata, latitude, longitude)
    return jsonify(airport.to_dict())


@collect_bp.route('/airports/<iata>', methods=['DELETE'])
def delete_airport(iata: str):
    """Remove an airport and its atmospheric record."""
    _store().remove(iata)
    return jsonify({'success': True})
