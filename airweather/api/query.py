"""
Query API endpoints.

Provides endpoints for:
- GET /query/ping - Service health and request frequency statistics
- GET /query/weather/<iata>/<radius> - Atmospheric records near an airport
"""

import logging
import time

from flask import Blueprint, current_app, jsonify

logger = logging.getLogger(__name__)

query_bp = Blueprint('query', __name__, url_prefix='/query')


def _engine():
    return current_app.config['QUERY_ENGINE']


@query_bp.route('/ping', methods=['GET'])
def ping():
    """
    Get service health.

    Returns:
    - datasize: airports with readings from the last freshness window
    - iata_freq: fraction of queries per airport
    - radius_freq: histogram of queried radii in 1 km buckets
    """
    return jsonify(_engine().status_report())


@query_bp.route('/weather/<iata>', defaults={'radius': ''}, methods=['GET'])
@query_bp.route('/weather/<iata>/<radius>', methods=['GET'])
def weather(iata: str, radius: str):
    """
    Get atmospheric records within a radius (km) of an airport.

    A missing or zero radius returns the airport's own record.
    """
    start_time = time.perf_counter()

    records = _engine().find_by_radius(iata, radius)

    query_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f'Weather query {iata}/{radius or 0} took {query_time_ms:.2f}ms')

    return jsonify([record.to_dict() for record in records])
