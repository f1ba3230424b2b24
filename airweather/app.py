"""
AirWeather Flask Application.

Main entry point for the web application. Initializes:
- Airport store (seeded with the default airports)
- Query engine and telemetry
- API routes
- Error handlers

Usage:
    python -m airweather.app

Or with gunicorn (single worker, state is process-local):
    gunicorn 'airweather.app:create_app()'
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from airweather.api import collect_bp, query_bp
from airweather.config import config
from airweather.errors import WeatherError
from airweather.query import QueryEngine
from airweather.store import AirportStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.server.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(
    store: Optional[AirportStore] = None,
    engine: Optional[QueryEngine] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        store: Airport store to serve. A new one is created (and seeded
               unless SEED_DEFAULT_AIRPORTS=0) if None.
        engine: Query engine bound to the store. Created if None.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Enable CORS for API endpoints
    CORS(app, resources={r'/query/*': {'origins': '*'}, r'/collect/*': {'origins': '*'}})

    if store is None:
        store = AirportStore(seed_defaults=config.store.seed_default_airports)
        logger.info(f'Airport store initialized with {len(store)} airports')

    if engine is None:
        engine = QueryEngine(store)

    app.config['AIRPORT_STORE'] = store
    app.config['QUERY_ENGINE'] = engine

    # Register API blueprints
    app.register_blueprint(collect_bp)
    app.register_blueprint(query_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok', 'store': store.stats, 'telemetry': engine.telemetry.stats}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(WeatherError)
    def weather_error(e: WeatherError):
        logger.warning(f'{type(e).__name__}: {e.message}')
        return e.to_dict(), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    logger.info(f'Starting AirWeather on http://localhost:{config.server.port}')
    logger.info(f'Collect API: http://localhost:{config.server.port}/collect')
    logger.info(f'Query API: http://localhost:{config.server.port}/query')

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        use_reloader=False,  # Reloader would start a second process with its own store
    )


if __name__ == '__main__':
    run_development_server()
