"""
Flask Application Factory

Creates and configures the Flask application.
"""

from flask import Flask
from flask_cors import CORS

from citymatch.config import get_config
from citymatch.api.routes import register_routes
from citymatch.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def create_app(test_config=None) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional test configuration dict.

    Returns:
        Configured Flask application.
    """
    config = get_config()

    setup_logging()

    app = Flask(__name__)
    app.config["DEBUG"] = config.api.debug
    # Keep the aggregate's field order in responses
    app.json.sort_keys = False

    if test_config:
        app.config.update(test_config)

    # The quiz front end is served from a different origin
    CORS(app)

    register_routes(app)

    logger.info("Flask app created (data dir: %s)", config.data.data_dir)
    return app


def run_server(host: str = None, port: int = None, debug: bool = None):
    """Run the Flask development server.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        debug: Enable debug mode.
    """
    config = get_config()

    host = host or config.api.host
    port = port or config.api.port
    debug = debug if debug is not None else config.api.debug

    app = create_app()

    logger.info("Starting server on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug)
