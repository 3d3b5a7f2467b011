"""
API Routes for European City Match

Provides REST API endpoints for:
- Health checks and the city catalog
- Per-city listing aggregates
- Static city statistics and city matching
- Cross-city comparisons
"""

from pathlib import Path

from flask import Blueprint, jsonify, request

from citymatch.aggregation.comparison import compare_cities
from citymatch.aggregation.loader import load_and_aggregate
from citymatch.config import get_config
from citymatch.core.catalog import CITIES
from citymatch.core.city_stats import day_type, get_city_stats
from citymatch.exceptions import (
    ConfigurationError,
    DataNotFoundError,
    ProcessingError,
    ValidationError,
)
from citymatch.logging_config import get_logger
from citymatch.matching.engine import get_city_match
from citymatch.matching.preferences import parse_preferences

logger = get_logger(__name__)

# Create blueprint
api = Blueprint("api", __name__, url_prefix="/api")


def _error(message: str, status: int, error: str = None):
    body = {"status": "error", "message": message}
    if error is not None:
        body["error"] = error
    return jsonify(body), status


# Health & Catalog Endpoints
@api.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint."""
    data_dir = get_config().data.data_dir
    return jsonify({
        "status": "healthy",
        "data_dir": data_dir,
        "data_dir_exists": Path(data_dir).is_dir(),
    })


@api.route("/cities", methods=["GET"])
def list_cities():
    """Get the city catalog."""
    return jsonify({
        "status": "success",
        "count": len(CITIES),
        "cities": [city.to_dict() for city in CITIES],
    })


# Aggregation Endpoints
@api.route("/airbnb-data/<city_id>", methods=["GET"])
def get_city_aggregate(city_id: str):
    """Get the aggregated listing statistics for one city."""
    try:
        record = load_and_aggregate(city_id)
    except DataNotFoundError as e:
        logger.warning("No data for city %s: %s", city_id, e)
        return _error(e.message, 404)
    except ProcessingError as e:
        return _error("Error processing data", 500, error=e.message)

    logger.info("Successfully processed data for %s", city_id)
    return jsonify(record.to_dict())


@api.route("/compare", methods=["GET"])
def get_comparison():
    """Get cross-city comparison statistics."""
    try:
        min_cleanliness = request.args.get("minCleanliness", None, type=float)
        return jsonify({
            "status": "success",
            "comparison": compare_cities(min_cleanliness=min_cleanliness),
        })
    except Exception as e:
        logger.error("Error building comparison: %s", e, exc_info=True)
        return _error("Error processing data", 500, error=str(e))


# Matching Endpoints
@api.route("/city-stats", methods=["GET"])
def get_static_city_stats():
    """Get the static city statistics for a day type."""
    weekday = request.args.get("weekday", "true").lower() == "true"
    stats = get_city_stats(weekday)
    return jsonify({
        "status": "success",
        "day_type": day_type(weekday),
        "cities": {name: city.to_dict() for name, city in stats.items()},
    })


@api.route("/match", methods=["GET"])
def match_cities():
    """Rank cities against the quiz answers in the query string."""
    try:
        preferences = parse_preferences(request.args)
        matches = get_city_match(preferences)
    except (ValidationError, ConfigurationError) as e:
        return _error(e.message, 400)
    except Exception as e:
        logger.error("Matching error: %s", e, exc_info=True)
        return _error("Error matching cities", 500, error=str(e))

    return jsonify({
        "status": "success",
        "matches": [match.to_dict() for match in matches],
    })


def register_routes(app):
    """Register API routes with Flask app."""
    app.register_blueprint(api)
    logger.info("API routes registered")
