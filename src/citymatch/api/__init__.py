"""
Flask REST API for the city match service.

Provides endpoints for:
- City catalog and health checks
- Per-city listing aggregates and cross-city comparisons
- City matching against quiz answers
"""

from citymatch.api.server import create_app, run_server
from citymatch.api.routes import register_routes

__all__ = [
    "create_app",
    "run_server",
    "register_routes",
]
