"""
European City Match

Scores European cities against a visitor's lodging preferences and
summarises per-city Airbnb listing data for the comparison charts.

Main components:
- aggregation: per-city listing aggregation from weekday/weekend CSV files
- matching: weighted city-matching engine over the static city statistics
- api: Flask REST API server
- cli: Command-line interfaces

Usage:
    from citymatch import config
    from citymatch.aggregation import load_and_aggregate
    from citymatch.matching import get_city_match
"""

__version__ = "1.0.0"

from citymatch.config import get_config
from citymatch.logging_config import setup_logging

__all__ = [
    "__version__",
    "get_config",
    "setup_logging",
]
