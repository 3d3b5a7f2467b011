"""
Core modules for European City Match.

Contains the city catalog, static city statistics, data models and shared constants.
"""

from citymatch.core.catalog import CITIES, City, get_city, city_ids
from citymatch.core.city_stats import CITY_STAT_TABLE, get_city_stats
from citymatch.core.models import (
    AggregateRecord,
    CityMatch,
    CityStats,
    Criterion,
    PreferenceInput,
)

__all__ = [
    "CITIES",
    "City",
    "get_city",
    "city_ids",
    "CITY_STAT_TABLE",
    "get_city_stats",
    "AggregateRecord",
    "CityMatch",
    "CityStats",
    "Criterion",
    "PreferenceInput",
]
