"""
Listing aggregation: per-city summaries and cross-city comparisons built
from the weekday/weekend listing CSV files.
"""

from citymatch.aggregation.aggregator import (
    aggregate_listings,
    average,
    build_sankey_data,
    room_type_distribution,
)
from citymatch.aggregation.comparison import compare_cities
from citymatch.aggregation.loader import (
    load_and_aggregate,
    load_city_rows,
    read_listing_rows,
)

__all__ = [
    "aggregate_listings",
    "average",
    "build_sankey_data",
    "room_type_distribution",
    "compare_cities",
    "load_and_aggregate",
    "load_city_rows",
    "read_listing_rows",
]
