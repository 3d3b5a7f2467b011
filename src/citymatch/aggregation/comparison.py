"""
Cross-City Comparison

Per-city summary figures for the comparison charts (median price, average
cleanliness and satisfaction, superhost share, median distances) plus the
person capacity histogram pooled over every city.
"""

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from citymatch.aggregation.aggregator import numeric_values
from citymatch.aggregation.loader import load_city_rows
from citymatch.core.catalog import CITIES
from citymatch.core.constants import (
    CAPACITY_BINS,
    FIELD_CAPACITY,
    FIELD_CENTER_DIST,
    FIELD_CLEANLINESS,
    FIELD_METRO_DIST,
    FIELD_PRICE,
    FIELD_SATISFACTION,
    FIELD_SUPERHOST,
)
from citymatch.logging_config import get_logger
from citymatch.utils.value_parser import is_superhost

logger = get_logger(__name__)


def _median(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return float(pd.Series(values, dtype=float).median())


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return float(pd.Series(values, dtype=float).mean())


def superhost_percent(rows: List[Dict[str, Any]]) -> Optional[float]:
    """Share of rows hosted by a superhost, as a percentage."""
    if not rows:
        return None
    superhosts = sum(1 for row in rows if is_superhost(row.get(FIELD_SUPERHOST)))
    return superhosts / len(rows) * 100


def capacity_histogram(capacities: List[float]) -> List[Dict[str, Any]]:
    """Bin positive person capacities into 1..5 and 6+.

    Args:
        capacities: Capacity values; non-positive values are ignored.

    Returns:
        One ``{bin, count, percentage}`` entry per bin, in bin order.
    """
    values = np.asarray([c for c in capacities if c > 0], dtype=float)
    total = len(values)

    histogram = []
    for label, (low, high) in CAPACITY_BINS.items():
        count = int(((values >= low) & (values <= high)).sum()) if total else 0
        histogram.append({
            "bin": label,
            "count": count,
            "percentage": count / total * 100 if total else 0.0,
        })
    return histogram


def summarize_city(name: str, rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Comparison figures for one city's combined rows."""
    capacities = [c for c in numeric_values(rows, FIELD_CAPACITY) if c > 0]
    return {
        "city": name,
        "listings": len(rows),
        "medianPrice": _median(numeric_values(rows, FIELD_PRICE)),
        "avgCleanliness": _mean(numeric_values(rows, FIELD_CLEANLINESS)),
        "avgSatisfaction": _mean(numeric_values(rows, FIELD_SATISFACTION)),
        "superhostPercent": superhost_percent(rows),
        "medianMetroDist": _median(numeric_values(rows, FIELD_METRO_DIST)),
        "medianCenterDist": _median(numeric_values(rows, FIELD_CENTER_DIST)),
        "avgCapacity": _mean(capacities),
    }


def cleanliness_pass_percentage(
    cities: List[Dict[str, Any]],
    min_cleanliness: float,
) -> int:
    """Rounded share of cities whose average cleanliness meets the minimum."""
    rated = [c for c in cities if c["avgCleanliness"] is not None]
    if not rated:
        return 0
    passing = sum(1 for c in rated if c["avgCleanliness"] >= min_cleanliness)
    return int(passing / len(rated) * 100 + 0.5)


def compare_cities(
    min_cleanliness: Optional[float] = None,
    data_dir: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the cross-city comparison payload.

    Cities without any listing rows are skipped.

    Args:
        min_cleanliness: Optional minimum for the cleanliness pass percentage.
        data_dir: Directory holding the CSV files. Defaults to config.

    Returns:
        Dictionary with ``cities``, ``capacityHistogram``,
        ``overallSuperhostPercent``, ``grandAverageCleanliness`` and, when a
        minimum is given, ``cleanlinessPassPercentage``.
    """
    cities = []
    all_rows: List[Dict[str, Any]] = []

    for city in CITIES:
        weekday_rows, weekend_rows = load_city_rows(city.id, data_dir)
        rows = weekday_rows + weekend_rows
        if not rows:
            logger.warning("Skipping %s: no listing rows", city.name)
            continue
        cities.append(summarize_city(city.name, rows))
        all_rows.extend(rows)

    result = {
        "cities": cities,
        "capacityHistogram": capacity_histogram(numeric_values(all_rows, FIELD_CAPACITY)),
        "overallSuperhostPercent": superhost_percent(all_rows),
        "grandAverageCleanliness": _mean(numeric_values(all_rows, FIELD_CLEANLINESS)),
    }
    if min_cleanliness is not None:
        result["cleanlinessPassPercentage"] = cleanliness_pass_percentage(cities, min_cleanliness)

    logger.info("Compared %d cities (%d listings)", len(cities), len(all_rows))
    return result
