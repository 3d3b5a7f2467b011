"""
City Matching Engine

Scores every city of the static statistics table against a visitor's quiz
answers and returns the best matches with percentage scores.

Scoring, per criterion, with ``w`` the criterion's importance:

- threshold criteria (cleanliness, satisfaction): ``w`` when the city meets
  the minimum, otherwise ``city / minimum * w``
- range criteria (price, distance, capacity): ``w`` inside the inclusive
  range, otherwise a linear falloff towards the dataset-wide extreme on
  that side
- superhost: ``superhost_pct * w``, only for the "superhost_only" preference

The percentage is the raw score over the sum of the importances in play,
truncated to an integer.
"""

from typing import Dict, List, Optional, Tuple

from citymatch.config import get_config
from citymatch.core.city_stats import CityStatTable, get_city_stats
from citymatch.core.constants import (
    CAPACITY_BOUNDS,
    DISTANCE_BOUNDS,
    PRICE_BOUNDS,
    SUPERHOST_ONLY,
)
from citymatch.core.models import CityMatch, CityStats, Criterion, PreferenceInput
from citymatch.exceptions import ConfigurationError
from citymatch.logging_config import get_logger

logger = get_logger(__name__)

Range = Tuple[float, float]

# Dataset-wide extremes per range criterion
RANGE_BOUNDS: Dict[Criterion, Range] = {
    Criterion.PRICE: PRICE_BOUNDS,
    Criterion.DISTANCE: DISTANCE_BOUNDS,
    Criterion.CAPACITY: CAPACITY_BOUNDS,
}


def in_range(value: float, value_range: Range) -> bool:
    low, high = value_range
    return low <= value <= high


def score_threshold(value: float, minimum: float, weight: float) -> float:
    """Score a criterion with a minimum acceptable value.

    Full weight at or above the minimum, linear partial credit below it.
    """
    if value >= minimum:
        return weight
    if minimum == 0:
        return 0.0
    return (value / minimum) * weight


def score_range(value: float, value_range: Range, weight: float, bounds: Range) -> float:
    """Score a criterion with an acceptable inclusive range.

    Args:
        value: The city's value.
        value_range: The visitor's (low, high) range.
        weight: Importance of the criterion.
        bounds: Dataset-wide (lowest, highest) values of the criterion.

    Returns:
        Full weight inside the range. Below it, credit falls linearly from
        ``weight`` at ``low`` to 0 at ``lowest``; above it, from ``weight`` at
        ``high`` to 0 at ``highest``. A falloff with no width scores 0.
    """
    if in_range(value, value_range):
        return weight

    low, high = value_range
    lowest, highest = bounds
    if value < low:
        span = low - lowest
        if span == 0:
            return 0.0
        return ((value - lowest) / span) * weight

    span = highest - high
    if span == 0:
        return 0.0
    return ((highest - value) / span) * weight


def score_superhost(stats: CityStats, preference: str, weight: float) -> float:
    """Superhost credit; nothing unless the visitor wants superhosts only."""
    if preference != SUPERHOST_ONLY:
        return 0.0
    return stats.superhost_pct * weight


def importance_divisor(preferences: PreferenceInput) -> int:
    """Sum of the importance weights in play.

    The superhost weight only counts for the "superhost_only" preference.
    The room type weight is never scored and never counts.
    """
    total = 0
    for criterion in Criterion:
        if criterion is Criterion.SUPERHOST and preferences.superhost_preference != SUPERHOST_ONLY:
            continue
        total += preferences.weight(criterion)
    return total


def score_city(stats: CityStats, preferences: PreferenceInput) -> float:
    """Raw weighted score of one city."""
    weight = preferences.weight

    score = 0.0
    score += score_range(stats.price, preferences.price_range,
                         weight(Criterion.PRICE), RANGE_BOUNDS[Criterion.PRICE])
    score += score_threshold(stats.cleanliness, preferences.cleanliness_min,
                             weight(Criterion.CLEANLINESS))
    score += score_range(stats.distance, preferences.distance_range,
                         weight(Criterion.DISTANCE), RANGE_BOUNDS[Criterion.DISTANCE])
    score += score_superhost(stats, preferences.superhost_preference,
                             weight(Criterion.SUPERHOST))
    score += score_range(stats.capacity, preferences.capacity_range,
                         weight(Criterion.CAPACITY), RANGE_BOUNDS[Criterion.CAPACITY])
    score += score_threshold(stats.satisfaction, preferences.satisfaction_min,
                             weight(Criterion.SATISFACTION))
    return score


def get_city_match(
    preferences: PreferenceInput,
    table: Optional[CityStatTable] = None,
    top_n: Optional[int] = None,
) -> List[CityMatch]:
    """Rank cities by fit to the visitor's preferences.

    Cities are ordered by raw score, highest first; equal scores keep the
    order of the statistics table.

    Args:
        preferences: The visitor's quiz answers.
        table: City statistics table. Defaults to the bundled table.
        top_n: Number of cities to return. Defaults to config (3).

    Returns:
        The best ``top_n`` cities with integer percentage scores.

    Raises:
        ConfigurationError: If no importance weight is in play.
    """
    if top_n is None:
        top_n = get_config().match.top_n

    divisor = importance_divisor(preferences)
    if divisor == 0:
        raise ConfigurationError(
            "At least one importance weight must be set before scoring cities"
        )

    cities = get_city_stats(preferences.weekday, table)
    scored = [(name, score_city(stats, preferences)) for name, stats in cities.items()]
    for name, raw in scored:
        logger.debug("City %s raw score %.4f", name, raw)

    ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:top_n]
    return [
        CityMatch(city=name, score=int(raw / divisor * 100), raw_score=raw)
        for name, raw in ranked
    ]
