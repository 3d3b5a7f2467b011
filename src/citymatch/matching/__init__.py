"""
City matching: weighted scoring of the static city statistics against a
visitor's quiz answers.
"""

from citymatch.matching.engine import (
    get_city_match,
    importance_divisor,
    score_city,
    score_range,
    score_threshold,
)
from citymatch.matching.preferences import parse_importance, parse_preferences

__all__ = [
    "get_city_match",
    "importance_divisor",
    "score_city",
    "score_range",
    "score_threshold",
    "parse_importance",
    "parse_preferences",
]
