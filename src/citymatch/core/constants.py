"""
Shared Constants for European City Match

Contains the CSV field names, flow-diagram labels and scoring bounds used
across the application.
"""

from typing import Dict, List, Tuple

# Listing CSV field names
FIELD_PRICE: str = "realSum"
FIELD_CLEANLINESS: str = "cleanliness_rating"
FIELD_SATISFACTION: str = "guest_satisfaction_overall"
FIELD_CAPACITY: str = "person_capacity"
FIELD_BEDROOMS: str = "bedrooms"
FIELD_METRO_DIST: str = "metro_dist"
FIELD_CENTER_DIST: str = "dist"
FIELD_ROOM_TYPE: str = "room_type"
FIELD_SUPERHOST: str = "host_is_superhost"

# Day types, as used in file names and the city statistics table
DAY_TYPE_WEEKDAYS: str = "weekdays"
DAY_TYPE_WEEKENDS: str = "weekends"

# Sink nodes of the room type -> superhost flow diagram
SUPERHOST_LABEL: str = "Superhost"
NOT_SUPERHOST_LABEL: str = "Not Superhost"
SUPERHOST_SINKS: List[str] = [SUPERHOST_LABEL, NOT_SUPERHOST_LABEL]

# Raw superhost strings counted as true (compared lowercased, trimmed)
SUPERHOST_TRUE_VALUES = frozenset({"true", "t", "yes", "1"})

# Superhost preference values collected by the quiz
SUPERHOST_ONLY: str = "superhost_only"
ALL_LISTINGS: str = "all_listings"
SUPERHOST_PREFERENCES = frozenset({SUPERHOST_ONLY, ALL_LISTINGS, ""})

# Dataset-wide extremes anchoring the range falloff: (global_min, global_max)
PRICE_BOUNDS: Tuple[float, float] = (34.78, 18545.45)
DISTANCE_BOUNDS: Tuple[float, float] = (0.02, 25.28)
CAPACITY_BOUNDS: Tuple[float, float] = (2.0, 6.0)

# Importance weights accepted from the quiz
MIN_IMPORTANCE: int = 1
MAX_IMPORTANCE: int = 5
ROOM_TYPE_IMPORTANCE_KEY: str = "roomType"

# Person capacity histogram bins: label -> (min, max) inclusive
CAPACITY_BINS: Dict[str, Tuple[float, float]] = {
    "1": (1, 1),
    "2": (2, 2),
    "3": (3, 3),
    "4": (4, 4),
    "5": (5, 5),
    "6+": (6, float("inf")),
}
