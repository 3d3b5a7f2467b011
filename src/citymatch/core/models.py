"""
Data Models for European City Match

Dataclass definitions for city aggregates, city statistics, quiz
preferences and match results. ``to_dict`` methods produce the camelCase
JSON consumed by the front end.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# Aggregation models
@dataclass
class CostAverages:
    """Average nightly price (``realSum``) per row set."""

    combined: Optional[float] = None
    weekday: Optional[float] = None
    weekend: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "avgTotalCityCost": self.combined,
            "avgWeekdayCost": self.weekday,
            "avgWeekendCost": self.weekend,
        }


@dataclass
class CleanlinessAverages:
    """Average cleanliness rating per row set."""

    combined: Optional[float] = None
    weekday: Optional[float] = None
    weekend: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LabelCount:
    """One slice of the room type distribution."""

    label: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SankeyNode:
    """A flow diagram node; the id doubles as the display name."""

    node_id: str

    @property
    def name(self) -> str:
        return self.node_id

    def to_dict(self) -> Dict[str, Any]:
        return {"nodeId": self.node_id, "name": self.name}


@dataclass
class SankeyLink:
    """Co-occurrence count between a room type and a superhost label."""

    source: str
    target: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SankeyData:
    """Room type -> superhost flow table."""

    nodes: List[SankeyNode] = field(default_factory=list)
    links: List[SankeyLink] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


@dataclass
class AggregateRecord:
    """Summary statistics for one city's listings.

    Every average is ``None`` when the field had no numeric values.
    """

    city: str
    weekday_rows: int
    weekend_rows: int
    avg_cost: CostAverages
    avg_cleanliness: CleanlinessAverages
    guest_satisfaction: Optional[float] = None
    person_capacity: Optional[float] = None
    bedroom_capacity: Optional[float] = None
    metro_dist: Optional[float] = None
    city_center_dist: Optional[float] = None
    room_type_distribution: List[LabelCount] = field(default_factory=list)
    sankey_data: SankeyData = field(default_factory=SankeyData)
    processed: bool = True

    @property
    def total_rows(self) -> int:
        return self.weekday_rows + self.weekend_rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by ``/api/airbnb-data``."""
        return {
            "city": self.city,
            "processed": self.processed,
            "weekdayRows": self.weekday_rows,
            "weekendRows": self.weekend_rows,
            "avgCost": self.avg_cost.to_dict(),
            "avgCleanliness": self.avg_cleanliness.to_dict(),
            "guestSatisfaction": self.guest_satisfaction,
            "personCapacity": self.person_capacity,
            "bedroomCapacity": self.bedroom_capacity,
            "metroDist": self.metro_dist,
            "cityCenterDist": self.city_center_dist,
            "roomTypeDistribution": [item.to_dict() for item in self.room_type_distribution],
            "sankeyData": self.sankey_data.to_dict(),
        }


# Matching models
class Criterion(str, Enum):
    """Scored preference criteria. Values are the quiz importance keys."""

    PRICE = "price"
    CLEANLINESS = "cleanliness"
    DISTANCE = "distance"
    SUPERHOST = "superhost"
    CAPACITY = "capacity"
    SATISFACTION = "satisfaction"


@dataclass(frozen=True)
class CityStats:
    """Pre-computed averages for one city and day type."""

    price: float
    cleanliness: float
    satisfaction: float
    distance: float
    capacity: float
    superhost_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PreferenceInput:
    """A visitor's quiz answers.

    Ranges are inclusive ``(low, high)`` pairs. ``importance`` maps each
    criterion to a 1-5 weight; a missing entry counts as unset.
    """

    weekday: bool
    price_range: Tuple[float, float]
    cleanliness_min: float
    distance_range: Tuple[float, float]
    capacity_range: Tuple[float, float]
    satisfaction_min: float
    superhost_preference: str = ""
    importance: Dict[Criterion, int] = field(default_factory=dict)
    room_type_importance: Optional[int] = None  # collected, not scored

    def weight(self, criterion: Criterion) -> int:
        """Importance of a criterion, 0 when unset."""
        return self.importance.get(criterion) or 0


@dataclass
class CityMatch:
    """A ranked city with its normalised percentage score."""

    city: str
    score: int
    raw_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"city": self.city, "score": self.score}
