"""
City Catalog

The fixed set of European cities shared by the aggregation service, the
static statistics table and the map.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple

from citymatch.exceptions import DataNotFoundError


@dataclass(frozen=True)
class City:
    """A catalog city."""

    id: str
    name: str
    country: str
    coordinates: Tuple[float, float]  # (latitude, longitude)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["coordinates"] = list(self.coordinates)
        return data


CITIES: List[City] = [
    City("amsterdam", "Amsterdam", "Netherlands", (52.3702, 4.8952)),
    City("athens", "Athens", "Greece", (37.9838, 23.7275)),
    City("barcelona", "Barcelona", "Spain", (41.3851, 2.1734)),
    City("berlin", "Berlin", "Germany", (52.5200, 13.4050)),
    City("budapest", "Budapest", "Hungary", (47.4979, 19.0402)),
    City("lisbon", "Lisbon", "Portugal", (38.7223, -9.1393)),
    City("london", "London", "United Kingdom", (51.5074, -0.1278)),
    City("paris", "Paris", "France", (48.8566, 2.3522)),
    City("rome", "Rome", "Italy", (41.9028, 12.4964)),
    City("vienna", "Vienna", "Austria", (48.2082, 16.3738)),
]

_CITIES_BY_ID: Dict[str, City] = {city.id: city for city in CITIES}


def get_city(city_id: str) -> City:
    """Look up a catalog city by id (case-insensitive).

    Raises:
        DataNotFoundError: If the id is not in the catalog.
    """
    key = (city_id or "").strip().lower()
    city = _CITIES_BY_ID.get(key)
    if city is None:
        raise DataNotFoundError(f"Unknown city: {city_id}", city_id=city_id)
    return city


def city_ids() -> List[str]:
    """Catalog city ids in catalog order."""
    return [city.id for city in CITIES]
