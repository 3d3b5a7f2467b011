"""
Static City Statistics

Per-city averages of the listing data, split by day type, used by the
matching engine. Values are pre-computed from the full dataset and are not
derived at runtime.
"""

from typing import Dict, Optional

from citymatch.core.constants import DAY_TYPE_WEEKDAYS, DAY_TYPE_WEEKENDS
from citymatch.core.models import CityStats

CityStatTable = Dict[str, Dict[str, CityStats]]

CITY_STAT_TABLE: CityStatTable = {
    DAY_TYPE_WEEKDAYS: {
        "Amsterdam": CityStats(price=545.02, cleanliness=9.46, satisfaction=94.36,
                               distance=1.09, capacity=2.79, superhost_pct=29.28),
        "Athens": CityStats(price=155.87, cleanliness=9.64, satisfaction=95.10,
                            distance=0.48, capacity=3.71, superhost_pct=43.08),
        "Barcelona": CityStats(price=288.39, cleanliness=9.29, satisfaction=90.93,
                               distance=0.43, capacity=2.76, superhost_pct=18.07),
        "Berlin": CityStats(price=240.22, cleanliness=9.48, satisfaction=94.30,
                            distance=0.84, capacity=2.80, superhost_pct=26.64),
        # Satisfaction as published in the source table
        "Budapest": CityStats(price=168.43, cleanliness=9.47, satisfaction=9.47,
                              distance=0.56, capacity=3.58, superhost_pct=36.89),
        "Lisbon": CityStats(price=236.35, cleanliness=9.36, satisfaction=91.05,
                            distance=0.70, capacity=3.37, superhost_pct=21.35),
        "London": CityStats(price=360.23, cleanliness=9.15, satisfaction=90.32,
                            distance=0.99, capacity=2.83, superhost_pct=14.69),
        "Paris": CityStats(price=398.79, cleanliness=9.25, satisfaction=91.85,
                           distance=0.23, capacity=2.95, superhost_pct=13.71),
        "Rome": CityStats(price=201.62, cleanliness=9.52, satisfaction=93.20,
                          distance=0.84, capacity=3.35, superhost_pct=33.64),
        "Vienna": CityStats(price=240.38, cleanliness=9.47, satisfaction=93.80,
                            distance=0.54, capacity=3.33, superhost_pct=27.52),
    },
    DAY_TYPE_WEEKENDS: {
        "Amsterdam": CityStats(price=604.83, cleanliness=9.47, satisfaction=94.69,
                               distance=1.09, capacity=2.77, superhost_pct=27.43),
        "Athens": CityStats(price=147.58, cleanliness=9.63, satisfaction=94.91,
                            distance=0.48, capacity=3.69, superhost_pct=42.63),
        "Barcelona": CityStats(price=300.28, cleanliness=9.30, satisfaction=91.33,
                               distance=0.45, capacity=2.45, superhost_pct=18.23),
        "Berlin": CityStats(price=249.25, cleanliness=9.45, satisfaction=94.35,
                            distance=0.83, capacity=2.75, superhost_pct=24.75),
        "Budapest": CityStats(price=185.12, cleanliness=9.49, satisfaction=94.65,
                              distance=0.53, capacity=3.50, superhost_pct=38.96),
        "Lisbon": CityStats(price=240.04, cleanliness=9.38, satisfaction=91.14,
                            distance=0.72, capacity=3.32, superhost_pct=21.44),
        "London": CityStats(price=364.39, cleanliness=9.19, satisfaction=90.92,
                            distance=1.02, capacity=2.86, superhost_pct=16.64),
        "Paris": CityStats(price=387.03, cleanliness=9.27, satisfaction=92.20,
                           distance=0.23, capacity=2.96, superhost_pct=14.39),
        "Rome": CityStats(price=209.13, cleanliness=9.51, satisfaction=93.05,
                          distance=0.80, capacity=3.36, superhost_pct=31.71),
        "Vienna": CityStats(price=242.74, cleanliness=9.47, satisfaction=93.67,
                            distance=0.52, capacity=3.37, superhost_pct=27.52),
    },
}


def day_type(weekday: bool) -> str:
    """Table key for the weekday flag."""
    return DAY_TYPE_WEEKDAYS if weekday else DAY_TYPE_WEEKENDS


def get_city_stats(weekday: bool, table: Optional[CityStatTable] = None) -> Dict[str, CityStats]:
    """Return the half of the statistics table for the given day type."""
    if table is None:
        table = CITY_STAT_TABLE
    return table[day_type(weekday)]
