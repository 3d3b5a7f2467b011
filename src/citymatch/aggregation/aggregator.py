"""
Listing Aggregation

Turns a city's weekday and weekend listing rows into an ``AggregateRecord``:
averaged metrics, the room type distribution and the room type -> superhost
flow table. Pure computation over rows that are already parsed; reading the
CSV files is handled by ``citymatch.aggregation.loader``.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from citymatch.aggregation.counter import OrderedCounter
from citymatch.core.constants import (
    FIELD_BEDROOMS,
    FIELD_CAPACITY,
    FIELD_CENTER_DIST,
    FIELD_CLEANLINESS,
    FIELD_METRO_DIST,
    FIELD_PRICE,
    FIELD_ROOM_TYPE,
    FIELD_SATISFACTION,
    FIELD_SUPERHOST,
    NOT_SUPERHOST_LABEL,
    SUPERHOST_LABEL,
    SUPERHOST_SINKS,
)
from citymatch.core.models import (
    AggregateRecord,
    CleanlinessAverages,
    CostAverages,
    LabelCount,
    SankeyData,
    SankeyLink,
    SankeyNode,
)
from citymatch.exceptions import DataNotFoundError
from citymatch.logging_config import get_logger
from citymatch.utils.value_parser import is_superhost, to_float

logger = get_logger(__name__)

Row = Mapping[str, Any]

LINK_SEPARATOR = "->"


def numeric_values(rows: Iterable[Row], key: str) -> List[float]:
    """Numeric values of a field, skipping rows where it is absent or unreadable."""
    values = []
    for row in rows:
        value = to_float(row.get(key))
        if value is not None:
            values.append(value)
    return values


def average(rows: Iterable[Row], key: str) -> Optional[float]:
    """Mean of a numeric field over rows.

    Returns:
        The mean, or None when no row holds a numeric value. None is distinct
        from a genuine average of zero.
    """
    values = numeric_values(rows, key)
    if not values:
        return None
    return sum(values) / len(values)


def room_type_of(row: Row) -> Optional[str]:
    """Verbatim room type of a row, None when empty or absent."""
    room_type = row.get(FIELD_ROOM_TYPE)
    if not isinstance(room_type, str) or not room_type:
        return None
    return room_type


def superhost_label(row: Row) -> str:
    return SUPERHOST_LABEL if is_superhost(row.get(FIELD_SUPERHOST)) else NOT_SUPERHOST_LABEL


def room_type_distribution(rows: Iterable[Row]) -> List[LabelCount]:
    """Count rows per room type, in first-seen order.

    Rows without a room type are left out entirely.
    """
    counter: OrderedCounter[str] = OrderedCounter()
    for row in rows:
        room_type = room_type_of(row)
        if room_type is not None:
            counter.add(room_type)
    return [LabelCount(label=label, value=count) for label, count in counter.items()]


def build_sankey_data(rows: Iterable[Row]) -> SankeyData:
    """Build the room type -> superhost flow table.

    Source nodes are the distinct room types in first-seen order, followed by
    the two fixed superhost sinks. There is one link per observed
    (room type, superhost label) pair, weighted by its row count.
    """
    flows: OrderedCounter[Tuple[str, str]] = OrderedCounter()
    sources: OrderedCounter[str] = OrderedCounter()

    for row in rows:
        room_type = room_type_of(row)
        if room_type is None:
            continue
        sources.add(room_type)
        flows.add((room_type, superhost_label(row)))

    nodes = [SankeyNode(node_id=name) for name in list(sources) + SUPERHOST_SINKS]
    links = [
        SankeyLink(source=source, target=target, value=count)
        for (source, target), count in flows.items()
    ]
    return SankeyData(nodes=nodes, links=links)


def flow_key(link: SankeyLink) -> str:
    """Display key of a link, e.g. ``"Private room->Superhost"``."""
    return f"{link.source}{LINK_SEPARATOR}{link.target}"


def aggregate_listings(
    city: str,
    weekday_rows: Sequence[Row],
    weekend_rows: Sequence[Row],
) -> AggregateRecord:
    """Aggregate one city's weekday and weekend listings.

    Args:
        city: City identifier echoed in the record.
        weekday_rows: Parsed weekday rows (may be empty).
        weekend_rows: Parsed weekend rows (may be empty).

    Returns:
        The city's AggregateRecord.

    Raises:
        DataNotFoundError: If both row sets are empty.
    """
    weekday_rows = list(weekday_rows or [])
    weekend_rows = list(weekend_rows or [])

    if not weekday_rows and not weekend_rows:
        logger.warning("No listing rows for city: %s", city)
        raise DataNotFoundError(
            f"No data files found or files are empty for city: {city}",
            city_id=city,
        )

    combined = weekday_rows + weekend_rows

    record = AggregateRecord(
        city=city,
        weekday_rows=len(weekday_rows),
        weekend_rows=len(weekend_rows),
        avg_cost=CostAverages(
            combined=average(combined, FIELD_PRICE),
            weekday=average(weekday_rows, FIELD_PRICE),
            weekend=average(weekend_rows, FIELD_PRICE),
        ),
        avg_cleanliness=CleanlinessAverages(
            combined=average(combined, FIELD_CLEANLINESS),
            weekday=average(weekday_rows, FIELD_CLEANLINESS),
            weekend=average(weekend_rows, FIELD_CLEANLINESS),
        ),
        guest_satisfaction=average(combined, FIELD_SATISFACTION),
        person_capacity=average(combined, FIELD_CAPACITY),
        bedroom_capacity=average(combined, FIELD_BEDROOMS),
        metro_dist=average(combined, FIELD_METRO_DIST),
        city_center_dist=average(combined, FIELD_CENTER_DIST),
        room_type_distribution=room_type_distribution(combined),
        sankey_data=build_sankey_data(combined),
    )

    logger.info(
        "Aggregated %s: %d weekday rows, %d weekend rows",
        city, record.weekday_rows, record.weekend_rows,
    )
    return record
