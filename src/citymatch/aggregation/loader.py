"""
Listing CSV Loader

Reads the per-city ``{city}_weekdays.csv`` / ``{city}_weekends.csv`` files
and feeds them to the aggregator.

Usage:
    from citymatch.aggregation.loader import load_and_aggregate

    record = load_and_aggregate("amsterdam")
    payload = record.to_dict()
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from citymatch.aggregation.aggregator import aggregate_listings
from citymatch.config import DataConfig, get_config
from citymatch.core.catalog import get_city
from citymatch.core.models import AggregateRecord
from citymatch.exceptions import DataNotFoundError, ProcessingError
from citymatch.logging_config import get_logger

logger = get_logger(__name__)

ListingRow = Dict[str, str]


def read_listing_rows(path: Union[str, Path], encoding: Optional[str] = None) -> List[ListingRow]:
    """Read a listing CSV into a list of ``{field: str}`` rows.

    Every value is kept as a string; empty cells stay empty strings so the
    aggregator decides what counts as missing. A leading byte-order mark is
    tolerated.

    Args:
        path: CSV file path.
        encoding: File encoding. Defaults to the configured CSV encoding.

    Returns:
        List of rows, empty when the file is missing or has no content.
    """
    path = Path(path)
    if encoding is None:
        encoding = get_config().data.encoding

    if not path.exists():
        logger.warning("File NOT FOUND: %s", path)
        return []

    try:
        df = pd.read_csv(
            path,
            sep=",",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=encoding,
        )
    except pd.errors.EmptyDataError:
        logger.warning("File is empty: %s", path)
        return []

    # Header cells may carry stray whitespace
    df.columns = [str(col).strip() for col in df.columns]
    rows = df.to_dict(orient="records")
    logger.info("Read %d rows from %s", len(rows), path)
    return rows


def load_city_rows(
    city_id: str,
    data_dir: Optional[str] = None,
) -> Tuple[List[ListingRow], List[ListingRow]]:
    """Load a catalog city's weekday and weekend rows.

    Args:
        city_id: Catalog city id (case-insensitive).
        data_dir: Directory holding the CSV files. Defaults to config.

    Returns:
        Tuple of (weekday_rows, weekend_rows).

    Raises:
        DataNotFoundError: If the city is not in the catalog.
    """
    city = get_city(city_id)
    settings = get_config().data
    if data_dir is not None:
        settings = DataConfig(data_dir=data_dir, encoding=settings.encoding)

    weekday_rows = read_listing_rows(settings.weekday_path(city.id), settings.encoding)
    weekend_rows = read_listing_rows(settings.weekend_path(city.id), settings.encoding)
    return weekday_rows, weekend_rows


def load_and_aggregate(city_id: str, data_dir: Optional[str] = None) -> AggregateRecord:
    """Load a city's listing files and aggregate them.

    Raises:
        DataNotFoundError: If the city is unknown or has no rows.
        ProcessingError: For any other failure while loading or aggregating.
    """
    try:
        weekday_rows, weekend_rows = load_city_rows(city_id, data_dir)
        return aggregate_listings(city_id, weekday_rows, weekend_rows)
    except DataNotFoundError:
        raise
    except Exception as e:
        logger.error("Error processing data for city %s: %s", city_id, e, exc_info=True)
        raise ProcessingError(f"Error processing data: {e}", city_id=city_id) from e
