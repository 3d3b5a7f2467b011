#!/usr/bin/env python
"""
CLI for aggregating a city's listing files.

Usage:
    python -m citymatch.cli.aggregate amsterdam
    python -m citymatch.cli.aggregate rome --data-dir ./data --json
"""

import argparse
import json
import sys
from typing import Optional

from citymatch.aggregation.aggregator import flow_key
from citymatch.aggregation.loader import load_and_aggregate
from citymatch.core.catalog import city_ids
from citymatch.core.models import AggregateRecord
from citymatch.exceptions import DataNotFoundError
from citymatch.logging_config import setup_logging, get_logger


def _fmt(value: Optional[float], prefix: str = "") -> str:
    return "-" if value is None else f"{prefix}{value:,.2f}"


def print_record(record: AggregateRecord) -> None:
    print("\n" + "=" * 50)
    print(f"Listing Summary: {record.city}")
    print("=" * 50)
    print(f"\nRows: {record.weekday_rows} weekday, {record.weekend_rows} weekend")
    print("\nAverages:")
    print(f"  Price (all):      {_fmt(record.avg_cost.combined, '€')}")
    print(f"  Price (weekday):  {_fmt(record.avg_cost.weekday, '€')}")
    print(f"  Price (weekend):  {_fmt(record.avg_cost.weekend, '€')}")
    print(f"  Cleanliness:      {_fmt(record.avg_cleanliness.combined)}")
    print(f"  Satisfaction:     {_fmt(record.guest_satisfaction)}")
    print(f"  Person capacity:  {_fmt(record.person_capacity)}")
    print(f"  Bedrooms:         {_fmt(record.bedroom_capacity)}")
    print(f"  Metro distance:   {_fmt(record.metro_dist)} km")
    print(f"  Centre distance:  {_fmt(record.city_center_dist)} km")
    print("\nRoom types:")
    for item in record.room_type_distribution:
        print(f"  {item.label}: {item.value}")
    print("\nHost flows:")
    for link in record.sankey_data.links:
        print(f"  {flow_key(link)}: {link.value}")
    print()


def main():
    """Main entry point for the aggregation CLI."""
    parser = argparse.ArgumentParser(
        description="Summarise a city's weekday/weekend listing files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m citymatch.cli.aggregate amsterdam
    python -m citymatch.cli.aggregate rome --data-dir ./data --json
        """,
    )
    parser.add_argument("city", choices=city_ids(), help="City id")
    parser.add_argument("--data-dir", type=str, default=None,
                        help="Directory holding the CSV files (default: from config)")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set log level (default: WARNING)",
    )

    args = parser.parse_args()

    setup_logging(level=args.log_level)
    logger = get_logger(__name__)

    try:
        record = load_and_aggregate(args.city, data_dir=args.data_dir)
    except DataNotFoundError as e:
        logger.error("%s", e)
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error("Aggregation failed: %s", e, exc_info=True)
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
    else:
        print_record(record)


if __name__ == "__main__":
    main()
