#!/usr/bin/env python
"""
CLI for ranking cities against a set of preferences.

Usage:
    python -m citymatch.cli.match --price 50 300 --distance 0.2 2 --capacity 2 4 \\
        --cleanliness 9 --satisfaction 90 --importance price=5 cleanliness=3 \\
        distance=4 capacity=2 satisfaction=3
    python -m citymatch.cli.match --weekend --superhost superhost_only ... --json
"""

import argparse
import json
import sys
from typing import Dict, List

from citymatch.core.constants import ALL_LISTINGS, SUPERHOST_ONLY
from citymatch.core.models import PreferenceInput
from citymatch.exceptions import ConfigurationError, ValidationError
from citymatch.logging_config import setup_logging, get_logger
from citymatch.matching.engine import get_city_match
from citymatch.matching.preferences import parse_importance, parse_range


def parse_importance_args(pairs: List[str]) -> Dict[str, int]:
    """Turn ``KEY=VALUE`` arguments into a raw importance mapping."""
    raw = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValidationError(f"Importance must be KEY=VALUE: {pair}", field="importance", value=pair)
        try:
            raw[key.strip()] = int(value)
        except ValueError as e:
            raise ValidationError(f"Importance for {key} must be an integer", field="importance", value=value) from e
    return raw


def main():
    """Main entry point for the matching CLI."""
    parser = argparse.ArgumentParser(
        description="Rank European cities against lodging preferences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m citymatch.cli.match --price 50 300 --distance 0.2 2 --capacity 2 4 \\
        --cleanliness 9 --satisfaction 90 --importance price=5 cleanliness=3
        """,
    )
    parser.add_argument("--weekend", action="store_true", help="Score weekend stays (default: weekdays)")
    parser.add_argument("--price", type=float, nargs=2, required=True, metavar=("LOW", "HIGH"),
                        help="Acceptable nightly price range")
    parser.add_argument("--distance", type=float, nargs=2, required=True, metavar=("LOW", "HIGH"),
                        help="Acceptable distance from the city centre (km)")
    parser.add_argument("--capacity", type=float, nargs=2, required=True, metavar=("LOW", "HIGH"),
                        help="Acceptable person capacity range")
    parser.add_argument("--cleanliness", type=float, required=True, help="Minimum cleanliness rating")
    parser.add_argument("--satisfaction", type=float, required=True, help="Minimum guest satisfaction")
    parser.add_argument("--superhost", choices=[SUPERHOST_ONLY, ALL_LISTINGS], default="",
                        help="Superhost preference")
    parser.add_argument("--importance", nargs="+", required=True, metavar="KEY=VALUE",
                        help="Importance weights (1-5), e.g. price=5 cleanliness=3")
    parser.add_argument("--top", type=int, default=None, help="Number of cities to show (default: 3)")
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
        weights, room_type_weight = parse_importance(parse_importance_args(args.importance))
        preferences = PreferenceInput(
            weekday=not args.weekend,
            price_range=parse_range({"price": args.price}, "price"),
            cleanliness_min=args.cleanliness,
            distance_range=parse_range({"distance": args.distance}, "distance"),
            capacity_range=parse_range({"capacity": args.capacity}, "capacity"),
            satisfaction_min=args.satisfaction,
            superhost_preference=args.superhost,
            importance=weights,
            room_type_importance=room_type_weight,
        )
        matches = get_city_match(preferences, top_n=args.top)
    except (ValidationError, ConfigurationError) as e:
        logger.error("Invalid preferences: %s", e)
        if args.json:
            print(json.dumps({"error": str(e)}))
        else:
            print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps([m.to_dict() for m in matches], indent=2))
    else:
        print("\nTop Cities!")
        for place, match in enumerate(matches, start=1):
            print(f"  {place}. {match.city} with a {match.score}% match")
        print()


if __name__ == "__main__":
    main()
