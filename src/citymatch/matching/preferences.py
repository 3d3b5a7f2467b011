"""
Quiz Preference Parsing

Builds a ``PreferenceInput`` from the quiz's query-string parameters:

    weekday=true
    priceRange=[50,300]
    cleanlinessValue=9
    distanceRange=[0.2,2]
    superhostPreference=superhost_only
    personCapacity=[2,4]
    satisfactionScore=90
    importance={"price":5,"cleanliness":3,"distance":4,"roomType":2,
                "superhost":1,"capacity":2,"satisfaction":3}

Ranges and importance are JSON encoded. Values that are already decoded
(for example from a JSON request body) are accepted as-is.
"""

import json
import math
import numbers
from typing import Any, Dict, Mapping, Optional, Tuple

from citymatch.core.constants import (
    MAX_IMPORTANCE,
    MIN_IMPORTANCE,
    ROOM_TYPE_IMPORTANCE_KEY,
    SUPERHOST_PREFERENCES,
)
from citymatch.core.models import Criterion, PreferenceInput
from citymatch.exceptions import ValidationError


def _decode(params: Mapping[str, Any], name: str) -> Any:
    if name not in params or params[name] is None or params[name] == "":
        raise ValidationError(f"Missing required parameter: {name}", field=name)
    raw = params[name]
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid JSON for {name}: {raw}", field=name, value=raw) from e


def _is_number(value: Any) -> bool:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    return math.isfinite(value)


def parse_range(params: Mapping[str, Any], name: str) -> Tuple[float, float]:
    """Parse a ``[low, high]`` parameter."""
    value = _decode(params, name)
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(_is_number(v) for v in value)
    ):
        raise ValidationError(f"{name} must be a [low, high] pair of numbers", field=name, value=value)

    low, high = float(value[0]), float(value[1])
    if low > high:
        raise ValidationError(f"{name} low bound exceeds high bound", field=name, value=value)
    return low, high


def parse_number(params: Mapping[str, Any], name: str) -> float:
    """Parse a single numeric parameter."""
    value = _decode(params, name)
    if not _is_number(value):
        raise ValidationError(f"{name} must be a number", field=name, value=value)
    return float(value)


def _parse_weight(key: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"Importance for {key} must be an integer", field="importance", value=value)
    if not MIN_IMPORTANCE <= value <= MAX_IMPORTANCE:
        raise ValidationError(
            f"Importance for {key} must be between {MIN_IMPORTANCE} and {MAX_IMPORTANCE}",
            field="importance",
            value=value,
        )
    return value


def parse_importance(raw: Mapping[str, Any]) -> Tuple[Dict[Criterion, int], Optional[int]]:
    """Split raw importance weights into scored criteria and the room type weight.

    Args:
        raw: Mapping of quiz keys to 1-5 weights; None marks a weight as unset.

    Returns:
        Tuple of (criterion weights, room type weight).

    Raises:
        ValidationError: On unknown keys or weights outside 1-5.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("importance must be an object", field="importance", value=raw)

    weights: Dict[Criterion, int] = {}
    room_type_weight = None
    for key, value in raw.items():
        if key == ROOM_TYPE_IMPORTANCE_KEY:
            room_type_weight = _parse_weight(key, value)
            continue
        try:
            criterion = Criterion(key)
        except ValueError as e:
            raise ValidationError(f"Unknown importance key: {key}", field="importance", value=key) from e
        weight = _parse_weight(key, value)
        if weight is not None:
            weights[criterion] = weight
    return weights, room_type_weight


def parse_preferences(params: Mapping[str, Any]) -> PreferenceInput:
    """Build a PreferenceInput from quiz parameters.

    Raises:
        ValidationError: If a parameter is missing or malformed.
    """
    superhost_preference = params.get("superhostPreference") or ""
    if superhost_preference not in SUPERHOST_PREFERENCES:
        raise ValidationError(
            f"Unknown superhost preference: {superhost_preference}",
            field="superhostPreference",
            value=superhost_preference,
        )

    weights, room_type_weight = parse_importance(_decode(params, "importance"))

    weekday = params.get("weekday")
    return PreferenceInput(
        weekday=weekday is True or weekday == "true",
        price_range=parse_range(params, "priceRange"),
        cleanliness_min=parse_number(params, "cleanlinessValue"),
        distance_range=parse_range(params, "distanceRange"),
        capacity_range=parse_range(params, "personCapacity"),
        satisfaction_min=parse_number(params, "satisfactionScore"),
        superhost_preference=superhost_preference,
        importance=weights,
        room_type_importance=room_type_weight,
    )
