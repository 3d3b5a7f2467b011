"""
Listing Value Parsing Utilities

Coerces the raw string fields of listing CSV rows into numbers and
booleans. Bad values never raise: numeric fields that cannot be read are
reported as ``None`` and excluded by callers, and superhost flags that
cannot be read count as ``False``.
"""

import math
import re
from typing import Any, Optional

from citymatch.core.constants import SUPERHOST_TRUE_VALUES
from citymatch.logging_config import get_logger

logger = get_logger(__name__)

# Longest leading decimal literal: sign, digits, fraction, exponent
_LEADING_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


def to_float(value: Any) -> Optional[float]:
    """Coerce a raw field value to a finite float.

    Strings are read like a lenient number parse: surrounding whitespace is
    ignored and the leading numeric part is used, so ``"12.5 km"`` gives
    12.5 while ``"n/a"`` gives None.

    Args:
        value: Raw field value (usually a string from a CSV row).

    Returns:
        The float value, or None for absent, non-numeric, NaN or infinite values.

    Example:
        >>> to_float("185.12")
        185.12
        >>> to_float("")
        None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        number = float(match.group(0))
    else:
        logger.debug("Unsupported numeric value type: %s", type(value).__name__)
        return None

    if not math.isfinite(number):
        return None
    return number


def is_superhost(value: Any) -> bool:
    """Classify a raw ``host_is_superhost`` value.

    Precedence:
    - booleans are used as-is
    - strings are trimmed and lowercased; "true", "t", "yes" and "1" are True
    - numbers are True only when equal to 1
    - anything else (None, lists, dicts, ...) is False

    Example:
        >>> is_superhost(" TRUE ")
        True
        >>> is_superhost("f")
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in SUPERHOST_TRUE_VALUES
    if isinstance(value, (int, float)):
        return value == 1
    return False
