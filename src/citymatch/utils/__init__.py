"""
Utility modules for European City Match.

Provides the value coercion shared by the aggregation code.
"""

from citymatch.utils.value_parser import is_superhost, to_float

__all__ = [
    "is_superhost",
    "to_float",
]
