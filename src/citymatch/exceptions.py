"""
Custom Exceptions for European City Match

Provides a hierarchy of exceptions for standardized error handling across all modules.

Exception Hierarchy:
    CityMatchError (base)
    ├── ConfigurationError
    ├── DataNotFoundError
    ├── ProcessingError
    └── ValidationError
"""


class CityMatchError(Exception):
    """Base exception for all City Match errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(CityMatchError):
    """Raised when there's a configuration problem.

    Also raised by the matching engine when no importance weight is in play,
    which leaves the score normalisation without a divisor.
    """

    pass


class DataNotFoundError(CityMatchError):
    """Raised when no listing data exists for a requested city."""

    def __init__(self, message: str, city_id: str = None):
        self.city_id = city_id
        super().__init__(message)


class ProcessingError(CityMatchError):
    """Raised when aggregating a city's listings fails unexpectedly."""

    def __init__(self, message: str, city_id: str = None):
        self.city_id = city_id
        super().__init__(message)


class ValidationError(CityMatchError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(message)
