from seatmon.core.exceptions.errors import (
    ArgumentError,
    ConfigurationError,
    DocumentParseError,
    QueryError,
    SeatmonError,
    SourceError,
    SourceTimeoutError,
)

__all__ = [
    "SeatmonError",
    "ArgumentError",
    "ConfigurationError",
    "SourceError",
    "SourceTimeoutError",
    "DocumentParseError",
    "QueryError",
]
